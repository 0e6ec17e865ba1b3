"""package.json detection for JavaScript / TypeScript projects.

Infers language, package manager, backend framework and frontend framework
from the merged dependency map and the file list.
"""

from collections.abc import Mapping

from paywire.detector.files import has_file_named, has_suffix
from paywire.detector.types import (
    MOBILE_CONFIDENCE,
    NODE_CONFIDENCE,
    Evidence,
    StackProfile,
)

# Maps dependency names to backend framework identifiers.
# Order matters: first match wins. Meta-frameworks go before the plain
# HTTP routers they are often installed alongside.
FRAMEWORK_INDICATORS: list[tuple[str, str]] = [
    ("next", "nextjs"),
    ("nuxt", "nuxt"),
    ("@nestjs/core", "nestjs"),
    ("express", "express"),
    ("fastify", "fastify"),
    ("koa", "koa"),
    ("hono", "hono"),
]

# Maps dependency names to frontend framework identifiers.
# React Native projects also depend on react, so the mobile toolkits
# must be checked first.
FRONTEND_INDICATORS: list[tuple[str, str]] = [
    ("react-native", "react-native"),
    ("expo", "react-native"),
    ("@angular/core", "angular"),
    ("vue", "vue"),
    ("svelte", "svelte"),
    ("solid-js", "solid"),
    ("react", "react"),
]

# Lock files checked in priority order; npm when none is present.
LOCK_FILES: list[tuple[str, str]] = [
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
    ("bun.lockb", "bun"),
    ("package-lock.json", "npm"),
]

META_FRAMEWORKS = frozenset({"nextjs", "nuxt", "nestjs"})

DEFAULT_FRAMEWORK = "node"
DEFAULT_PACKAGE_MANAGER = "npm"
MOBILE_FRONTEND = "react-native"


def is_node_project(evidence: Evidence) -> bool:
    return evidence.has_package_json or has_suffix(evidence.files, "package.json")


def detect_language(evidence: Evidence) -> str:
    if has_suffix(evidence.files, ".ts", ".tsx") or "typescript" in evidence.dependencies:
        return "typescript"
    return "javascript"


def detect_package_manager(files: tuple[str, ...]) -> str:
    for filename, pm in LOCK_FILES:
        if has_file_named(files, filename):
            return pm
    return DEFAULT_PACKAGE_MANAGER


def _scan(
    dependencies: Mapping[str, str],
    indicators: list[tuple[str, str]],
) -> tuple[str, str] | None:
    for dep_name, framework in indicators:
        if dep_name in dependencies:
            return dep_name, framework
    return None


def detect_node(evidence: Evidence) -> StackProfile:
    language = detect_language(evidence)
    package_manager = detect_package_manager(evidence.files)
    notes = [f"Node.js project ({language}, {package_manager})"]

    framework = DEFAULT_FRAMEWORK
    backend_match = _scan(evidence.dependencies, FRAMEWORK_INDICATORS)
    if backend_match:
        dep_name, framework = backend_match
        notes.append(f"Found {dep_name} in dependencies")

    frontend = ""
    frontend_match = _scan(evidence.dependencies, FRONTEND_INDICATORS)
    if frontend_match:
        dep_name, frontend = frontend_match
        notes.append(f"Found {dep_name} for frontend")

    if frontend == MOBILE_FRONTEND:
        return StackProfile(
            language=language,
            framework=MOBILE_FRONTEND,
            package_manager=package_manager,
            is_full_stack=False,
            confidence=MOBILE_CONFIDENCE,
            notes=["React Native mobile app detected"],
        )

    # A backend with no separate frontend is treated as full-stack.
    is_full_stack = framework in META_FRAMEWORKS or (
        framework != DEFAULT_FRAMEWORK and not frontend
    )

    return StackProfile(
        language=language,
        framework=framework,
        frontend=frontend,
        package_manager=package_manager,
        is_full_stack=is_full_stack,
        confidence=NODE_CONFIDENCE,
        notes=notes,
    )
