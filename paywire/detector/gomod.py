"""go.mod framework detection.

The module file is searched as plain text for known web framework import
paths. The check order is fixed and the first match wins.
"""

from paywire.detector.files import has_suffix
from paywire.detector.types import MODULE_CONFIDENCE, Evidence, StackProfile

FRAMEWORK_INDICATORS: list[tuple[str, str]] = [
    ("github.com/gin-gonic/gin", "gin"),
    ("github.com/labstack/echo", "echo"),
    ("github.com/gofiber/fiber", "fiber"),
]

DEFAULT_FRAMEWORK = "go-stdlib"


def is_go_project(evidence: Evidence) -> bool:
    return bool(evidence.go_mod) or has_suffix(evidence.files, "go.mod")


def detect_framework(go_mod: str) -> str:
    for module_path, framework in FRAMEWORK_INDICATORS:
        if module_path in go_mod:
            return framework
    return DEFAULT_FRAMEWORK


def detect_go(evidence: Evidence) -> StackProfile:
    framework = detect_framework(evidence.go_mod)
    return StackProfile(
        language="go",
        framework=framework,
        package_manager="go-mod",
        is_full_stack=True,
        confidence=MODULE_CONFIDENCE,
        notes=[f"Go project with {framework}"],
    )
