"""Python framework detection from requirements text and project files.

Framework names are matched as case-insensitive substrings of the
requirements text, in a fixed order. A framework bootstrap file in the
file list is authoritative over any textual match.
"""

from paywire.detector.files import has_file_named, has_suffix
from paywire.detector.types import SCRIPTING_CONFIDENCE, Evidence, StackProfile

FRAMEWORK_INDICATORS: list[str] = ["django", "flask", "fastapi", "starlette"]

DEFAULT_FRAMEWORK = "python-stdlib"

# Lock files checked in priority order; pip when none is present.
LOCK_FILES: list[tuple[str, str]] = [
    ("uv.lock", "uv"),
    ("poetry.lock", "poetry"),
    ("Pipfile.lock", "pipenv"),
]

DEFAULT_PACKAGE_MANAGER = "pip"


def is_python_project(evidence: Evidence) -> bool:
    return bool(evidence.requirements_txt) or has_suffix(
        evidence.files, "requirements.txt", "pyproject.toml"
    )


def detect_framework(requirements_txt: str, files: tuple[str, ...]) -> str:
    framework = DEFAULT_FRAMEWORK
    text = requirements_txt.lower()
    for name in FRAMEWORK_INDICATORS:
        if name in text:
            framework = name
            break

    if has_file_named(files, "manage.py"):
        framework = "django"
    if framework == DEFAULT_FRAMEWORK and has_suffix(files, "app.py"):
        framework = "flask"
    return framework


def detect_package_manager(files: tuple[str, ...]) -> str:
    for filename, pm in LOCK_FILES:
        if has_file_named(files, filename):
            return pm
    return DEFAULT_PACKAGE_MANAGER


def detect_python(evidence: Evidence) -> StackProfile:
    framework = detect_framework(evidence.requirements_txt, evidence.files)
    return StackProfile(
        language="python",
        framework=framework,
        package_manager=detect_package_manager(evidence.files),
        is_full_stack=True,
        confidence=SCRIPTING_CONFIDENCE,
        notes=[f"Python project with {framework}"],
    )
