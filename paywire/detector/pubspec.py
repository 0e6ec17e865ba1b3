"""Flutter detection from pubspec.yaml."""

from paywire.detector.files import has_suffix
from paywire.detector.types import MOBILE_CONFIDENCE, Evidence, StackProfile


def is_flutter_project(evidence: Evidence) -> bool:
    return bool(evidence.pubspec_yaml) or has_suffix(evidence.files, "pubspec.yaml")


def detect_flutter(evidence: Evidence) -> StackProfile:
    notes = ["Flutter mobile app detected"]
    dependencies = evidence.pubspec.get("dependencies")
    if isinstance(dependencies, dict) and "flutter" in dependencies:
        notes.append("pubspec.yaml declares the flutter SDK dependency")

    return StackProfile(
        language="dart",
        framework="flutter",
        package_manager="pub",
        is_full_stack=False,
        confidence=MOBILE_CONFIDENCE,
        notes=notes,
    )
