"""Detector orchestrator: applies ecosystem rules in a fixed precedence.

Detection order (first match wins; later rules never override earlier ones
even when evidence for both is present):
  pubspec.yaml                        → Flutter (dart)
  go.mod                              → Go
  requirements.txt / pyproject.toml   → Python
  package.json                        → JavaScript / TypeScript
  nothing matched                     → unknown (confidence 0.1)
"""

import logging
from collections.abc import Callable

from paywire.detector.gomod import detect_go, is_go_project
from paywire.detector.package_json import detect_node, is_node_project
from paywire.detector.pubspec import detect_flutter, is_flutter_project
from paywire.detector.requirements import detect_python, is_python_project
from paywire.detector.types import Evidence, StackProfile

logger = logging.getLogger(__name__)

DetectionRule = tuple[str, Callable[[Evidence], bool], Callable[[Evidence], StackProfile]]

DETECTION_RULES: list[DetectionRule] = [
    ("flutter", is_flutter_project, detect_flutter),
    ("go", is_go_project, detect_go),
    ("python", is_python_project, detect_python),
    ("node", is_node_project, detect_node),
]


def detect(evidence: Evidence) -> StackProfile:
    """Classify a project's stack from normalised evidence.

    Pure function: no I/O, no side effects beyond a single log line.
    """
    for name, matches, detect_stack in DETECTION_RULES:
        if matches(evidence):
            logger.debug("Detection rule matched: %s", name)
            result = detect_stack(evidence)
            break
    else:
        result = StackProfile(notes=["Could not detect project stack"])

    _log_result(result)
    return result


def _log_result(result: StackProfile) -> None:
    logger.info(
        "Detection complete: language=%s framework=%s frontend=%s confidence=%.2f",
        result.language,
        result.framework,
        result.frontend or "-",
        result.confidence,
    )
