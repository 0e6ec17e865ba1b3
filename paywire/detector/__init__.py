"""Detector module for classifying a project's technology stack.

Public API:
    normalize_evidence(arguments) -> Evidence
    detect(evidence) -> StackProfile
"""

from paywire.detector.evidence import normalize_evidence
from paywire.detector.orchestrator import detect
from paywire.detector.types import Evidence, StackProfile

__all__ = ["detect", "normalize_evidence", "Evidence", "StackProfile"]
