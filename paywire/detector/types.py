"""Shared types for the detector module.

Evidence is the normalised input; StackProfile is the single output.
Confidence values are fixed per detection branch; they are policy
constants, not computed statistics.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

MOBILE_CONFIDENCE = 0.95
MODULE_CONFIDENCE = 0.9
SCRIPTING_CONFIDENCE = 0.85
NODE_CONFIDENCE = 0.9
UNKNOWN_CONFIDENCE = 0.1

UNKNOWN = "unknown"


@dataclass(frozen=True)
class Evidence:
    """Everything the detector is allowed to look at for one request.

    dependencies is the merged dependencies + devDependencies mapping from
    package.json (first declaration wins). pubspec is the parsed form of
    pubspec_yaml, used for notes only.
    """

    files: tuple[str, ...] = ()
    has_package_json: bool = False
    dependencies: Mapping[str, str] = field(default_factory=dict)
    requirements_txt: str = ""
    go_mod: str = ""
    pubspec_yaml: str = ""
    pubspec: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Exposed read-only.
        object.__setattr__(self, "dependencies", MappingProxyType(dict(self.dependencies)))
        object.__setattr__(self, "pubspec", MappingProxyType(dict(self.pubspec)))


@dataclass
class StackProfile:
    """Detection output for a project.

    language and framework are always non-empty ("unknown" when no rule
    matched). frontend is omitted from the serialised form when empty.
    """

    language: str = UNKNOWN
    framework: str = UNKNOWN
    frontend: str = ""
    package_manager: str = UNKNOWN
    is_full_stack: bool = False
    confidence: float = UNKNOWN_CONFIDENCE
    notes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "language": self.language,
            "framework": self.framework,
        }
        if self.frontend:
            data["frontend"] = self.frontend
        data.update({
            "packageManager": self.package_manager,
            "isFullStack": self.is_full_stack,
            "confidence": self.confidence,
            "notes": list(self.notes),
        })
        return data
