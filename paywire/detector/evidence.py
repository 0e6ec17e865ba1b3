"""Evidence normalizer.

Turns the loosely-typed argument map of a detect_stack call into an
immutable Evidence record. Anything of the wrong shape is dropped rather
than rejected: missing evidence simply falls through to a lower-precedence
detection rule.
"""

import logging
from collections.abc import Mapping
from typing import Any

import yaml

from paywire.detector.types import Evidence

logger = logging.getLogger(__name__)

_DEPENDENCY_GROUPS = ("dependencies", "devDependencies")


def normalize_evidence(arguments: Mapping[str, Any]) -> Evidence:
    """Build Evidence from a raw detect_stack argument map."""
    raw_files = arguments.get("files")
    files: tuple[str, ...] = ()
    if isinstance(raw_files, (list, tuple)):
        files = tuple(f for f in raw_files if isinstance(f, str))

    package_json = arguments.get("packageJson")
    has_package_json = isinstance(package_json, Mapping)

    pubspec_yaml = _as_text(arguments.get("pubspecYaml"))

    return Evidence(
        files=files,
        has_package_json=has_package_json,
        dependencies=merge_dependencies(package_json) if has_package_json else {},
        requirements_txt=_as_text(arguments.get("requirementsTxt")),
        go_mod=_as_text(arguments.get("goMod")),
        pubspec_yaml=pubspec_yaml,
        pubspec=parse_pubspec(pubspec_yaml),
    )


def merge_dependencies(package_json: Mapping[str, Any]) -> dict[str, str]:
    """Merge dependencies and devDependencies into one name -> version map.

    Keys are unique; a package declared in both groups keeps the version
    from `dependencies`. Groups that are not mappings are ignored.
    """
    merged: dict[str, str] = {}
    for group in _DEPENDENCY_GROUPS:
        deps = package_json.get(group)
        if not isinstance(deps, Mapping):
            continue
        for name, version in deps.items():
            if isinstance(name, str) and name not in merged:
                merged[name] = "" if version is None else str(version)
    return merged


def parse_pubspec(text: str) -> dict[str, Any]:
    """Best-effort parse of pubspec.yaml. Returns {} when unusable."""
    if not text:
        return {}
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        logger.warning("Failed to parse pubspec.yaml: %s", exc)
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""
