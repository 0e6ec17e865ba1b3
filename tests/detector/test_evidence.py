"""Tests for the evidence normalizer.

Wrong-shaped inputs are dropped, never rejected.
"""

import pytest

from paywire.detector.evidence import merge_dependencies, normalize_evidence, parse_pubspec
from paywire.detector.types import Evidence


class TestNormalizeEvidence:
    def test_empty_arguments_give_empty_evidence(self):
        evidence = normalize_evidence({})
        assert evidence.files == ()
        assert evidence.has_package_json is False
        assert evidence.dependencies == {}
        assert evidence.requirements_txt == ""

    def test_non_string_files_are_dropped(self):
        evidence = normalize_evidence({"files": ["a.py", 3, None, "b.go"]})
        assert evidence.files == ("a.py", "b.go")

    def test_files_not_a_list_is_ignored(self):
        evidence = normalize_evidence({"files": "main.go"})
        assert evidence.files == ()

    def test_package_json_must_be_a_mapping(self):
        evidence = normalize_evidence({"packageJson": ["express"]})
        assert evidence.has_package_json is False
        assert evidence.dependencies == {}

    def test_non_string_text_fields_become_empty(self):
        evidence = normalize_evidence({"goMod": 42, "requirementsTxt": ["flask"]})
        assert evidence.go_mod == ""
        assert evidence.requirements_txt == ""

    def test_pubspec_is_parsed(self):
        evidence = normalize_evidence({"pubspecYaml": "name: app\ndependencies:\n  flutter:\n    sdk: flutter\n"})
        assert evidence.pubspec["name"] == "app"


class TestMergeDependencies:
    def test_merges_dev_dependencies(self):
        merged = merge_dependencies({
            "dependencies": {"express": "^4.18.0"},
            "devDependencies": {"typescript": "^5.0.0"},
        })
        assert merged == {"express": "^4.18.0", "typescript": "^5.0.0"}

    def test_runtime_version_wins_over_dev(self):
        merged = merge_dependencies({
            "dependencies": {"react": "18.2.0"},
            "devDependencies": {"react": "17.0.0"},
        })
        assert merged["react"] == "18.2.0"

    def test_non_mapping_groups_are_ignored(self):
        merged = merge_dependencies({"dependencies": ["express"], "devDependencies": None})
        assert merged == {}

    def test_versions_are_stringified(self):
        merged = merge_dependencies({"dependencies": {"odd": 1, "none": None}})
        assert merged == {"odd": "1", "none": ""}


class TestParsePubspec:
    def test_empty_text_returns_empty(self):
        assert parse_pubspec("") == {}

    def test_invalid_yaml_returns_empty(self):
        assert parse_pubspec("dependencies: [unclosed") == {}

    def test_scalar_document_returns_empty(self):
        assert parse_pubspec("just a string") == {}


class TestEvidenceIsReadOnly:
    def test_dependencies_cannot_be_mutated(self):
        evidence = normalize_evidence({"packageJson": {"dependencies": {"express": "4"}}})
        with pytest.raises(TypeError):
            evidence.dependencies["koa"] = "2"
        assert dict(evidence.dependencies) == {"express": "4"}

    def test_caller_dict_is_copied(self):
        source = {"express": "4"}
        evidence = Evidence(dependencies=source)
        source["koa"] = "2"
        assert "koa" not in evidence.dependencies
