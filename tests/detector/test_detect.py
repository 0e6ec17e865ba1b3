"""Tests for the detection orchestrator: precedence and fallback."""

import pytest

from paywire.detector import detect, normalize_evidence
from paywire.detector.types import (
    MOBILE_CONFIDENCE,
    MODULE_CONFIDENCE,
    NODE_CONFIDENCE,
    SCRIPTING_CONFIDENCE,
    UNKNOWN_CONFIDENCE,
)


def _detect(**arguments):
    return detect(normalize_evidence(arguments))


class TestPrecedence:
    def test_pubspec_beats_everything(self):
        result = _detect(
            files=["pubspec.yaml", "go.mod", "requirements.txt", "package.json"],
            packageJson={"dependencies": {"express": "4"}},
        )
        assert result.language == "dart"
        assert result.framework == "flutter"
        assert result.package_manager == "pub"
        assert result.confidence == MOBILE_CONFIDENCE
        assert result.is_full_stack is False

    def test_go_beats_python_and_node(self):
        result = _detect(
            files=["go.mod", "requirements.txt", "package.json"],
            goMod="module x\nrequire github.com/gin-gonic/gin v1.9.1\n",
            requirementsTxt="django",
        )
        assert result.language == "go"
        assert result.framework == "gin"

    def test_python_beats_node(self):
        result = _detect(
            files=["requirements.txt", "package.json"],
            requirementsTxt="fastapi==0.110",
            packageJson={"dependencies": {"react": "18"}},
        )
        assert result.language == "python"
        assert result.framework == "fastapi"

    def test_node_when_only_package_json(self):
        result = _detect(files=["package.json"], packageJson={"dependencies": {"express": "4"}})
        assert result.language == "javascript"
        assert result.framework == "express"
        assert result.confidence == NODE_CONFIDENCE


class TestFallback:
    def test_nothing_matched(self):
        result = _detect(files=["README.md", "Makefile"])
        assert result.language == "unknown"
        assert result.framework == "unknown"
        assert result.package_manager == "unknown"
        assert result.confidence == UNKNOWN_CONFIDENCE
        assert result.notes == ["Could not detect project stack"]

    def test_fallback_omits_frontend_in_dict(self):
        data = _detect(files=[]).to_dict()
        assert "frontend" not in data
        assert data["isFullStack"] is False


class TestConfidenceConstants:
    @pytest.mark.parametrize(
        "arguments,expected",
        [
            ({"files": ["pubspec.yaml"]}, MOBILE_CONFIDENCE),
            ({"files": ["go.mod"]}, MODULE_CONFIDENCE),
            ({"files": ["requirements.txt"]}, SCRIPTING_CONFIDENCE),
            ({"files": ["package.json"]}, NODE_CONFIDENCE),
        ],
    )
    def test_confidence_per_branch(self, arguments, expected):
        assert _detect(**arguments).confidence == expected


class TestFlutter:
    def test_flutter_sdk_note(self):
        result = _detect(
            files=["pubspec.yaml"],
            pubspecYaml="name: shop\ndependencies:\n  flutter:\n    sdk: flutter\n",
        )
        assert "pubspec.yaml declares the flutter SDK dependency" in result.notes

    def test_broken_pubspec_still_detects_flutter(self):
        result = _detect(pubspecYaml="dependencies: [unclosed")
        assert result.framework == "flutter"
