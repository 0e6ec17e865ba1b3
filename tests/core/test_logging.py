"""Tests for the structlog configuration and its processors."""

import io
import json
import logging

import structlog

from paywire.core.logging import (
    _redact_secrets,
    bind_tool_name,
    configure_structlog,
    get_tool_name,
    reset_tool_name,
)


class TestConfigureStructlog:
    def test_configure_does_not_raise_in_debug_mode(self) -> None:
        configure_structlog(debug=True)

    def test_configure_multiple_times_is_safe(self) -> None:
        configure_structlog(debug=True)
        configure_structlog(debug=False)

    def test_json_output_goes_to_given_stream(self) -> None:
        stream = io.StringIO()
        configure_structlog(debug=False, stream=stream)
        structlog.get_logger("test").info("plan ready", files=4)
        line = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert line["event"] == "plan ready"
        assert line["files"] == 4

    def test_stdlib_loggers_are_bridged(self) -> None:
        stream = io.StringIO()
        configure_structlog(debug=False, stream=stream)
        logging.getLogger("paywire.test").info("stdlib message")
        assert "stdlib message" in stream.getvalue()

    def test_secrets_never_rendered(self) -> None:
        stream = io.StringIO()
        configure_structlog(debug=False, stream=stream)
        structlog.get_logger("test").info("creds", razorpay_key_secret="hunter2")
        assert "hunter2" not in stream.getvalue()
        assert "[REDACTED]" in stream.getvalue()

    def test_tool_name_injected(self) -> None:
        stream = io.StringIO()
        configure_structlog(debug=False, stream=stream)
        token = bind_tool_name("detect_stack")
        try:
            structlog.get_logger("test").info("running")
        finally:
            reset_tool_name(token)
        assert '"tool": "detect_stack"' in stream.getvalue()


class TestRedactSecrets:
    def test_nested_values_redacted(self) -> None:
        event = {"event": "x", "config": {"key_id": "rzp_test_1", "mode": "test"}, "token": "t"}
        result = _redact_secrets(None, "info", event)
        assert result["config"] == {"key_id": "[REDACTED]", "mode": "test"}
        assert result["token"] == "[REDACTED]"
        assert result["event"] == "x"


class TestToolContext:
    def test_bind_and_reset(self) -> None:
        token = bind_tool_name("integrate_razorpay_checkout")
        assert get_tool_name() == "integrate_razorpay_checkout"
        reset_tool_name(token)
        assert get_tool_name() == ""
