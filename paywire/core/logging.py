"""Structured logging via structlog.

Configures structlog once at process startup. All subsequent calls to
`structlog.get_logger()` (or `logging.getLogger()` via the stdlib bridge)
use this configuration.

Renderer selection:
  debug=True   `ConsoleRenderer` with colours for local development.
  debug=False  `JSONRenderer` for machine-parseable logs.

Output stream:
  The HTTP app logs to stdout. The MCP stdio server must pass `sys.stderr`
  because stdout carries the protocol frames.

ContextVar injection:
  `request_id` (set by the HTTP middleware) and `tool` (set while a tool
  handler runs) are injected into every log line.

Redaction:
  Any event key that looks like a credential is replaced with "[REDACTED]"
  before rendering, so a stray `logger.info(..., key_secret=...)` cannot
  leak the Razorpay secret.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Any, TextIO

import structlog

from paywire.core.middleware import get_request_id

_tool_var: ContextVar[str] = ContextVar("tool", default="")

_SENSITIVE_KEYS = frozenset({"secret", "key_id", "password", "token"})


def get_tool_name() -> str:
    """Return the tool currently being handled, or empty string if none."""
    return _tool_var.get()


def bind_tool_name(name: str):
    """Bind the running tool's name; returns a token for `reset_tool_name`."""
    return _tool_var.set(name)


def reset_tool_name(token) -> None:
    _tool_var.reset(token)


def _inject_context_vars(
    logger: logging.Logger,
    method: str,
    event_dict: dict,
) -> dict:
    """Structlog processor: inject request_id and tool from ContextVars."""
    request_id = get_request_id()
    tool = get_tool_name()
    if request_id:
        event_dict["request_id"] = request_id
    if tool:
        event_dict["tool"] = tool
    return event_dict


def _redact_secrets(
    logger: logging.Logger,
    method: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor: redact values for credential-like keys."""
    _scrub_dict(event_dict)
    return event_dict


def _scrub_dict(d: dict[str, Any]) -> None:
    for key in list(d.keys()):
        if any(sensitive in key.lower() for sensitive in _SENSITIVE_KEYS):
            d[key] = "[REDACTED]"
        elif isinstance(d[key], dict):
            _scrub_dict(d[key])


def configure_structlog(debug: bool = True, stream: TextIO | None = None) -> None:
    """Configure structlog for the process lifetime.

    Call once from the composition root before any tool is served.
    Calling it more than once is safe.
    """
    stream = stream or sys.stdout

    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _inject_context_vars,
        _redact_secrets,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    # Bridge stdlib logging so module loggers (logging.getLogger(__name__))
    # run through the same processors, including redaction.
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.add_logger_name, *shared_processors],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    logging.basicConfig(
        handlers=[handler],
        level=logging.DEBUG if debug else logging.INFO,
        force=True,
    )
