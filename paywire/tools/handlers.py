"""Tool handlers shared by the HTTP app and the MCP server.

Handlers never raise for bad input: a non-mapping argument object or a
validation failure comes back as an error ToolResult with no partial
output.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from paywire.core.logging import bind_tool_name, reset_tool_name
from paywire.detector import detect, normalize_evidence
from paywire.integration import IntegrationPlanGenerator
from paywire.tools.schemas import DetectStackArguments, IntegrateCheckoutArguments, ToolResult

logger = logging.getLogger(__name__)

DETECT_STACK = "detect_stack"
INTEGRATE_CHECKOUT = "integrate_razorpay_checkout"


def _invalid(exc: Optional[ValidationError] = None) -> ToolResult:
    if exc is None:
        return ToolResult.fail("Invalid arguments: expected an object")
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
        for err in exc.errors()
    )
    return ToolResult.fail(f"Invalid arguments: {problems}")


def detect_stack(arguments: Any) -> ToolResult:
    """Classify a project's stack from file names and manifest contents."""
    token = bind_tool_name(DETECT_STACK)
    try:
        if not isinstance(arguments, Mapping):
            logger.warning("Rejected non-object arguments")
            return _invalid()
        try:
            args = DetectStackArguments.model_validate(dict(arguments))
        except ValidationError as exc:
            logger.warning("Argument validation failed: %d error(s)", exc.error_count())
            return _invalid(exc)

        evidence = normalize_evidence(args.model_dump(by_alias=True, exclude_none=True))
        return ToolResult.ok(detect(evidence).to_dict())
    finally:
        reset_tool_name(token)


def integrate_checkout(arguments: Any, generator: IntegrationPlanGenerator) -> ToolResult:
    """Produce the complete checkout integration plan for a stack."""
    token = bind_tool_name(INTEGRATE_CHECKOUT)
    try:
        if not isinstance(arguments, Mapping):
            logger.warning("Rejected non-object arguments")
            return _invalid()
        try:
            args = IntegrateCheckoutArguments.model_validate(dict(arguments))
        except ValidationError as exc:
            logger.warning("Argument validation failed: %d error(s)", exc.error_count())
            return _invalid(exc)

        plan = generator.generate(
            language=args.language,
            backend_framework=args.backend_framework,
            frontend_framework=args.frontend_framework,
            existing_order_endpoint=args.existing_order_endpoint,
            existing_payment_function=args.existing_payment_function,
            package_manager=args.package_manager,
        )
        logger.info("Integration plan ready: %s", plan.summary)
        return ToolResult.ok(plan.to_dict())
    finally:
        reset_tool_name(token)
