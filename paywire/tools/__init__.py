"""Tool layer: argument schemas, handlers and the toolset registry.

Public API:
    build_toolset_group(settings) -> ToolsetGroup
    detect_stack(arguments) -> ToolResult
    integrate_checkout(arguments, generator) -> ToolResult
"""

from paywire.tools.handlers import detect_stack, integrate_checkout
from paywire.tools.schemas import ToolResult
from paywire.tools.toolsets import (
    Tool,
    ToolNotFound,
    Toolset,
    ToolsetGroup,
    UnknownToolsetError,
    build_toolset_group,
)

__all__ = [
    "build_toolset_group",
    "detect_stack",
    "integrate_checkout",
    "Tool",
    "Toolset",
    "ToolsetGroup",
    "ToolResult",
    "ToolNotFound",
    "UnknownToolsetError",
]
