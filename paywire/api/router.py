"""Tool endpoints for the paywire HTTP API.

Routes:
  GET  /tools         list enabled tools with their JSON input schemas
  POST /tools/{name}  run a tool; the request body is its argument object

Tool errors (bad arguments) are still 200 responses with isError set, so
agents handle them the same way over HTTP and MCP. Only an unknown or
disabled tool name is a 404.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from paywire.tools import ToolNotFound, ToolsetGroup

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["tools"])


def get_toolset_group(request: Request) -> ToolsetGroup:
    return request.app.state.toolset_group


@router.get("")
async def list_tools(group: ToolsetGroup = Depends(get_toolset_group)) -> dict[str, Any]:
    return {"tools": [tool.to_dict() for tool in group.enabled_tools()]}


@router.post("/{name}")
async def call_tool(
    name: str,
    arguments: Any = Body(default=None),
    group: ToolsetGroup = Depends(get_toolset_group),
) -> dict[str, Any]:
    try:
        tool = group.get_tool(name)
    except ToolNotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )

    result = tool.handler(arguments)
    if result.is_error:
        logger.info("Tool %s returned an error: %s", name, result.error)
    return result.to_dict()
