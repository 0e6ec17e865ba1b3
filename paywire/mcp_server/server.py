"""MCP stdio server exposing the enabled paywire tools.

Tool functions here are thin adapters: they rebuild the camelCase argument
object agents send and delegate to the shared handlers, so validation and
results match the HTTP API exactly. An error ToolResult is raised as
ToolError, which FastMCP reports to the client with isError set.
"""

import logging
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from paywire.core.config import Settings, get_settings
from paywire.tools import build_toolset_group
from paywire.tools.handlers import DETECT_STACK, INTEGRATE_CHECKOUT

logger = logging.getLogger(__name__)

SERVER_NAME = "paywire"


def _present(**arguments: Any) -> dict[str, Any]:
    return {key: value for key, value in arguments.items() if value is not None}


def build_server(settings: Optional[Settings] = None) -> FastMCP:
    """Create a FastMCP server with one tool per enabled toolset tool."""
    settings = settings or get_settings()
    group = build_toolset_group(settings)
    enabled = {tool.name: tool for tool in group.enabled_tools()}

    server = FastMCP(SERVER_NAME)

    def run(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        result = enabled[name].handler(arguments)
        if result.is_error:
            raise ToolError(result.error)
        return result.content

    if DETECT_STACK in enabled:

        @server.tool(name=DETECT_STACK, description=enabled[DETECT_STACK].description)
        def detect_stack_tool(
            files: list[str] = Field(description="List of file paths in the project"),
            packageJson: Optional[dict[str, Any]] = Field(
                default=None, description="Contents of package.json if it exists"
            ),
            requirementsTxt: Optional[str] = Field(
                default=None, description="Contents of requirements.txt if it exists"
            ),
            goMod: Optional[str] = Field(default=None, description="Contents of go.mod if it exists"),
            pubspecYaml: Optional[str] = Field(
                default=None, description="Contents of pubspec.yaml if it exists (Flutter)"
            ),
        ) -> dict[str, Any]:
            return run(
                DETECT_STACK,
                _present(
                    files=files,
                    packageJson=packageJson,
                    requirementsTxt=requirementsTxt,
                    goMod=goMod,
                    pubspecYaml=pubspecYaml,
                ),
            )

    if INTEGRATE_CHECKOUT in enabled:

        @server.tool(name=INTEGRATE_CHECKOUT, description=enabled[INTEGRATE_CHECKOUT].description)
        def integrate_checkout_tool(
            language: str = Field(description="Programming language: javascript, typescript, python, or go"),
            backendFramework: str = Field(
                description="Backend framework: express, nextjs, django, flask, fastapi, gin, echo, or fiber"
            ),
            frontendFramework: str = Field(
                description="Frontend framework: vanilla, react, nextjs, vue, nuxt, angular, svelte, or solid"
            ),
            existingOrderEndpoint: Optional[str] = Field(
                default=None,
                description="Existing order creation endpoint path if any (e.g., /api/orders/create)",
            ),
            existingPaymentFunction: Optional[str] = Field(
                default=None, description="Existing payment/checkout function name in frontend if any"
            ),
            packageManager: Optional[str] = Field(
                default=None, description="Package manager reported by detect_stack"
            ),
        ) -> dict[str, Any]:
            return run(
                INTEGRATE_CHECKOUT,
                _present(
                    language=language,
                    backendFramework=backendFramework,
                    frontendFramework=frontendFramework,
                    existingOrderEndpoint=existingOrderEndpoint,
                    existingPaymentFunction=existingPaymentFunction,
                    packageManager=packageManager,
                ),
            )

    logger.info("MCP server ready with tools: %s", ", ".join(enabled) or "-")
    return server
