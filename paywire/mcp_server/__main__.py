import argparse
import asyncio
import logging
import sys

from paywire.core.config import get_settings
from paywire.core.logging import configure_structlog
from paywire.mcp_server.server import build_server

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Paywire MCP Server - stack detection and Razorpay checkout integration",
        epilog="Example: python -m paywire.mcp_server --toolsets checkout_integration --read-only",
    )
    parser.add_argument(
        "--toolsets",
        help="Comma-separated toolsets to enable (default: TOOLSETS env var or 'all')",
    )
    parser.add_argument(
        "--read-only",
        action="store_true",
        help="Hide write tools",
    )
    args = parser.parse_args()

    settings = get_settings()
    overrides = {}
    if args.toolsets:
        overrides["toolsets"] = [name.strip() for name in args.toolsets.split(",") if name.strip()]
    if args.read_only:
        overrides["read_only"] = True
    if overrides:
        settings = settings.model_copy(update=overrides)

    # stdout carries the protocol; logs go to stderr.
    configure_structlog(debug=settings.debug, stream=sys.stderr)

    server = build_server(settings)
    logger.info("Server running on stdio")
    try:
        asyncio.run(server.run_stdio_async())
    except KeyboardInterrupt:
        logger.info("Server stopped")


if __name__ == "__main__":
    main()
