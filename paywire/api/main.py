from typing import Optional

from fastapi import FastAPI

from paywire import __version__
from paywire.api.router import router as tools_router
from paywire.core.config import Settings, get_settings
from paywire.core.middleware import RequestIdMiddleware
from paywire.tools import build_toolset_group


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    _app = FastAPI(
        title="Paywire API",
        description="Stack detection and Razorpay checkout integration plans for coding agents",
        version=__version__,
    )

    # ---------------------------------------------------------------------------
    # Middleware
    # ---------------------------------------------------------------------------

    # Request ID: inject / forward X-Request-ID and bind to ContextVar
    _app.add_middleware(RequestIdMiddleware)

    # ---------------------------------------------------------------------------
    # Logging: configure structlog before any tool logs anything
    # ---------------------------------------------------------------------------
    from paywire.core.logging import configure_structlog

    configure_structlog(debug=settings.debug)

    # ---------------------------------------------------------------------------
    # Tools: credentials are resolved once here and held by the generator
    # ---------------------------------------------------------------------------
    _app.state.toolset_group = build_toolset_group(settings)

    # ---------------------------------------------------------------------------
    # Routes
    # ---------------------------------------------------------------------------

    @_app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    _app.include_router(tools_router)

    return _app
