"""Integration template library.

Each template renders one frontend framework or one backend family.
Lookups never fail: unknown keys fall back to the vanilla frontend and
the Express backend.
"""

from typing import Optional

from paywire.integration.templates.base import BackendTemplate, FrontendTemplate
from paywire.integration.templates.frontend import (
    AngularFrontend,
    NextjsFrontend,
    NuxtFrontend,
    ReactFrontend,
    SolidFrontend,
    SvelteFrontend,
    VanillaFrontend,
    VueFrontend,
)
from paywire.integration.templates.go import EchoBackend, FiberBackend, GinBackend
from paywire.integration.templates.node import ExpressBackend, NextjsBackend
from paywire.integration.templates.python import DjangoBackend, FastAPIBackend, FlaskBackend
from paywire.integration.types import BackendFramework, FrontendFramework

# Registry: maps frontend framework -> template class
FRONTEND_REGISTRY: dict[FrontendFramework, type[FrontendTemplate]] = {
    FrontendFramework.VANILLA: VanillaFrontend,
    FrontendFramework.REACT: ReactFrontend,
    FrontendFramework.NEXTJS: NextjsFrontend,
    FrontendFramework.VUE: VueFrontend,
    FrontendFramework.NUXT: NuxtFrontend,
    FrontendFramework.ANGULAR: AngularFrontend,
    FrontendFramework.SVELTE: SvelteFrontend,
    FrontendFramework.SOLID: SolidFrontend,
}

# Registry: maps backend framework -> template class
BACKEND_REGISTRY: dict[BackendFramework, type[BackendTemplate]] = {
    BackendFramework.EXPRESS: ExpressBackend,
    BackendFramework.NEXTJS: NextjsBackend,
    BackendFramework.DJANGO: DjangoBackend,
    BackendFramework.FLASK: FlaskBackend,
    BackendFramework.FASTAPI: FastAPIBackend,
    BackendFramework.GIN: GinBackend,
    BackendFramework.ECHO: EchoBackend,
    BackendFramework.FIBER: FiberBackend,
}

DEFAULT_FRONTEND = FrontendFramework.VANILLA
DEFAULT_BACKEND = BackendFramework.EXPRESS


def _normalize(key: Optional[str]) -> Optional[str]:
    return key.strip().lower() if isinstance(key, str) else key


def coerce_frontend(key: Optional[str]) -> FrontendFramework:
    try:
        return FrontendFramework(_normalize(key))
    except ValueError:
        return DEFAULT_FRONTEND


def coerce_backend(key: Optional[str]) -> BackendFramework:
    try:
        return BackendFramework(_normalize(key))
    except ValueError:
        return DEFAULT_BACKEND


def get_frontend(key: Optional[str]) -> FrontendTemplate:
    """Return a frontend template instance, defaulting to vanilla JS."""
    return FRONTEND_REGISTRY[coerce_frontend(key)]()


def get_backend(key: Optional[str]) -> BackendTemplate:
    """Return a backend template instance, defaulting to Express."""
    return BACKEND_REGISTRY[coerce_backend(key)]()


__all__ = [
    "BackendTemplate",
    "FrontendTemplate",
    "FRONTEND_REGISTRY",
    "BACKEND_REGISTRY",
    "coerce_backend",
    "coerce_frontend",
    "get_backend",
    "get_frontend",
]
