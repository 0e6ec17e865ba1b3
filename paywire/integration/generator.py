"""Integration plan generator.

Resolves the requested language, backend family and frontend framework to
templates, renders them through one RenderContext and assembles the
ordered IntegrationPlan:

  backend creates -> frontend create -> wiring edits -> wire_payment
"""

import logging
from typing import Optional

from paywire.credentials import Credentials, resolve_or_placeholder
from paywire.integration.dependencies import install_verb, resolve_dependencies
from paywire.integration.instructions import (
    TEST_INSTRUCTIONS,
    ai_instructions,
    backend_setup_block,
    wire_payment_action,
)
from paywire.integration.templates import coerce_backend, coerce_frontend, get_backend, get_frontend
from paywire.integration.types import (
    ActionKind,
    BackendFramework,
    CodeChange,
    EnvVar,
    FileAction,
    FrontendFramework,
    IntegrationPlan,
    Language,
    RenderContext,
)

logger = logging.getLogger(__name__)

# A Next.js app renders React, so these frontends become the Next.js entry.
_NEXTJS_PROMOTED_FRONTENDS = frozenset({FrontendFramework.REACT, FrontendFramework.VANILLA})

_BROWSER_LANGUAGES = (Language.JAVASCRIPT, Language.TYPESCRIPT)


def _coerce_language(language: Optional[str]) -> Optional[Language]:
    if isinstance(language, str):
        language = language.strip().lower()
    try:
        return Language(language)
    except ValueError:
        return None


class IntegrationPlanGenerator:
    """Builds IntegrationPlans for one set of credentials.

    Pure apart from a DEBUG log line: identical inputs give identical plans.
    """

    def __init__(self, credentials: Optional[Credentials] = None):
        self._credentials = credentials or Credentials()

    def generate(
        self,
        language: Optional[str],
        backend_framework: Optional[str],
        frontend_framework: Optional[str],
        existing_order_endpoint: Optional[str] = None,
        existing_payment_function: Optional[str] = None,
        package_manager: Optional[str] = None,
    ) -> IntegrationPlan:
        backend_key = coerce_backend(backend_framework)
        frontend_key = coerce_frontend(frontend_framework)
        if backend_key == BackendFramework.NEXTJS and frontend_key in _NEXTJS_PROMOTED_FRONTENDS:
            frontend_key = FrontendFramework.NEXTJS

        backend = get_backend(backend_key)
        frontend_template = get_frontend(frontend_key)

        requested = _coerce_language(language)
        backend_ctx = RenderContext(language=backend.resolve_language(requested))
        # Browser code follows the requested JS flavour even behind a Python or Go backend.
        frontend_language = requested if requested in _BROWSER_LANGUAGES else backend_ctx.language
        frontend_ctx = RenderContext(language=frontend_language)

        rendered = backend.render(backend_ctx)
        frontend = frontend_template.build(frontend_ctx)

        files: list[FileAction] = list(rendered.created)
        files.append(
            CodeChange(
                action=ActionKind.CREATE,
                path=frontend.file_name,
                code=frontend.code,
                description=frontend.description,
            )
        )
        files.extend(rendered.wiring)
        files.append(
            wire_payment_action(frontend, server_rendered=backend_key == BackendFramework.EXPRESS)
        )

        dependencies = resolve_dependencies(backend.ecosystem, rendered.packages, package_manager)
        install_command = f"{install_verb(backend.ecosystem, package_manager)} {' '.join(rendered.packages)}"

        key_id, key_secret = resolve_or_placeholder(self._credentials)
        env_vars = (
            EnvVar(name=backend_ctx.key_id_env, value=key_id),
            EnvVar(name=backend_ctx.key_secret_env, value=key_secret),
        )

        plan = IntegrationPlan(
            summary=(
                "Complete Razorpay Standard Checkout integration for "
                f"{rendered.label} + {frontend.framework}"
            ),
            files=tuple(files),
            dependencies=dependencies,
            env_vars=env_vars,
            test_instructions=TEST_INSTRUCTIONS,
            ai_instructions=ai_instructions(
                backend_setup_block(install_command, rendered.setup_steps),
                frontend,
                existing_order_endpoint=existing_order_endpoint,
                existing_payment_function=existing_payment_function,
            ),
        )

        logger.debug(
            "Integration plan generated: backend=%s frontend=%s language=%s files=%d",
            backend_key.value,
            frontend_key.value,
            backend_ctx.language.value,
            len(plan.files),
        )
        return plan
