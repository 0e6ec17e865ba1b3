"""Base classes for all integration templates.

Each template is a pure renderer: it receives a RenderContext and returns
the code (frontend) or the files, wiring edits and packages (backend) for
one framework family. Templates never see credential values.

Template sources use `%%name` placeholders so that JavaScript `${...}`
literals and Go `%d` verbs pass through untouched.
"""

import string
from abc import ABC, abstractmethod
from typing import Optional

from paywire.integration.types import (
    BackendIntegration,
    FrontendIntegration,
    Language,
    RenderContext,
)


class CodeTemplate(string.Template):
    delimiter = "%%"


def fill(source: str, ctx: RenderContext, **extra: str) -> str:
    """Substitute the context's URLs and env var names into a source template.

    Raises KeyError for an unknown placeholder so a typo fails loudly in
    tests rather than shipping `%%name` into a user's project.
    """
    values = {
        "api_prefix": ctx.api_prefix,
        "order_url": ctx.order_url,
        "verify_url": ctx.verify_url,
        "key_id_env": ctx.key_id_env,
        "key_secret_env": ctx.key_secret_env,
    }
    values.update(extra)
    return CodeTemplate(source).substitute(values)


class FrontendTemplate(ABC):
    """Abstract base class for frontend checkout artifacts."""

    #: Human-readable framework label used in plan summaries
    framework: str = ""

    #: Description attached to the frontend create action
    description: str = ""

    #: How to load or mount the artifact in the project's checkout page
    script_tag: str = ""

    @abstractmethod
    def file_name(self, ctx: RenderContext) -> str:
        """Path of the artifact relative to the project root."""
        ...

    @abstractmethod
    def render(self, ctx: RenderContext) -> str:
        """Return the artifact's source code."""
        ...

    def build(self, ctx: RenderContext) -> FrontendIntegration:
        return FrontendIntegration(
            framework=self.framework,
            file_name=self.file_name(ctx),
            code=self.render(ctx),
            script_tag=self.script_tag,
            description=self.description,
        )


class BackendTemplate(ABC):
    """Abstract base class for backend order/verify families.

    render() returns created files in creation order and wiring edits in
    the order they must be applied.
    """

    #: Human-readable framework label used in plan summaries
    label: str = ""

    #: Languages this family can render; the first is the fallback
    languages: tuple[Language, ...] = ()

    #: Ecosystem used to resolve install commands ("node", "python", "go")
    ecosystem: str = ""

    #: File the generated env vars belong in
    env_file: str = ".env"

    #: Packages to install, in install order
    packages: tuple[str, ...] = ()

    def resolve_language(self, language: Optional[Language]) -> Language:
        """Pick the language to render, falling back to the family default."""
        if language in self.languages:
            return language
        return self.languages[0]

    @abstractmethod
    def render(self, ctx: RenderContext) -> BackendIntegration:
        """Render route files, wiring edits, packages and setup steps."""
        ...
