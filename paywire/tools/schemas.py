"""Pydantic schemas for tool arguments and results.

Argument models accept the camelCase keys agents send. Enum-valued fields
are plain strings on purpose: the JSON schema advertises the known
values, while anything else reaches the generator and takes its fallback.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from paywire.integration.types import BackendFramework, FrontendFramework, Language


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class DetectStackArguments(BaseModel):
    """Arguments for detect_stack."""

    model_config = ConfigDict(populate_by_name=True)

    files: list[str] = Field(..., description="List of file paths in the project")
    package_json: Optional[dict[str, Any]] = Field(
        default=None,
        alias="packageJson",
        description="Contents of package.json if it exists",
    )
    requirements_txt: Optional[str] = Field(
        default=None,
        alias="requirementsTxt",
        description="Contents of requirements.txt if it exists",
    )
    go_mod: Optional[str] = Field(
        default=None,
        alias="goMod",
        description="Contents of go.mod if it exists",
    )
    pubspec_yaml: Optional[str] = Field(
        default=None,
        alias="pubspecYaml",
        description="Contents of pubspec.yaml if it exists (Flutter)",
    )


class IntegrateCheckoutArguments(BaseModel):
    """Arguments for integrate_razorpay_checkout."""

    model_config = ConfigDict(populate_by_name=True)

    language: str = Field(
        ...,
        description="Programming language: javascript, typescript, python, or go",
        json_schema_extra={"enum": _enum_values(Language)},
    )
    backend_framework: str = Field(
        ...,
        alias="backendFramework",
        description="Backend framework: express, nextjs, django, flask, fastapi, gin, echo, or fiber",
        json_schema_extra={"enum": _enum_values(BackendFramework)},
    )
    frontend_framework: str = Field(
        ...,
        alias="frontendFramework",
        description="Frontend framework: vanilla, react, nextjs, vue, nuxt, angular, svelte, or solid",
        json_schema_extra={"enum": _enum_values(FrontendFramework)},
    )
    existing_order_endpoint: Optional[str] = Field(
        default=None,
        alias="existingOrderEndpoint",
        description="Existing order creation endpoint path if any (e.g., /api/orders/create)",
    )
    existing_payment_function: Optional[str] = Field(
        default=None,
        alias="existingPaymentFunction",
        description="Existing payment/checkout function name in frontend if any",
    )
    package_manager: Optional[str] = Field(
        default=None,
        alias="packageManager",
        description="Package manager reported by detect_stack, used for install commands",
    )


@dataclass
class ToolResult:
    """Outcome of one tool call.

    content holds the JSON-ready payload on success; error holds the
    message when is_error is set.
    """

    is_error: bool = False
    content: dict[str, Any] = field(default_factory=dict)
    error: str = ""

    @classmethod
    def ok(cls, content: dict[str, Any]) -> "ToolResult":
        return cls(is_error=False, content=content)

    @classmethod
    def fail(cls, message: str) -> "ToolResult":
        return cls(is_error=True, error=message)

    def to_dict(self) -> dict[str, Any]:
        if self.is_error:
            return {"isError": True, "error": self.error}
        return {"isError": False, "content": self.content}
