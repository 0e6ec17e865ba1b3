from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings loaded from environment variables.

    Razorpay credentials are optional. When either is blank, generated plans
    carry placeholder values instead and the integration still renders.

    Toolsets
    ────────
    • "all"                   enables every registered toolset (default)
    • "checkout_integration"  stack detection + checkout integration plans

    Settings are read once by the composition root (``create_app`` or the MCP
    ``build_server``) and passed down explicitly; core modules never call
    ``get_settings()`` themselves.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Razorpay API credentials surfaced in generated env var lists.
    razorpay_key_id: str = ""
    razorpay_key_secret: str = ""

    # Comma-separated in the environment, e.g. TOOLSETS=checkout_integration
    toolsets: Annotated[list[str], NoDecode] = ["all"]

    # Hide write tools from every toolset.
    read_only: bool = False

    # App
    debug: bool = True

    @field_validator("razorpay_key_id", "razorpay_key_secret", mode="before")
    @classmethod
    def strip_credential(cls, v: str | None) -> str:
        return (v or "").strip()

    @field_validator("toolsets", mode="before")
    @classmethod
    def split_toolsets(cls, v):
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v


def get_settings() -> Settings:
    return Settings()
