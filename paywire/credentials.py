"""Razorpay credential resolution.

Credentials are read from Settings once, at the composition root, and
handed to the plan generator. Empty values are never emitted: every blank
field is swapped for a recognisably fake placeholder before it reaches a
generated env var list.
"""

from dataclasses import dataclass

from paywire.core.config import Settings

KEY_ID_PLACEHOLDER = "rzp_test_YOUR_KEY_ID"
KEY_SECRET_PLACEHOLDER = "YOUR_KEY_SECRET"


@dataclass(frozen=True)
class Credentials:
    """Razorpay API key pair. Either field may be blank."""

    key_id: str = ""
    key_secret: str = ""

    def __repr__(self) -> str:
        # Never render the secret in tracebacks or debug logs.
        masked = "***" if self.key_secret else ""
        return f"Credentials(key_id={self.key_id!r}, key_secret={masked!r})"


def resolve(settings: Settings) -> Credentials:
    """Build Credentials from process settings."""
    return Credentials(
        key_id=settings.razorpay_key_id,
        key_secret=settings.razorpay_key_secret,
    )


def resolve_or_placeholder(credentials: Credentials) -> tuple[str, str]:
    """Return (key_id, key_secret), substituting a placeholder per blank field."""
    key_id = credentials.key_id or KEY_ID_PLACEHOLDER
    key_secret = credentials.key_secret or KEY_SECRET_PLACEHOLDER
    return key_id, key_secret
