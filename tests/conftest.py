"""Shared test fixtures for the paywire test suite.

The HTTP app is built from explicit Settings so tests never read the
developer's environment or .env file.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from paywire.api.main import create_app
from paywire.core.config import Settings
from paywire.credentials import Credentials
from paywire.integration import IntegrationPlanGenerator

TEST_KEY_ID = "rzp_test_abc123"
TEST_KEY_SECRET = "s3cr3t-value-never-in-code"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        razorpay_key_id=TEST_KEY_ID,
        razorpay_key_secret=TEST_KEY_SECRET,
        toolsets=["all"],
        read_only=False,
        debug=False,
    )


@pytest.fixture
def razorpay_keys() -> tuple[str, str]:
    """The (key_id, key_secret) pair every fixture is configured with."""
    return TEST_KEY_ID, TEST_KEY_SECRET


@pytest.fixture
def generator() -> IntegrationPlanGenerator:
    return IntegrationPlanGenerator(Credentials(key_id=TEST_KEY_ID, key_secret=TEST_KEY_SECRET))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client wired to the test app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
