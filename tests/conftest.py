"""
Pytest Configuration

Shared fixtures for the HuleEdu REST client test suite.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest

from huleedu_rest_client.models import AuthToken

BASE_URL = "http://api.test"
AUTH_PATH = "/auth/login"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end flows against a mocked backend")


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def auth_path() -> str:
    return AUTH_PATH


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Real httpx client for respx mocking."""
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def full_token_payload() -> dict[str, object]:
    return {
        "access_token": "abc123",
        "token_type": "Bearer",
        "expires_in": 3600,
        "refresh_token": "refresh",
        "scope": "read write",
    }


@pytest.fixture
def full_token(full_token_payload: dict[str, object]) -> AuthToken:
    return AuthToken.model_validate(full_token_payload)
