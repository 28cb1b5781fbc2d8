"""Unit tests for RestAuthRepository."""

from __future__ import annotations

from unittest.mock import AsyncMock, create_autospec

import httpx
import pytest
from respx import MockRouter

from huleedu_rest_client.api_client import ApiClient
from huleedu_rest_client.exceptions import ApiDecodeError, ApiRequestError, ApiTransportError
from huleedu_rest_client.implementations.auth_repository_impl import RestAuthRepository
from huleedu_rest_client.models import AuthToken


@pytest.mark.asyncio
async def test_valid_credentials_return_token(
    base_url: str, auth_path: str, full_token_payload: dict[str, object], respx_mock: MockRouter
) -> None:
    route = respx_mock.post(f"{base_url}{auth_path}").mock(
        return_value=httpx.Response(200, json=full_token_payload)
    )
    repo = RestAuthRepository.from_base_url(base_url, auth_path)

    token = await repo.authenticate("my_id", "my_secret")

    request = route.calls.last.request
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert b"client_id=my_id" in request.content
    assert b"client_secret=my_secret" in request.content
    assert "authorization" not in request.headers
    assert token == AuthToken(
        access_token="abc123",
        token_type="Bearer",
        expires_in=3600,
        refresh_token="refresh",
        scope="read write",
    )


@pytest.mark.asyncio
async def test_invalid_credentials_propagate_request_error(
    base_url: str, auth_path: str, respx_mock: MockRouter
) -> None:
    respx_mock.post(f"{base_url}{auth_path}").mock(
        return_value=httpx.Response(401, json={"error": "invalid_client"})
    )
    repo = RestAuthRepository.from_base_url(base_url, auth_path)

    with pytest.raises(ApiRequestError) as exc_info:
        await repo.authenticate("bad", "wrong")

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_malformed_token_response_propagates_decode_error(
    base_url: str, auth_path: str, respx_mock: MockRouter
) -> None:
    respx_mock.post(f"{base_url}{auth_path}").mock(
        return_value=httpx.Response(200, json={"token_type": "Bearer"})
    )
    repo = RestAuthRepository.from_base_url(base_url, auth_path)

    with pytest.raises(ApiDecodeError):
        await repo.authenticate("my_id", "my_secret")


@pytest.mark.asyncio
async def test_network_failure_propagates_transport_error(
    base_url: str, auth_path: str, respx_mock: MockRouter
) -> None:
    respx_mock.post(f"{base_url}{auth_path}").mock(side_effect=httpx.ConnectError("refused"))
    repo = RestAuthRepository.from_base_url(base_url, auth_path)

    with pytest.raises(ApiTransportError):
        await repo.authenticate("my_id", "my_secret")


@pytest.mark.asyncio
async def test_delegates_ordered_form_to_post_form(full_token: AuthToken) -> None:
    client = create_autospec(ApiClient, instance=True)
    client.without_token.return_value = client
    client.post_form = AsyncMock(return_value=full_token)
    repo = RestAuthRepository(client, "/oauth/token")

    token = await repo.authenticate("id123", "sec456")

    assert token is full_token
    client.post_form.assert_awaited_once_with(
        "/oauth/token",
        [("client_id", "id123"), ("client_secret", "sec456")],
        None,
        response_model=AuthToken,
    )


def test_exposes_auth_path() -> None:
    assert RestAuthRepository(ApiClient("http://h"), "/auth/login").auth_path == "/auth/login"


@pytest.mark.asyncio
async def test_token_on_given_client_is_not_sent_to_token_endpoint(
    base_url: str, auth_path: str, full_token_payload: dict[str, object], respx_mock: MockRouter
) -> None:
    route = respx_mock.post(f"{base_url}{auth_path}").mock(
        return_value=httpx.Response(200, json=full_token_payload)
    )
    client = ApiClient(base_url).with_token("stale")
    repo = RestAuthRepository(client, auth_path)

    await repo.authenticate("my_id", "my_secret")

    assert "authorization" not in route.calls.last.request.headers
    assert client.token == "stale"
