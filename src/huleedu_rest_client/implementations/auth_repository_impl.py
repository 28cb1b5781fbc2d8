"""REST implementation of the AuthRepository protocol.

Performs a client-credentials form POST against the configured token endpoint
and decodes the response into an AuthToken.
"""

from __future__ import annotations

import httpx

from huleedu_rest_client.api_client import ApiClient
from huleedu_rest_client.logging_utils import create_service_logger
from huleedu_rest_client.models import AuthToken

logger = create_service_logger("rest_client.auth_repository")


class RestAuthRepository:
    """AuthRepository backed by an unauthenticated token endpoint."""

    def __init__(self, client: ApiClient, auth_path: str) -> None:
        """Initialize with the client used for the token exchange.

        Args:
            client: ApiClient pointed at the auth backend. Any bearer token it
                carries is dropped; the token endpoint is called unauthenticated.
            auth_path: Path of the token endpoint (e.g. "/auth/login")
        """
        self._client = client.without_token()
        self._auth_path = auth_path

    @classmethod
    def from_base_url(
        cls,
        base_url: str,
        auth_path: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: httpx.Timeout | float | None = None,
    ) -> RestAuthRepository:
        return cls(ApiClient(base_url, http_client=http_client, timeout=timeout), auth_path)

    @property
    def auth_path(self) -> str:
        return self._auth_path

    async def authenticate(self, client_id: str, client_secret: str) -> AuthToken:
        """Exchange client credentials for a token.

        Raises:
            ApiClientError: Propagated unchanged from the ApiClient
        """
        form = [("client_id", client_id), ("client_secret", client_secret)]

        logger.debug(
            "Requesting client-credentials token",
            extra={"auth_path": self._auth_path, "client_id": client_id},
        )

        token: AuthToken = await self._client.post_form(
            self._auth_path, form, None, response_model=AuthToken
        )
        return token
