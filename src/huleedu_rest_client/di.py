"""Dependency Injection provider for the HuleEdu REST client.

Wires settings, the shared httpx client, ApiClient, the auth repository and
AuthService into a Dishka container.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from dishka import Provider, Scope, provide

from huleedu_rest_client.api_client import ApiClient
from huleedu_rest_client.auth_service import AuthService
from huleedu_rest_client.config import RestClientSettings
from huleedu_rest_client.implementations.auth_repository_impl import RestAuthRepository
from huleedu_rest_client.logging_utils import create_service_logger
from huleedu_rest_client.protocols import AuthRepository

logger = create_service_logger("rest_client.di")


class RestClientProvider(Provider):
    """APP-scoped provider for the REST client stack."""

    scope = Scope.APP

    def __init__(self, settings: RestClientSettings | None = None) -> None:
        super().__init__()
        self._settings = settings

    @provide
    def get_config(self) -> RestClientSettings:
        """Provide the injected settings, or load them from the environment."""
        return self._settings or RestClientSettings()

    @provide
    async def get_http_client(self, config: RestClientSettings) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared HTTP client with connection pooling."""
        async with httpx.AsyncClient(
            timeout=config.http_timeout(), follow_redirects=True
        ) as client:
            yield client

    @provide
    def provide_api_client(
        self, config: RestClientSettings, http_client: httpx.AsyncClient
    ) -> ApiClient:
        logger.info("Creating ApiClient", extra={"base_url": config.BASE_URL})
        return ApiClient(config.BASE_URL, http_client=http_client)

    @provide
    def provide_auth_repository(
        self, config: RestClientSettings, client: ApiClient
    ) -> AuthRepository:
        return RestAuthRepository(client, config.AUTH_PATH)

    @provide
    def provide_auth_service(self, repository: AuthRepository) -> AuthService:
        return AuthService(repository)
