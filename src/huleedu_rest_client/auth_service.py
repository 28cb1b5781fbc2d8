from __future__ import annotations

from huleedu_rest_client.models import AuthToken
from huleedu_rest_client.protocols import AuthRepository


class AuthService:
    """Login facade over an injected AuthRepository.

    Depends only on the protocol, so tests can pass any double in place of
    RestAuthRepository.
    """

    def __init__(self, repository: AuthRepository) -> None:
        self._repository = repository

    async def login(self, client_id: str, client_secret: str) -> AuthToken:
        return await self._repository.authenticate(client_id, client_secret)
