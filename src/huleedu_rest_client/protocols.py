"""Protocol definitions for the HuleEdu REST client.

Defines the interfaces injected into services so production implementations
and test doubles are interchangeable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from huleedu_rest_client.models import AuthToken


class AuthRepository(Protocol):
    """Protocol for exchanging client credentials for an access token."""

    async def authenticate(self, client_id: str, client_secret: str) -> AuthToken:
        """Authenticate with a client-credentials pair.

        Args:
            client_id: OAuth client identifier
            client_secret: OAuth client secret

        Returns:
            The decoded AuthToken

        Raises:
            ApiClientError: On transport, non-2xx or decoding failures
        """
        ...
