"""
HuleEdu REST Client Package.

Asynchronous JSON/form REST client with bearer-token support, plus the
client-credentials authentication layer built on it.
"""

from .api_client import ApiClient
from .auth_service import AuthService
from .exceptions import (
    ApiClientError,
    ApiDecodeError,
    ApiErrorKind,
    ApiRequestError,
    ApiTransportError,
)
from .implementations import RestAuthRepository
from .models import AuthToken
from .protocols import AuthRepository

__all__ = [
    "ApiClient",
    "ApiClientError",
    "ApiDecodeError",
    "ApiErrorKind",
    "ApiRequestError",
    "ApiTransportError",
    "AuthRepository",
    "AuthService",
    "AuthToken",
    "RestAuthRepository",
]
