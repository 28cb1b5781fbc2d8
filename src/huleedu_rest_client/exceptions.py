"""Exception hierarchy for the HuleEdu REST client.

Every failure raised by ``ApiClient`` (and therefore by the auth repository and
service built on top of it) is an ``ApiClientError``. The ``kind`` attribute
tells callers which of the three failure classes occurred so they can decide
whether to retry or surface the error without inspecting httpx exceptions.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any

RETRYABLE_STATUS_CODES = frozenset({408, 429})


class ApiErrorKind(str, Enum):
    TRANSPORT = "TRANSPORT"
    REQUEST_FAILED = "REQUEST_FAILED"
    DECODE = "DECODE"


class ApiClientError(Exception):
    """Base exception for all REST client failures."""

    kind: ApiErrorKind

    def __init__(
        self,
        kind: ApiErrorKind,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        details: dict[str, Any] | None = None,
        timestamp: datetime | None = None,
    ) -> None:
        """Initialize the base client error.

        Args:
            kind: Failure class (transport, request failed, decode)
            message: Human-readable error message
            method: HTTP method of the failed request
            url: Fully joined request URL
            details: Optional dictionary of additional error context
            timestamp: Optional error timestamp (defaults to current UTC time)
        """
        self.kind = kind
        self.message = message
        self.method = method
        self.url = url
        self.details = details or {}
        self.timestamp = timestamp or datetime.now(UTC)
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"

    @property
    def is_retryable(self) -> bool:
        return False


class ApiTransportError(ApiClientError):
    """Raised when the server could not be reached or the exchange broke off.

    Covers connection refusal, DNS failures, timeouts, protocol errors and
    URLs the transport refuses to send to.
    """

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            ApiErrorKind.TRANSPORT, message, method=method, url=url, details=details
        )

    @property
    def is_retryable(self) -> bool:
        return True


class ApiRequestError(ApiClientError):
    """Raised when the server answered with a non-2xx status.

    The raw response body is kept verbatim so callers can inspect error
    payloads such as ``{"error": "invalid_client"}``.
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        *,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            ApiErrorKind.REQUEST_FAILED,
            f"HTTP {status_code} from {method} {url}",
            method=method,
            url=url,
            details={"status_code": status_code, "body": body[:500]},
        )

    @property
    def is_retryable(self) -> bool:
        return self.status_code in RETRYABLE_STATUS_CODES or self.status_code >= 500

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401


class ApiDecodeError(ApiClientError):
    """Raised when a 2xx response body does not decode into the requested type."""

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(ApiErrorKind.DECODE, message, method=method, url=url, details=details)
