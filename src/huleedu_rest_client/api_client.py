"""Asynchronous JSON/form REST client built on httpx.

``ApiClient`` is the single place that joins URLs, encodes request bodies,
injects headers and classifies failures. Domain repositories wrap it instead
of talking to httpx directly.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from urllib.parse import urlencode

import httpx
import pydantic_core
from pydantic import TypeAdapter, ValidationError

from huleedu_rest_client.exceptions import ApiDecodeError, ApiRequestError, ApiTransportError
from huleedu_rest_client.logging_utils import create_service_logger

logger = create_service_logger("rest_client.api_client")

HeaderPairs = Sequence[tuple[str, str]]
FormFields = Sequence[tuple[str, str]]

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
DEFAULT_TIMEOUT = httpx.Timeout(30.0, connect=10.0)


def join_url(base_url: str, path: str) -> str:
    """Join base URL and path with exactly one separating slash."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class ApiClient:
    """HTTP client for a JSON/form REST backend with optional bearer auth."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: httpx.Timeout | float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Backend base URL, with or without a trailing slash. Not validated.
            token: Optional bearer token sent as ``Authorization: Bearer <token>``
            http_client: Optional shared httpx AsyncClient (connection pool owner).
                When omitted each request runs on a short-lived client.
            timeout: Timeout for short-lived clients (ignored with ``http_client``)
        """
        self._base_url = base_url
        self._token = token
        self._http_client = http_client
        self._timeout = timeout if timeout is not None else DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str | None:
        return self._token

    def with_token(self, token: str) -> ApiClient:
        """Return a client that sends the given bearer token on every request."""
        return ApiClient(
            self._base_url,
            token,
            http_client=self._http_client,
            timeout=self._timeout,
        )

    def without_token(self) -> ApiClient:
        """Return a client with the same base URL and transport but no bearer token."""
        return ApiClient(self._base_url, http_client=self._http_client, timeout=self._timeout)

    def build_url(self, path: str) -> str:
        return join_url(self._base_url, path)

    def build_headers(
        self,
        content_type: str | None = None,
        extra_headers: HeaderPairs | None = None,
    ) -> list[tuple[str, str]]:
        """Build request headers: Authorization, then Content-Type, then extras."""
        headers: list[tuple[str, str]] = []
        if self._token is not None:
            headers.append(("Authorization", f"Bearer {self._token}"))
        if content_type is not None:
            headers.append(("Content-Type", content_type))
        if extra_headers:
            headers.extend((name, value) for name, value in extra_headers)
        return headers

    async def get_json(
        self,
        path: str,
        extra_headers: HeaderPairs | None = None,
        *,
        response_model: Any = None,
    ) -> Any:
        """GET ``path`` and decode the JSON response into ``response_model``."""
        return await self._send(
            "GET", path, extra_headers=extra_headers, response_model=response_model
        )

    async def post_json(
        self,
        path: str,
        body: Any,
        extra_headers: HeaderPairs | None = None,
        *,
        response_model: Any = None,
    ) -> Any:
        """POST ``body`` as JSON and decode the JSON response."""
        return await self._send(
            "POST",
            path,
            content=pydantic_core.to_json(body),
            content_type=JSON_CONTENT_TYPE,
            extra_headers=extra_headers,
            response_model=response_model,
        )

    async def put_json(
        self,
        path: str,
        body: Any,
        extra_headers: HeaderPairs | None = None,
        *,
        response_model: Any = None,
    ) -> Any:
        """PUT ``body`` as JSON and decode the JSON response."""
        return await self._send(
            "PUT",
            path,
            content=pydantic_core.to_json(body),
            content_type=JSON_CONTENT_TYPE,
            extra_headers=extra_headers,
            response_model=response_model,
        )

    async def post_form(
        self,
        path: str,
        fields: FormFields,
        extra_headers: HeaderPairs | None = None,
        *,
        response_model: Any = None,
    ) -> Any:
        """POST ``fields`` form-urlencoded (order kept) and decode the JSON response."""
        return await self._send(
            "POST",
            path,
            content=urlencode(list(fields)).encode("ascii"),
            content_type=FORM_CONTENT_TYPE,
            extra_headers=extra_headers,
            response_model=response_model,
        )

    async def put_form(
        self,
        path: str,
        fields: FormFields,
        extra_headers: HeaderPairs | None = None,
        *,
        response_model: Any = None,
    ) -> Any:
        """PUT ``fields`` form-urlencoded (order kept) and decode the JSON response."""
        return await self._send(
            "PUT",
            path,
            content=urlencode(list(fields)).encode("ascii"),
            content_type=FORM_CONTENT_TYPE,
            extra_headers=extra_headers,
            response_model=response_model,
        )

    async def delete_json(
        self,
        path: str,
        extra_headers: HeaderPairs | None = None,
        *,
        response_model: Any = None,
    ) -> Any:
        """DELETE ``path`` without a body and decode the JSON response."""
        return await self._send(
            "DELETE", path, extra_headers=extra_headers, response_model=response_model
        )

    async def _send(
        self,
        method: str,
        path: str,
        *,
        content: bytes | None = None,
        content_type: str | None = None,
        extra_headers: HeaderPairs | None = None,
        response_model: Any = None,
    ) -> Any:
        url = self.build_url(path)
        headers = self.build_headers(content_type, extra_headers)

        logger.debug(
            "Sending request",
            extra={"method": method, "url": url, "authenticated": self._token is not None},
        )

        try:
            response = await self._request(method, url, headers, content)
        except httpx.DecodingError as exc:
            logger.warning(
                "Response content failed to decode",
                extra={"method": method, "url": url, "error_type": type(exc).__name__},
            )
            raise ApiDecodeError(
                f"{method} {url} returned content that does not decode: {exc}",
                method=method,
                url=url,
                details={"error_type": type(exc).__name__},
            ) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning(
                "Request transport failure",
                extra={"method": method, "url": url, "error_type": type(exc).__name__},
            )
            raise ApiTransportError(
                f"{method} {url} failed: {exc}",
                method=method,
                url=url,
                details={"error_type": type(exc).__name__},
            ) from exc

        if not response.is_success:
            logger.warning(
                "Request returned non-success status",
                extra={"method": method, "url": url, "status_code": response.status_code},
            )
            raise ApiRequestError(response.status_code, response.text, method=method, url=url)

        return self._decode(response, response_model, method, url)

    async def _request(
        self,
        method: str,
        url: str,
        headers: list[tuple[str, str]],
        content: bytes | None,
    ) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.request(
                method, url, headers=headers, content=content, follow_redirects=True
            )

        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            return await client.request(method, url, headers=headers, content=content)

    @staticmethod
    def _decode(response: httpx.Response, response_model: Any, method: str, url: str) -> Any:
        try:
            if response_model is None:
                return pydantic_core.from_json(response.content)
            return TypeAdapter(response_model).validate_json(response.content)
        except (ValidationError, ValueError) as exc:
            logger.warning(
                "Response body failed to decode",
                extra={"method": method, "url": url, "status_code": response.status_code},
            )
            raise ApiDecodeError(
                f"{method} {url} returned a body that does not decode: {exc}",
                method=method,
                url=url,
                details={
                    "status_code": response.status_code,
                    "response_model": getattr(response_model, "__name__", repr(response_model)),
                },
            ) from exc
