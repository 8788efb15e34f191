"""Workstream REST API client.

Every portal talks to the API through ``ApiClient.request``: one JSON
request helper that attaches the bearer token, encodes the body, and turns
non-2xx responses into ``ApiError``.

``get_api_client()`` returns a lazily-initialized, process-wide client
configured from ``settings``.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from workstream.core.config import settings

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

GENERIC_ERROR_MESSAGE = "An error occurred"
INVALID_RESPONSE_MESSAGE = "Unexpected response from the API"

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiError(Exception):
    """A failed call to the REST API.

    ``status_code`` is the upstream HTTP status of an error response, or
    None when there was no usable response (connection refused, timeout,
    a success body that is not the expected JSON).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    """Extract the ``message`` field of an error body, with fallbacks."""
    try:
        data = response.json()
    except ValueError:
        return GENERIC_ERROR_MESSAGE

    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return f"HTTP error! status: {response.status_code}"


class ApiClient:
    """Thin JSON client over the Workstream REST API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def request(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
        token: str | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON response.

        ``endpoint`` is appended verbatim to the base URL and must already
        carry its query string.  ``body`` is JSON-encoded unless None.
        """
        request_headers = {"Content-Type": "application/json", **(headers or {})}
        if token:
            request_headers["Authorization"] = f"Bearer {token}"

        url = f"{self.base_url}{endpoint}"

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    method, url, headers=request_headers, json=body
                )
        except httpx.HTTPError as exc:
            logger.error(
                "api_request_unreachable",
                extra={
                    "method": method,
                    "endpoint": endpoint,
                    "error_message": str(exc),
                },
            )
            raise ApiError(f"Network error: {exc}") from exc

        if not response.is_success:
            message = _error_message(response)
            logger.warning(
                "api_request_failed",
                extra={
                    "method": method,
                    "endpoint": endpoint,
                    "status_code": response.status_code,
                    "error_message": message,
                },
            )
            raise ApiError(message, response.status_code)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            logger.error(
                "api_response_not_json",
                extra={
                    "method": method,
                    "endpoint": endpoint,
                    "status_code": response.status_code,
                },
            )
            # No status: an undecodable success body is relayed as 502
            raise ApiError(GENERIC_ERROR_MESSAGE) from exc


def parse_response(model: type[ModelT], data: Any) -> ModelT:
    """Validate a decoded envelope against its view model.

    A 2xx body of the wrong shape is an upstream failure like any other, so
    it surfaces as ``ApiError`` without a status.
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.error(
            "api_response_invalid",
            extra={"model": model.__name__, "error_count": exc.error_count()},
        )
        raise ApiError(INVALID_RESPONSE_MESSAGE) from exc


_client: ApiClient | None = None


def get_api_client() -> ApiClient:
    """Return the singleton API client, creating it on first call."""
    global _client
    if _client is None:
        _client = ApiClient(settings.API_URL, timeout=settings.API_TIMEOUT_SECONDS)
    return _client


def reset_api_client() -> None:
    """Drop the singleton so the next call rebuilds it from settings."""
    global _client
    _client = None
