"""
HTTP Transport for Smart Genesis.

Handles HTTP communication with the OAuth token endpoint and the repository
API, request/response logging and error parsing. Requests are never retried
here; the token poller owns the only retry loop.
"""

import time
from typing import Any

import httpx

from smart_genesis.exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from smart_genesis.logging import log_http_request, log_http_response


class HTTPTransport:
    """
    HTTP transport layer over a shared ``httpx.Client``.

    Handles:
    - Default headers and timeout for every request
    - Debug logging with tokens masked
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for relative request paths (e.g., "https://api.github.com")
            timeout: Request timeout in seconds
            headers: Headers sent with every request
            transport: Optional httpx transport (e.g., ``httpx.MockTransport`` in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = dict(headers or {})

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=self.headers,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """
        Make a single request and return the parsed JSON object.

        Args:
            method: HTTP method
            path: API path or absolute URL
            body: JSON request body (for POST/PUT)
            headers: Extra headers for this request only

        Returns:
            Parsed JSON response

        Raises:
            APIError: On HTTP errors, network errors, or a
                response body that is not a JSON object
        """
        log_http_request(method, self._display_url(path), {**self.headers, **(headers or {})}, body)

        started = time.perf_counter()
        try:
            response = self._client.request(method, path, json=body, headers=headers)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e
        elapsed_ms = (time.perf_counter() - started) * 1000

        if response.status_code >= 400:
            log_http_response(response.status_code, str(response.url), elapsed_ms=elapsed_ms)
            raise self._parse_error_response(response)

        data = self._parse_json_object(response)
        log_http_response(response.status_code, str(response.url), data, elapsed_ms)
        return data

    def get_json(self, url: str) -> dict[str, Any]:
        """
        GET a URL and return the parsed JSON object.

        Args:
            url: Absolute URL or path relative to base_url

        Returns:
            Parsed JSON response

        Raises:
            APIError: On HTTP or network errors
        """
        return self.request("GET", url)

    def _display_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}{path}"

    def _parse_json_object(self, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise ServerError(
                "INVALID_RESPONSE", f"Response from {response.url} is not JSON"
            ) from e

        if not isinstance(data, dict):
            raise ServerError(
                "INVALID_RESPONSE",
                f"Expected a JSON object from {response.url}, got {type(data).__name__}",
            )
        return data

    def _parse_error_response(self, response: httpx.Response) -> APIError:
        """
        Parse an error response into a typed exception.

        GitHub error bodies look like
        ``{"message": "...", "errors": [{"message": "..."}]}``.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate APIError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        message = data.get("message") or f"HTTP {response.status_code}"
        errors = data.get("errors")
        if not isinstance(errors, list):
            errors = []
        details = [
            e.get("message")
            for e in errors
            if isinstance(e, dict) and e.get("message")
        ]
        if details:
            message = f"{message}: {'; '.join(details)}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        status_code = response.status_code

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id)
        elif status_code == 403:
            return AuthorizationError("FORBIDDEN", message, request_id)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, request_id)
        elif status_code in (409, 422):
            # GitHub answers 422 when the name already exists on the account
            return ConflictError("CONFLICT", message, request_id)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError("RATE_LIMITED", message, retry_after, request_id)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id)
        else:
            return ValidationError("BAD_REQUEST", message, request_id)
