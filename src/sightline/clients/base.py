"""Base HTTP client with rate limiting and connection pooling.

All API clients inherit from this base to ensure consistent behavior:
- Synchronous, one request at a time
- Connection pooling for repeated calls to the same host
- Rate limiting to respect API quotas
- No retries: a failed request raises immediately
- Proper error handling and logging

Usage:
    class MyAPIClient(BaseClient):
        def __init__(self, api_key: str, rate_limit: int = 10):
            super().__init__(
                base_url="https://api.example.com",
                headers={"Authorization": f"Bearer {api_key}"},
                rate_limit=rate_limit
            )

        def get_data(self, key: str) -> dict:
            return self._request("GET", f"/data/{key}")
"""

import logging
import time
from typing import Any, Callable

import httpx


logger = logging.getLogger(__name__)


class RateLimiter:
    """Token bucket rate limiter.

    Paces requests so we don't exceed API rate limits. Waiting is done by
    sleeping the calling thread.

    Args:
        rate: Maximum requests per second
        clock: Monotonic time source (default: time.monotonic)
        sleep: Sleep function (default: time.sleep)
    """

    def __init__(
        self,
        rate: int,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.rate = rate
        self.tokens = float(rate)
        self.updated_at: float | None = None
        self._clock = clock
        self._sleep = sleep

    def acquire(self) -> None:
        """Acquire a token, waiting if necessary."""
        if self.updated_at is None:
            self.updated_at = self._clock()

        while self.tokens < 1:
            now = self._clock()
            elapsed = now - self.updated_at
            self.tokens = min(self.rate, self.tokens + elapsed * self.rate)
            self.updated_at = now

            if self.tokens < 1:
                wait_time = (1 - self.tokens) / self.rate
                self._sleep(wait_time)

        self.tokens -= 1
        self.updated_at = self._clock()


class APIProviderError(Exception):
    """Base exception for API provider errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class SourceUnavailableError(APIProviderError):
    """A data source cannot be read (bad credentials, private or missing resource).

    Fatal for the pipeline that raised it.
    """


class BaseClient:
    """Base HTTP client with rate limiting and connection pooling.

    Provides a foundation for all API clients with consistent error handling,
    rate limiting, and logging.

    Args:
        base_url: Base URL for all API requests
        headers: Default headers for all requests
        rate_limit: Maximum requests per second (default: 10)
        timeout: Request timeout in seconds (default: 30)
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        rate_limit: int = 10,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = headers or {}
        self.timeout = timeout
        self._rate_limiter = RateLimiter(rate=rate_limit)
        self._client: httpx.Client | None = None

    def __enter__(self) -> "BaseClient":
        """Context manager entry."""
        self._client = httpx.Client(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        if self._client:
            self._client.close()
            self._client = None

    def _send(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Make an HTTP request with rate limiting and error handling.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path (relative to base_url)
            params: Query parameters

        Returns:
            The successful (2xx) response

        Raises:
            APIProviderError: On HTTP errors, redirects, timeouts or other transport errors
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use with context manager.")

        # Ensure endpoint starts with /
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"

        self._rate_limiter.acquire()

        logger.debug("%s %s%s params=%s", method, self.base_url, endpoint, params)

        try:
            response = self._client.request(method=method, url=endpoint, params=params)
        except httpx.TimeoutException as e:
            logger.error("Request timeout for %s: %s", endpoint, e)
            raise APIProviderError(f"Request timeout: {e}") from e
        except httpx.TransportError as e:
            logger.error("Transport error for %s: %s", endpoint, e)
            raise APIProviderError(f"Transport error: {e}") from e

        logger.debug("Response: %d for %s", response.status_code, endpoint)

        if response.status_code >= 400:
            error_body = response.text[:500]
            logger.error(
                "API error: %d %s - %s",
                response.status_code, endpoint, error_body,
            )
            raise APIProviderError(
                message=f"API request failed: {response.status_code}",
                status_code=response.status_code,
                response_body=error_body,
            )

        # Redirects are not followed: for the sources we read, a redirect
        # means a login wall or a moved resource.
        if response.is_redirect:
            location = response.headers.get("location", "")
            logger.error(
                "Unexpected redirect: %d %s -> %s",
                response.status_code, endpoint, location,
            )
            raise APIProviderError(
                message=f"Unexpected redirect to {location or 'unknown location'}",
                status_code=response.status_code,
            )

        return response

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a request and parse the JSON body.

        Raises:
            APIProviderError: If the request fails or the body is not JSON
        """
        response = self._send(method, endpoint, params=params)
        try:
            return response.json()
        except ValueError as e:
            logger.error("Failed to parse JSON response: %s", e)
            raise APIProviderError(
                message=f"Invalid JSON response: {e}",
                status_code=response.status_code,
                response_body=response.text[:500],
            ) from e

    def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Convenience method for JSON GET requests."""
        return self._request("GET", endpoint, params=params)

    def get_text(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> tuple[str, str]:
        """GET a non-JSON resource.

        Returns:
            Tuple of (body text, content type)
        """
        response = self._send("GET", endpoint, params=params)
        return response.text, response.headers.get("content-type", "")
