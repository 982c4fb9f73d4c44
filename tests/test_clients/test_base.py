"""Tests for base HTTP client."""

import httpx
import pytest

from sightline.clients.base import APIProviderError, BaseClient, RateLimiter


class FakeClock:
    """Manual clock; sleeping advances time."""

    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TestRateLimiter:
    """Tests for token bucket rate limiter."""

    def test_allows_requests_under_limit(self):
        """Rate limiter should not wait while tokens remain."""
        clock = FakeClock()
        limiter = RateLimiter(rate=10, clock=clock, sleep=clock.sleep)

        for _ in range(10):
            limiter.acquire()

        assert clock.sleeps == []

    def test_blocks_when_over_limit(self):
        """Third request at 2 req/s waits about half a second."""
        clock = FakeClock()
        limiter = RateLimiter(rate=2, clock=clock, sleep=clock.sleep)

        limiter.acquire()
        limiter.acquire()
        assert clock.sleeps == []

        limiter.acquire()
        assert sum(clock.sleeps) == pytest.approx(0.5)

    def test_refills_over_time(self):
        """Tokens come back as time passes."""
        clock = FakeClock()
        limiter = RateLimiter(rate=1, clock=clock, sleep=clock.sleep)

        limiter.acquire()
        clock.now += 5.0
        limiter.acquire()

        assert clock.sleeps == []


class TestBaseClient:
    """Tests for base HTTP client."""

    def test_context_manager_lifecycle(self, respx_mock):
        """Client should properly initialize and cleanup."""
        respx_mock.get("https://api.example.com/test").mock(
            return_value=httpx.Response(200, json={"status": "ok"})
        )

        with BaseClient(
            base_url="https://api.example.com",
            headers={"Authorization": "test_key"},
        ) as client:
            assert client._client is not None
            result = client.get("/test")
            assert result == {"status": "ok"}

        assert client._client is None

    def test_raises_if_used_without_context_manager(self):
        """Client should raise if used outside a with block."""
        client = BaseClient(base_url="https://api.example.com")

        with pytest.raises(RuntimeError, match="not initialized"):
            client.get("/test")

    def test_request_adds_leading_slash(self, respx_mock):
        """Requests should work with or without leading slash."""
        respx_mock.get("https://api.example.com/test").mock(
            return_value=httpx.Response(200, json={"data": "value"})
        )

        with BaseClient(base_url="https://api.example.com") as client:
            assert client.get("/test") == {"data": "value"}
            assert client.get("test") == {"data": "value"}

    def test_sends_default_headers(self, respx_mock):
        """Default headers go out with every request."""
        route = respx_mock.get("https://api.example.com/test").mock(
            return_value=httpx.Response(200, json={})
        )

        with BaseClient(
            base_url="https://api.example.com",
            headers={"Authorization": "Bearer abc"},
        ) as client:
            client.get("/test")

        assert route.calls.last.request.headers["Authorization"] == "Bearer abc"

    def test_http_error_raises_without_retry(self, respx_mock):
        """4xx/5xx responses raise APIProviderError after a single attempt."""
        route = respx_mock.get("https://api.example.com/test").mock(
            return_value=httpx.Response(503, text="Service Unavailable")
        )

        with BaseClient(base_url="https://api.example.com") as client:
            with pytest.raises(APIProviderError) as exc_info:
                client.get("/test")

        assert exc_info.value.status_code == 503
        assert "Service Unavailable" in exc_info.value.response_body
        assert route.call_count == 1

    def test_redirect_raises(self, respx_mock):
        """Redirects are reported, not followed."""
        respx_mock.get("https://api.example.com/test").mock(
            return_value=httpx.Response(
                302, headers={"Location": "https://accounts.example.com/login"}
            )
        )

        with BaseClient(base_url="https://api.example.com") as client:
            with pytest.raises(APIProviderError, match="redirect"):
                client.get("/test")

    def test_timeout_raises_api_error(self, respx_mock):
        """Timeouts surface as APIProviderError."""
        respx_mock.get("https://api.example.com/test").mock(
            side_effect=httpx.ReadTimeout("timed out")
        )

        with BaseClient(base_url="https://api.example.com") as client:
            with pytest.raises(APIProviderError, match="timeout"):
                client.get("/test")

    def test_network_error_raises_api_error(self, respx_mock):
        """Connection failures surface as APIProviderError."""
        respx_mock.get("https://api.example.com/test").mock(
            side_effect=httpx.ConnectError("refused")
        )

        with BaseClient(base_url="https://api.example.com") as client:
            with pytest.raises(APIProviderError, match="Transport error"):
                client.get("/test")

    def test_protocol_error_raises_api_error(self, respx_mock):
        """A dropped keep-alive connection surfaces as APIProviderError."""
        respx_mock.get("https://api.example.com/test").mock(
            side_effect=httpx.RemoteProtocolError("server disconnected")
        )

        with BaseClient(base_url="https://api.example.com") as client:
            with pytest.raises(APIProviderError, match="Transport error"):
                client.get("/test")

    def test_invalid_json_raises(self, respx_mock):
        """Non-JSON bodies raise APIProviderError from get()."""
        respx_mock.get("https://api.example.com/test").mock(
            return_value=httpx.Response(200, text="not json")
        )

        with BaseClient(base_url="https://api.example.com") as client:
            with pytest.raises(APIProviderError, match="Invalid JSON"):
                client.get("/test")

    def test_get_text_returns_body_and_content_type(self, respx_mock):
        """get_text() returns the raw body and its content type."""
        respx_mock.get("https://api.example.com/file.csv").mock(
            return_value=httpx.Response(
                200, text="a,b\n1,2\n", headers={"Content-Type": "text/csv"}
            )
        )

        with BaseClient(base_url="https://api.example.com") as client:
            text, content_type = client.get_text("/file.csv")

        assert text == "a,b\n1,2\n"
        assert content_type.startswith("text/csv")
