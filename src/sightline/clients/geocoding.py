"""Google Geocoding API client.

Resolves free-text location strings to coordinates. Subject to the key's
daily quota; over-quota answers come back as a status, not an HTTP error.

API Documentation: https://developers.google.com/maps/documentation/geocoding

Usage:
    from sightline.clients.geocoding import GeocodingClient

    with GeocodingClient(api_key="your_key") as client:
        coords = client.geocode("Portland, OR")  # (lon, lat) or None
"""

import logging
from typing import Any

from sightline.clients.base import APIProviderError, BaseClient

logger = logging.getLogger(__name__)


class GeocodingClient(BaseClient):
    """Client for the Google Geocoding API.

    Args:
        api_key: Google Maps Platform API key
        rate_limit: Max requests per second (default: 10)
        timeout: Request timeout in seconds (default: 30)
    """

    def __init__(self, api_key: str, rate_limit: int = 10, timeout: float = 30.0) -> None:
        super().__init__(
            base_url="https://maps.googleapis.com/maps/api",
            headers={},
            rate_limit=rate_limit,
            timeout=timeout,
        )
        self.api_key = api_key

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Override to inject the API key into params."""
        params = params or {}
        params["key"] = self.api_key
        return super()._request(method, endpoint, params)

    def geocode(self, address: str) -> tuple[float, float] | None:
        """Resolve an address to (longitude, latitude).

        Uses the first result only.

        Args:
            address: Free-text location, passed through literally

        Returns:
            (longitude, latitude), or None when the service has no answer
            (ZERO_RESULTS, OVER_QUERY_LIMIT, REQUEST_DENIED, ...)

        Raises:
            APIProviderError: On transport or HTTP failure, or a body that is
                not a JSON object
        """
        result = self.get("/geocode/json", params={"address": address})
        if not isinstance(result, dict):
            raise APIProviderError(
                f"Unexpected geocoding response type: {type(result).__name__}",
                response_body=str(result)[:500],
            )
        status = result.get("status", "UNKNOWN")
        if status != "OK":
            if status != "ZERO_RESULTS":
                logger.warning(
                    "Geocoding %r: status %s %s",
                    address, status, result.get("error_message", ""),
                )
            return None

        results = result.get("results") or []
        if not results:
            return None
        location = results[0].get("geometry", {}).get("location", {})
        lat, lng = location.get("lat"), location.get("lng")
        if lat is None or lng is None:
            return None
        return float(lng), float(lat)
