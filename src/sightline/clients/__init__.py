"""API client layer for SIGHTLINE.

Synchronous HTTP clients for fetching raw records from:
- Google Sheets: published "Systems" / "Data Flows" worksheets
- Twitter: follower ids and user objects
- Google Geocoding: location string → coordinates
"""

from sightline.clients.base import (
    APIProviderError,
    BaseClient,
    RateLimiter,
    SourceUnavailableError,
)
from sightline.clients.geocoding import GeocodingClient
from sightline.clients.sheets import SheetsClient
from sightline.clients.twitter import TwitterClient

__all__ = [
    "BaseClient",
    "RateLimiter",
    "APIProviderError",
    "SourceUnavailableError",
    "SheetsClient",
    "TwitterClient",
    "GeocodingClient",
]
