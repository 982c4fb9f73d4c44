"""Geographic features: geocoding enrichment and continental-US membership.

- Geocoding: location text → (longitude, latitude) via an external service,
  best effort, one lookup per follower
- Continental US: coarse bounding-box test over resolved coordinates

The bounding box is an approximation of the lower 48 states; it also admits
slivers of southern Canada and northern Mexico.
"""

import logging
from typing import Iterable, Protocol

import numpy as np
import pandas as pd

from sightline.clients.base import APIProviderError

logger = logging.getLogger(__name__)

# (min, max), open intervals
CONTINENTAL_US_LON = (-124.7844079, -66.9513812)
CONTINENTAL_US_LAT = (24.7433195, 49.3457868)


class Geocoder(Protocol):
    """Anything that can resolve a location string to (lon, lat)."""

    def geocode(self, address: str) -> tuple[float, float] | None: ...


def _is_blank(location: object) -> bool:
    if location is None:
        return True
    if isinstance(location, float) and np.isnan(location):
        return True
    return isinstance(location, str) and not location.strip()


def geocode_locations(locations: Iterable[str | None], geocoder: Geocoder) -> pd.DataFrame:
    """Resolve each location string to coordinates, in order.

    Blank or missing entries are not sent to the service. A lookup that
    fails (quota, network, HTTP error) or finds nothing yields NaN for that
    row; nothing is retried and no error escapes.

    Args:
        locations: One entry per follower, possibly None/empty
        geocoder: Service used for non-blank entries

    Returns:
        DataFrame with float columns longitude and latitude, one row per
        input entry. NaN means unresolved (distinct from 0.0).
    """
    longitudes: list[float] = []
    latitudes: list[float] = []
    failures = 0

    for location in locations:
        coords = None
        if not _is_blank(location):
            try:
                coords = geocoder.geocode(location)
            except APIProviderError as e:
                failures += 1
                logger.warning("Geocoding %r failed: %s", location, e)
        if coords is None:
            longitudes.append(np.nan)
            latitudes.append(np.nan)
        else:
            longitudes.append(float(coords[0]))
            latitudes.append(float(coords[1]))

    result = pd.DataFrame({"longitude": longitudes, "latitude": latitudes}, dtype=float)
    logger.info(
        "Geocoded %d/%d locations (%d lookup failures)",
        int(result["longitude"].notna().sum()), len(result), failures,
    )
    return result


def in_continental_us(longitude: pd.Series, latitude: pd.Series) -> pd.Series:
    """Test coordinates against the continental-US bounding box.

    Formula:
        -124.7844079 < lon < -66.9513812  AND  24.7433195 < lat < 49.3457868

    Args:
        longitude: Series of longitudes (NaN = unresolved)
        latitude: Series of latitudes (NaN = unresolved), aligned with longitude

    Returns:
        Boolean Series. Unresolved rows are False.

    Example:
        >>> in_continental_us(pd.Series([-100.0, -130.0]), pd.Series([40.0, 40.0])).tolist()
        [True, False]
    """
    lon_min, lon_max = CONTINENTAL_US_LON
    lat_min, lat_max = CONTINENTAL_US_LAT
    inside = (
        (longitude > lon_min) & (longitude < lon_max)
        & (latitude > lat_min) & (latitude < lat_max)
    )
    # Comparisons with NaN are already False
    return inside.astype(bool)


def is_in_continental_us(longitude: float | None, latitude: float | None) -> bool:
    """Scalar form of in_continental_us."""
    if longitude is None or latitude is None:
        return False
    return bool(in_continental_us(pd.Series([longitude], dtype=float),
                                  pd.Series([latitude], dtype=float)).iloc[0])
