"""Follower table features.

Turns raw user objects from the Twitter API into the follower table:
- Flattening of the nested user object into raw columns
- favorites_count: account favourites + likes on the embedded latest status
- Missing optional text (location, description) kept as missing, never ""
"""

import logging
from typing import Any, Iterable

import numpy as np
import pandas as pd

from sightline.features.geo import in_continental_us

logger = logging.getLogger(__name__)

RAW_COLUMNS = [
    "user_id",
    "screen_name",
    "description",
    "location",
    "followers_count",
    "statuses_count",
    "favourites_count",
    "favorite_count",
]

FOLLOWER_COLUMNS = [
    "user_id",
    "screen_name",
    "description",
    "location",
    "followers_count",
    "statuses_count",
    "favorites_count",
    "longitude",
    "latitude",
    "in_continental_us",
]

_COUNT_COLUMNS = ["followers_count", "statuses_count", "favourites_count", "favorite_count"]


def _blank_to_none(value: Any) -> Any:
    """Map empty/whitespace strings to None, leave everything else alone."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return None
    return value


def normalize_followers(users: Iterable[dict[str, Any]]) -> pd.DataFrame:
    """Flatten raw user objects into raw follower columns.

    Args:
        users: Twitter user objects (users/lookup.json shape)

    Returns:
        DataFrame with RAW_COLUMNS. Count columns are float (NaN when the
        field was absent); text columns hold None when absent or blank.
    """
    rows = []
    for user in users:
        status = user.get("status") or {}
        rows.append({
            "user_id": user.get("id_str") or (str(user["id"]) if user.get("id") is not None else None),
            "screen_name": user.get("screen_name"),
            "description": user.get("description"),
            "location": user.get("location"),
            "followers_count": user.get("followers_count"),
            "statuses_count": user.get("statuses_count"),
            "favourites_count": user.get("favourites_count"),
            "favorite_count": status.get("favorite_count"),
        })

    df = pd.DataFrame(rows, columns=RAW_COLUMNS)
    for col in ("description", "location"):
        df[col] = df[col].map(_blank_to_none).astype(object)
    for col in _COUNT_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def compute_favorites_count(data: pd.DataFrame) -> pd.Series:
    """Compute favorites_count — sum of the two raw like counters.

    Formula:
        favorites_count = favourites_count + favorite_count

    Missing values (or a missing column) count as 0 before summation.

    Args:
        data: DataFrame with columns favourites_count and/or favorite_count

    Returns:
        Series of float totals, never NaN.

    Example:
        >>> data = pd.DataFrame({
        ...     "favourites_count": [np.nan, 3.0],
        ...     "favorite_count": [12.0, np.nan],
        ... })
        >>> compute_favorites_count(data).tolist()
        [12.0, 3.0]
    """
    zeros = pd.Series(0.0, index=data.index)
    favourites = data["favourites_count"] if "favourites_count" in data.columns else zeros
    favorite = data["favorite_count"] if "favorite_count" in data.columns else zeros
    return favourites.fillna(0).astype(float) + favorite.fillna(0).astype(float)


def build_follower_table(raw: pd.DataFrame, coords: pd.DataFrame) -> pd.DataFrame:
    """Assemble the follower table from raw columns and geocoded coordinates.

    Args:
        raw: Output of normalize_followers
        coords: DataFrame with longitude and latitude, row-aligned with raw

    Returns:
        DataFrame with FOLLOWER_COLUMNS.
    """
    if len(raw) != len(coords):
        raise ValueError(
            f"Coordinates ({len(coords)} rows) do not line up with followers ({len(raw)} rows)"
        )

    table = raw[["user_id", "screen_name", "description", "location",
                 "followers_count", "statuses_count"]].copy()
    table["favorites_count"] = compute_favorites_count(raw)
    table["longitude"] = coords["longitude"].to_numpy(dtype=float)
    table["latitude"] = coords["latitude"].to_numpy(dtype=float)
    table["in_continental_us"] = in_continental_us(table["longitude"], table["latitude"])

    logger.info(
        "Follower table: %d rows, %d geocoded, %d in continental US",
        len(table),
        int(table["longitude"].notna().sum()),
        int(table["in_continental_us"].sum()),
    )
    return table[FOLLOWER_COLUMNS]
