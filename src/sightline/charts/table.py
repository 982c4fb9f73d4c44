"""Follower detail table for display."""

import pandas as pd

DISPLAY_COLUMNS = {
    "screen_name": "Handle",
    "description": "Description",
    "location": "Location",
    "followers_count": "Followers",
    "statuses_count": "Tweets",
    "favorites_count": "Favorites",
    "longitude": "Longitude",
    "latitude": "Latitude",
    "in_continental_us": "Continental US",
}

NUMERIC_COLUMNS = ["followers_count", "statuses_count", "favorites_count", "longitude", "latitude"]


def format_follower_table(followers: pd.DataFrame) -> pd.DataFrame:
    """Display copy of the follower table.

    Numeric columns are rounded to whole numbers as nullable integers, so a
    missing coordinate stays missing instead of turning into 0. Rows are
    sorted by follower count, largest first.
    """
    table = followers[list(DISPLAY_COLUMNS)].copy()
    for col in NUMERIC_COLUMNS:
        table[col] = pd.to_numeric(table[col], errors="coerce").round().astype("Int64")
    table = table.sort_values("followers_count", ascending=False, na_position="last")
    return table.rename(columns=DISPLAY_COLUMNS).reset_index(drop=True)


def filter_table(table: pd.DataFrame, query: str) -> pd.DataFrame:
    """Rows where any text column contains query (case-insensitive)."""
    query = query.strip()
    if not query:
        return table
    text_cols = [c for c in table.columns if pd.api.types.is_string_dtype(table[c])]
    mask = pd.Series(False, index=table.index)
    for col in text_cols:
        mask |= table[col].fillna("").astype(str).str.contains(query, case=False, regex=False)
    return table[mask]
