"""Follower location maps: world and continental US.

Static maps are matplotlib point maps on a plain lon/lat grid; interactive
maps use plotly's geo projections with country and state outlines. Only
resolved coordinates are plotted. The US variants plot only followers inside
the continental-US bounding box.
"""

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import pandas as pd
import plotly.graph_objects as go

from sightline.features.geo import CONTINENTAL_US_LAT, CONTINENTAL_US_LON

REGIONS = ("world", "us")

_WORLD_EXTENT = ((-180.0, 180.0), (-90.0, 90.0))
_US_EXTENT = ((-126.0, -65.0), (23.0, 51.0))


def select_region(followers: pd.DataFrame, region: str) -> pd.DataFrame:
    """Rows to plot for a region: geocoded rows, US-box rows for "us"."""
    if region not in REGIONS:
        raise ValueError(f"region must be one of {REGIONS}, got {region!r}")
    located = followers.dropna(subset=["longitude", "latitude"])
    if region == "us":
        located = located[located["in_continental_us"].astype(bool)]
    return located


def build_static_map(followers: pd.DataFrame, region: str = "world") -> plt.Figure:
    """Point map of follower locations.

    Args:
        followers: Follower table
        region: "world" or "us"

    Returns:
        Matplotlib figure (caller saves or closes it)
    """
    points = select_region(followers, region)
    (x0, x1), (y0, y1) = _WORLD_EXTENT if region == "world" else _US_EXTENT

    fig, ax = plt.subplots(figsize=(12, 6) if region == "world" else (10, 6))
    ax.scatter(points["longitude"], points["latitude"],
               s=14, alpha=0.6, color="#d62728", edgecolors="none")
    if region == "us":
        (lon_min, lon_max), (lat_min, lat_max) = CONTINENTAL_US_LON, CONTINENTAL_US_LAT
        ax.add_patch(mpatches.Rectangle(
            (lon_min, lat_min), lon_max - lon_min, lat_max - lat_min,
            fill=False, linestyle="--", linewidth=1, edgecolor="#607D8B",
        ))
    ax.set_xlim(x0, x1)
    ax.set_ylim(y0, y1)
    ax.set_aspect("equal")
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    label = "World" if region == "world" else "Continental US"
    ax.set_title(f"Follower locations — {label} ({len(points)} accounts)")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig


def build_interactive_map(followers: pd.DataFrame, region: str = "world") -> go.Figure:
    """Interactive point map of follower locations.

    Args:
        followers: Follower table
        region: "world" or "us"

    Returns:
        Plotly figure with a scattergeo trace; hover shows handle and location
    """
    points = select_region(followers, region)
    hover = (
        "@" + points["screen_name"].fillna("").astype(str)
        + "<br>" + points["location"].fillna("").astype(str)
    )

    fig = go.Figure(go.Scattergeo(
        lon=points["longitude"],
        lat=points["latitude"],
        mode="markers",
        hovertext=hover,
        hoverinfo="text",
        marker=dict(size=6, color="#d62728", opacity=0.6),
    ))
    label = "World" if region == "world" else "Continental US"
    fig.update_layout(
        title=f"Follower locations — {label} ({len(points)} accounts)",
        geo=dict(
            scope="world" if region == "world" else "usa",
            showland=True,
            landcolor="#F0F0F0",
            showcountries=True,
        ),
        margin=dict(l=0, r=0, t=40, b=0),
        height=500,
    )
    return fig
