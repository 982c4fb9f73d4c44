"""Follower scatter plots: followers vs. favorites.

Two variants of the same plot, linear and log-log. The log variant leaves
out accounts with a zero count on either axis (log of 0 is undefined).
"""

import matplotlib.pyplot as plt
import pandas as pd


def build_scatter(followers: pd.DataFrame, log_scale: bool = False) -> plt.Figure:
    """Scatter of followers_count (x) against favorites_count (y).

    Args:
        followers: Follower table
        log_scale: Use log axes on both x and y

    Returns:
        Matplotlib figure (caller saves or closes it)
    """
    data = followers[["followers_count", "favorites_count"]].dropna()
    if log_scale:
        data = data[(data["followers_count"] > 0) & (data["favorites_count"] > 0)]

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.scatter(data["followers_count"], data["favorites_count"],
               s=12, alpha=0.5, color="#1f77b4", edgecolors="none")
    if log_scale:
        ax.set_xscale("log")
        ax.set_yscale("log")
    ax.set_xlabel("Followers" + (" (log)" if log_scale else ""))
    ax.set_ylabel("Favorites" + (" (log)" if log_scale else ""))
    ax.set_title(f"Followers vs. favorites ({len(data)} accounts)")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig
