"""Renderers for SIGHTLINE.

Figures are built from normalized tables only:
    - network: interactive data-flow diagram (plotly)
    - followers: followers vs. favorites scatter, linear and log (matplotlib)
    - cloud: description word cloud
    - maps: world / continental-US follower maps, static and interactive
    - table: follower detail table
    - report: writes a run's artifacts to disk
"""

import matplotlib

# Render off-screen; figures are written to files or handed to Streamlit
matplotlib.use("Agg")

from sightline.charts.cloud import build_wordcloud  # noqa: E402
from sightline.charts.followers import build_scatter  # noqa: E402
from sightline.charts.maps import build_interactive_map, build_static_map  # noqa: E402
from sightline.charts.network import build_network_figure  # noqa: E402
from sightline.charts.table import filter_table, format_follower_table  # noqa: E402

__all__ = [
    "build_wordcloud",
    "build_scatter",
    "build_interactive_map",
    "build_static_map",
    "build_network_figure",
    "filter_table",
    "format_follower_table",
]
