"""Feature extraction modules for SIGHTLINE.

Each module turns normalized tables into derived columns consumed by the
renderers.

Modules:
    - degree: in/out degree and node size for the data-flow network
    - followers: follower table assembly, favorites_count
    - geo: geocoding enrichment, continental-US bounding box
    - text: description cleaning and term frequencies for the word cloud
"""

from sightline.features.degree import (
    build_render_nodes,
    compute_degrees,
    compute_node_size,
    restrict_edges,
)
from sightline.features.followers import (
    build_follower_table,
    compute_favorites_count,
    normalize_followers,
)
from sightline.features.geo import geocode_locations, in_continental_us, is_in_continental_us
from sightline.features.text import (
    build_term_frequencies,
    clean_descriptions,
    sample_descriptions,
)

__all__ = [
    "build_render_nodes",
    "compute_degrees",
    "compute_node_size",
    "restrict_edges",
    "build_follower_table",
    "compute_favorites_count",
    "normalize_followers",
    "geocode_locations",
    "in_continental_us",
    "is_in_continental_us",
    "build_term_frequencies",
    "clean_descriptions",
    "sample_descriptions",
]
