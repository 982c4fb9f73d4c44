"""SIGHTLINE — data-flow network and follower atlas pipelines."""

__version__ = "0.1.0"
