"""Parquet export of normalized tables for SIGHTLINE.

Holds the latest run of each pipeline for the dashboard.
"""

from sightline.cache.parquet_store import ParquetStore

__all__ = ["ParquetStore"]
