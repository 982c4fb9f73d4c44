"""Parquet export of the latest run's normalized tables.

Each pipeline writes its normalized tables here so the dashboard can render
them without calling the external APIs again (geocoding quota is the scarce
resource).

Storage structure:
    data/{pipeline}/{table}.parquet

Example:
    data/network/nodes.parquet
    data/network/edges.parquet
    data/followers/followers.parquet
    data/followers/terms.parquet

Each run replaces the previous run's files; there is no history.
"""

import logging
from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

logger = logging.getLogger(__name__)


class ParquetStore:
    """Parquet store for normalized pipeline tables.

    Args:
        base_path: Root directory for exports. Defaults to 'data/'.
    """

    def __init__(self, base_path: str | Path = "data") -> None:
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, pipeline: str, table: str) -> Path:
        """Generate file path for a given pipeline/table.

        Args:
            pipeline: Pipeline identifier ("network" or "followers")
            table: Table name (e.g., "nodes", "followers")

        Returns:
            Path object for the parquet file
        """
        return self.base_path / pipeline / f"{table}.parquet"

    def write(self, pipeline: str, table: str, data: pd.DataFrame) -> Path:
        """Write a DataFrame, replacing any previous export.

        Args:
            pipeline: Pipeline identifier
            table: Table name
            data: DataFrame to store

        Returns:
            Path to the written file

        Raises:
            ValueError: If data is empty
        """
        if data.empty:
            raise ValueError("Cannot write empty DataFrame to cache")

        file_path = self._get_file_path(pipeline, table)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        frame = pa.Table.from_pandas(data, preserve_index=False)
        pq.write_table(
            frame,
            file_path,
            compression="snappy",  # Fast compression
            use_dictionary=True,  # Efficient for repeated values
            write_statistics=True,  # Enable column statistics
        )
        logger.debug("Wrote %d rows to %s", len(data), file_path)
        return file_path

    def read(self, pipeline: str, table: str) -> pd.DataFrame | None:
        """Read a previously exported table.

        Args:
            pipeline: Pipeline identifier
            table: Table name

        Returns:
            DataFrame if the file exists and is readable, None otherwise
        """
        file_path = self._get_file_path(pipeline, table)

        if not file_path.exists():
            return None

        try:
            return pq.read_table(file_path).to_pandas()
        except (OSError, pa.ArrowException) as e:
            logger.warning(
                "Failed to read cache file %s: %s. "
                "File may be corrupted — returning None.",
                file_path, e,
            )
            return None

    def exists(self, pipeline: str, table: str) -> bool:
        """Check if an export exists."""
        return self._get_file_path(pipeline, table).exists()

    def delete(self, pipeline: str, table: str) -> bool:
        """Remove an export so a later read sees nothing.

        Returns:
            True if a file was removed
        """
        file_path = self._get_file_path(pipeline, table)
        if not file_path.exists():
            return False
        file_path.unlink()
        logger.debug("Deleted %s", file_path)
        return True
