"""Orchestrator — Main pipeline coordinator.

Each pipeline runs strictly in sequence:
    Fetch (Loader) → Process (Transformer) → Export → Render

A failure while fetching aborts the run; nothing is retried.

Usage:
    orchestrator = Orchestrator()
    network = orchestrator.run_network("1AbC...")
    followers = orchestrator.run_followers("some_handle")
"""

import logging
from pathlib import Path

import pandas as pd

from sightline.cache import ParquetStore
from sightline.charts.report import write_follower_report, write_network_report
from sightline.clients import GeocodingClient
from sightline.config import Settings, settings as default_settings
from sightline.pipeline.fetcher import Fetcher
from sightline.pipeline.processor import FollowerResult, NetworkResult, Processor

logger = logging.getLogger(__name__)


class Orchestrator:
    """Main pipeline orchestrator for SIGHTLINE.

    Coordinates Fetcher, Processor, the Parquet export and the renderers.

    Usage:
        orchestrator = Orchestrator(cache_dir="data/", output_dir="output/")
        result = orchestrator.run_network("1AbC...")
        print(result.summary())
    """

    def __init__(
        self,
        cache_dir: str | None = None,
        output_dir: str | None = None,
        config: Settings | None = None,
    ) -> None:
        """Initialize orchestrator with all components.

        Args:
            cache_dir: Directory for Parquet exports (default: from settings)
            output_dir: Directory for rendered artifacts (default: from settings)
            config: Settings to use (default: module-level settings)
        """
        self.config = config or default_settings
        self.cache = ParquetStore(base_path=cache_dir or self.config.cache_dir)
        self.output_dir = Path(output_dir or self.config.output_dir)
        self.fetcher = Fetcher(config=self.config)
        self.processor = Processor(config=self.config)

    def run_network(
        self,
        spreadsheet_id: str,
        render: bool = True,
        layout_seed: int | None = None,
    ) -> NetworkResult:
        """Run the data-flow network pipeline.

        Args:
            spreadsheet_id: Published spreadsheet key
            render: Whether to write artifacts to output_dir (default: True)
            layout_seed: Override the configured layout seed

        Returns:
            NetworkResult
        """
        logger.info("[network] Fetching spreadsheet %s...", spreadsheet_id)
        systems, flows = self.fetcher.fetch_network_tables(spreadsheet_id)

        logger.info("[network] Processing...")
        result = self.processor.process_network(systems, flows)

        self._export("network", {"nodes": result.nodes, "edges": result.edges})

        if render:
            seed = self.config.layout_seed if layout_seed is None else layout_seed
            write_network_report(
                result,
                self.output_dir,
                seed=seed,
                data_types=self.config.data_types,
            )
        return result

    def run_followers(
        self,
        screen_name: str,
        render: bool = True,
    ) -> FollowerResult:
        """Run the follower pipeline.

        Args:
            screen_name: Account handle
            render: Whether to write artifacts to output_dir (default: True)

        Returns:
            FollowerResult

        Raises:
            MissingCredentialsError: If the bearer token or geocoding key is missing
            SourceUnavailableError: If the follower list cannot be read
        """
        screen_name = screen_name.strip().lstrip("@")
        # Both credentials are checked before any API call
        self.config.require("twitter_bearer_token")
        api_key = self.config.require("geocoding_api_key")

        logger.info("[followers] Fetching followers of @%s...", screen_name)
        users = self.fetcher.fetch_followers(screen_name)

        logger.info("[followers] Geocoding and processing %d followers...", len(users))
        with GeocodingClient(
            api_key=api_key,
            rate_limit=self.config.geocoding_rate_limit,
            timeout=self.config.http_timeout,
        ) as geocoder:
            result = self.processor.process_followers(screen_name, users, geocoder)

        self._export("followers", {
            "account": pd.DataFrame({"screen_name": [result.screen_name]}),
            "followers": result.followers,
            "terms": result.terms.rename_axis("term").reset_index(),
        })

        if render:
            write_follower_report(
                result,
                self.output_dir,
                max_words=self.config.wordcloud_max_words,
                min_frequency=self.config.wordcloud_min_frequency,
                seed=self.config.wordcloud_seed,
            )
        return result

    def _export(self, pipeline: str, tables: dict[str, pd.DataFrame]) -> None:
        """Replace the previous run's tables in the Parquet cache.

        An empty table removes the old export instead of leaving it behind.
        """
        for name, table in tables.items():
            if table.empty:
                self.cache.delete(pipeline, name)
                logger.warning("[%s] %s is empty, previous export removed", pipeline, name)
                continue
            path = self.cache.write(pipeline, name, table)
            logger.info("[%s] Exported %s (%d rows) to %s", pipeline, name, len(table), path)
