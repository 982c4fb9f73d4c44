"""Fetcher — external sources → raw records.

Reads the spreadsheet worksheets and the follower list. Any failure to read
a source is fatal for the run: it surfaces as SourceUnavailableError and is
not retried.
"""

import logging
from typing import Any

import pandas as pd

from sightline.config import Settings, settings as default_settings
from sightline.clients import APIProviderError, SheetsClient, SourceUnavailableError, TwitterClient

logger = logging.getLogger(__name__)

SYSTEMS_SHEET = "Systems"
FLOWS_SHEET = "Data Flows"


class Fetcher:
    """Fetches raw records from the spreadsheet and social-media sources.

    Clients are created as context managers per fetch operation.

    Usage:
        fetcher = Fetcher()
        systems, flows = fetcher.fetch_network_tables("1AbC...")
        users = fetcher.fetch_followers("some_handle")
    """

    def __init__(self, config: Settings | None = None) -> None:
        """Initialize fetcher.

        Args:
            config: Settings to use (default: module-level settings)
        """
        self.config = config or default_settings

    def fetch_network_tables(self, spreadsheet_id: str) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Read the "Systems" and "Data Flows" worksheets.

        Args:
            spreadsheet_id: Published spreadsheet key

        Returns:
            (systems, flows) raw DataFrames

        Raises:
            SourceUnavailableError: If either worksheet cannot be read
        """
        with SheetsClient(timeout=self.config.http_timeout) as sheets:
            systems = sheets.get_worksheet(spreadsheet_id, SYSTEMS_SHEET)
            flows = sheets.get_worksheet(spreadsheet_id, FLOWS_SHEET)

        logger.info(
            "Spreadsheet %s: %d systems, %d flows",
            spreadsheet_id, len(systems), len(flows),
        )
        return systems, flows

    def fetch_followers(self, screen_name: str) -> list[dict[str, Any]]:
        """Fetch the follower list of an account (one page).

        Args:
            screen_name: Account handle, with or without @

        Returns:
            Raw user objects

        Raises:
            MissingCredentialsError: If no bearer token is configured
            SourceUnavailableError: If the API rejects the token or the account
        """
        screen_name = screen_name.strip().lstrip("@")
        token = self.config.require("twitter_bearer_token")

        try:
            with TwitterClient(
                bearer_token=token,
                rate_limit=self.config.twitter_rate_limit,
                timeout=self.config.http_timeout,
            ) as twitter:
                users = twitter.get_followers(screen_name, count=self.config.follower_cap)
        except APIProviderError as e:
            raise SourceUnavailableError(
                f"Followers of @{screen_name} cannot be read: {e}",
                status_code=e.status_code,
                response_body=e.response_body,
            ) from e

        logger.info("@%s: %d followers fetched", screen_name, len(users))
        return users
