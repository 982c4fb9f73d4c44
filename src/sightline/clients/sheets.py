"""Google Sheets client for published spreadsheets.

Reads one worksheet at a time through the public CSV export. The spreadsheet
must be shared publicly or published to the web; private sheets answer with a
redirect to the login page (or an HTML page), which is reported as
SourceUnavailableError.

Usage:
    from sightline.clients.sheets import SheetsClient

    with SheetsClient() as client:
        systems = client.get_worksheet("1AbC...", "Systems")
"""

import io
import logging

import pandas as pd

from sightline.clients.base import APIProviderError, BaseClient, SourceUnavailableError

logger = logging.getLogger(__name__)


class SheetsClient(BaseClient):
    """Client for reading published Google Sheets worksheets as DataFrames.

    Args:
        rate_limit: Max requests per second (default: 5)
        timeout: Request timeout in seconds (default: 30)
    """

    def __init__(self, rate_limit: int = 5, timeout: float = 30.0) -> None:
        super().__init__(
            base_url="https://docs.google.com",
            headers={},
            rate_limit=rate_limit,
            timeout=timeout,
        )

    def get_worksheet(self, spreadsheet_id: str, sheet_name: str) -> pd.DataFrame:
        """Read a worksheet as a DataFrame of strings.

        Args:
            spreadsheet_id: Spreadsheet key from the sheet URL
            sheet_name: Worksheet (tab) name, e.g. "Data Flows"

        Returns:
            DataFrame with the worksheet's header row as columns. Every cell
            is read as text; empty cells are NaN.

        Raises:
            SourceUnavailableError: If the sheet is private, unpublished or missing
        """
        try:
            text, content_type = self.get_text(
                f"/spreadsheets/d/{spreadsheet_id}/gviz/tq",
                params={"tqx": "out:csv", "sheet": sheet_name},
            )
        except APIProviderError as e:
            raise SourceUnavailableError(
                f"Spreadsheet {spreadsheet_id!r} worksheet {sheet_name!r} "
                f"cannot be read — is it published? ({e})",
                status_code=e.status_code,
                response_body=e.response_body,
            ) from e

        if "text/html" in content_type or text.lstrip().startswith("<"):
            raise SourceUnavailableError(
                f"Spreadsheet {spreadsheet_id!r} returned HTML instead of CSV — "
                "share it publicly or publish it to the web",
                status_code=200,
                response_body=text[:500],
            )

        if not text.strip():
            logger.warning("Sheet %s / %s is empty", spreadsheet_id, sheet_name)
            return pd.DataFrame()

        df = pd.read_csv(io.StringIO(text), dtype=str)
        logger.info(
            "Sheet %s / %s: %d rows, columns=%s",
            spreadsheet_id, sheet_name, len(df), list(df.columns),
        )
        return df
