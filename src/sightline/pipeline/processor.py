"""Processor — raw records → normalized tables.

Normalizes worksheet and API payloads and derives the columns the renderers
need (degree and size, geocoded coordinates, term frequencies).
"""

import logging
from dataclasses import dataclass
from typing import Any

import pandas as pd

from sightline.config import Settings, settings as default_settings
from sightline.features import (
    build_follower_table,
    build_render_nodes,
    build_term_frequencies,
    geocode_locations,
    normalize_followers,
    restrict_edges,
)
from sightline.features.geo import Geocoder

logger = logging.getLogger(__name__)

SYSTEMS_COLUMNS = {"System": "id", "Data Type": "data_type", "Owner": "owner"}
FLOWS_COLUMNS = {"From": "from", "To": "to"}


@dataclass
class NetworkResult:
    """Normalized data-flow network, ready to render.

    Attributes:
        nodes: Connected systems with id, data_type, owner, in_degree,
            out_degree, degree, size, label, title
        edges: Flows between rendered systems (from, to); parallel edges kept
        orphans: Ids of systems dropped because they have no flows
    """

    nodes: pd.DataFrame
    edges: pd.DataFrame
    orphans: list[str]

    def summary(self) -> dict[str, Any]:
        """Short run summary for logs and CLI output."""
        return {
            "nodes": len(self.nodes),
            "edges": len(self.edges),
            "orphans": len(self.orphans),
            "data_types": sorted(self.nodes["data_type"].dropna().unique().tolist()),
            "owners": sorted(self.nodes["owner"].dropna().unique().tolist()),
        }


@dataclass
class FollowerResult:
    """Enriched follower table plus word cloud term frequencies.

    Attributes:
        screen_name: Account whose followers these are
        followers: Follower table (see features.followers.FOLLOWER_COLUMNS)
        terms: Term → frequency Series from follower descriptions
    """

    screen_name: str
    followers: pd.DataFrame
    terms: pd.Series

    def summary(self) -> dict[str, Any]:
        """Short run summary for logs and CLI output."""
        return {
            "screen_name": self.screen_name,
            "followers": len(self.followers),
            "geocoded": int(self.followers["longitude"].notna().sum()),
            "continental_us": int(self.followers["in_continental_us"].sum()),
            "terms": len(self.terms),
        }


class Processor:
    """Turns raw source records into normalized, render-ready tables.

    Usage:
        processor = Processor()
        network = processor.process_network(systems_raw, flows_raw)
        followers = processor.process_followers("handle", users, geocoder)
    """

    def __init__(self, config: Settings | None = None) -> None:
        """Initialize processor.

        Args:
            config: Settings to use (default: module-level settings)
        """
        self.config = config or default_settings

    @staticmethod
    def _require_columns(df: pd.DataFrame, required: dict[str, str], sheet: str) -> None:
        missing = [c for c in required if c not in df.columns]
        if missing:
            raise ValueError(
                f"Worksheet '{sheet}' is missing columns: {missing}. Found: {list(df.columns)}"
            )

    @staticmethod
    def _strip_text(df: pd.DataFrame) -> pd.DataFrame:
        """Strip surrounding whitespace; blank cells become missing."""
        df = df.copy()
        for col in df.columns:
            df[col] = df[col].map(
                lambda v: (v.strip() or None) if isinstance(v, str) else (None if pd.isna(v) else v)
            ).astype(object)
        return df

    @staticmethod
    def _normalize_systems(df: pd.DataFrame) -> pd.DataFrame:
        """Map the "Systems" worksheet to id, data_type, owner.

        Rows without a system name are dropped; duplicate names keep the
        first row.
        """
        Processor._require_columns(df, SYSTEMS_COLUMNS, "Systems")
        nodes = Processor._strip_text(df[list(SYSTEMS_COLUMNS)]).rename(columns=SYSTEMS_COLUMNS)
        nodes = nodes.dropna(subset=["id"])

        dupes = nodes["id"].duplicated()
        if dupes.any():
            logger.warning(
                "Duplicate system rows ignored: %s",
                sorted(nodes.loc[dupes, "id"].unique().tolist()),
            )
            nodes = nodes.loc[~dupes]
        return nodes.reset_index(drop=True)

    @staticmethod
    def _normalize_flows(df: pd.DataFrame) -> pd.DataFrame:
        """Map the "Data Flows" worksheet to from, to.

        Rows missing either endpoint are dropped. Repeated flows are kept.
        """
        Processor._require_columns(df, FLOWS_COLUMNS, "Data Flows")
        edges = Processor._strip_text(df[list(FLOWS_COLUMNS)]).rename(columns=FLOWS_COLUMNS)
        incomplete = edges["from"].isna() | edges["to"].isna()
        if incomplete.any():
            logger.warning("Ignoring %d flow row(s) without both endpoints", int(incomplete.sum()))
        return edges.loc[~incomplete].reset_index(drop=True)

    @staticmethod
    def _add_display_columns(nodes: pd.DataFrame) -> pd.DataFrame:
        """Add label and hover title columns."""
        nodes = nodes.copy()
        nodes["label"] = nodes["id"]
        nodes["title"] = (
            "<b>" + nodes["id"].astype(str) + "</b>"
            + "<br>Data type: " + nodes["data_type"].fillna("unknown").astype(str)
            + "<br>Owner: " + nodes["owner"].fillna("unknown").astype(str)
            + "<br>In: " + nodes["in_degree"].astype(str)
            + " / Out: " + nodes["out_degree"].astype(str)
        )
        return nodes

    def process_network(self, systems: pd.DataFrame, flows: pd.DataFrame) -> NetworkResult:
        """Normalize the worksheets and derive the render set.

        Args:
            systems: Raw "Systems" worksheet
            flows: Raw "Data Flows" worksheet

        Returns:
            NetworkResult with connected nodes only
        """
        nodes = self._normalize_systems(systems)
        edges = restrict_edges(nodes, self._normalize_flows(flows))

        render_nodes = build_render_nodes(nodes, edges)
        orphans = sorted(set(nodes["id"]) - set(render_nodes["id"]))
        render_nodes = self._add_display_columns(render_nodes)

        result = NetworkResult(nodes=render_nodes, edges=edges, orphans=orphans)
        logger.info("Network: %s", result.summary())
        return result

    def process_followers(
        self,
        screen_name: str,
        users: list[dict[str, Any]],
        geocoder: Geocoder,
    ) -> FollowerResult:
        """Build the follower table and description term frequencies.

        Geocoding blocks once per follower with a non-blank location.

        Args:
            screen_name: Account the followers belong to
            users: Raw user objects
            geocoder: Location resolver (best effort)

        Returns:
            FollowerResult
        """
        raw = normalize_followers(users)
        coords = geocode_locations(raw["location"].tolist(), geocoder)
        followers = build_follower_table(raw, coords)

        terms = build_term_frequencies(
            followers["description"],
            cap=self.config.wordcloud_sample_size,
            seed=self.config.wordcloud_seed,
        )

        result = FollowerResult(screen_name=screen_name, followers=followers, terms=terms)
        logger.info("Followers: %s", result.summary())
        return result
