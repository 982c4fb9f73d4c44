"""Data loading layer for the Streamlit dashboard.

Reads the latest exported tables from the Parquet cache and, on request,
re-runs a pipeline through the Orchestrator (without writing artifacts; the
dashboard renders the figures itself).
"""

import logging

import pandas as pd
import streamlit as st

from sightline.cache import ParquetStore
from sightline.config import settings
from sightline.pipeline.orchestrator import Orchestrator
from sightline.pipeline.processor import FollowerResult, NetworkResult

logger = logging.getLogger(__name__)


def _get_orchestrator() -> Orchestrator:
    """Get or create a shared Orchestrator instance via session state."""
    if "orchestrator" not in st.session_state:
        st.session_state["orchestrator"] = Orchestrator()
    return st.session_state["orchestrator"]


def _get_store() -> ParquetStore:
    return _get_orchestrator().cache


def load_network() -> NetworkResult | None:
    """Latest exported network, or None if the pipeline has not run yet."""
    store = _get_store()
    if not (store.exists("network", "nodes") and store.exists("network", "edges")):
        return None
    nodes = store.read("network", "nodes")
    edges = store.read("network", "edges")
    if nodes is None or edges is None:
        return None
    return NetworkResult(nodes=nodes, edges=edges, orphans=[])


def load_followers() -> FollowerResult | None:
    """Latest exported follower table, or None if the pipeline has not run yet.

    The account name comes from the same export as the table.
    """
    store = _get_store()
    followers = store.read("followers", "followers")
    if followers is None:
        return None
    account = store.read("followers", "account")
    screen_name = "" if account is None or account.empty else str(account["screen_name"].iloc[0])
    terms_df = store.read("followers", "terms")
    if terms_df is None:
        terms = pd.Series(dtype="int64", name="frequency")
    else:
        terms = terms_df.set_index("term")["frequency"]
    return FollowerResult(screen_name=screen_name, followers=followers, terms=terms)


def refresh_network(spreadsheet_id: str) -> NetworkResult | None:
    """Re-run the network pipeline. Returns None on failure."""
    orch = _get_orchestrator()
    try:
        return orch.run_network(spreadsheet_id, render=False)
    except Exception as e:
        st.error(f"Network pipeline error: {e}")
        logger.error("Network pipeline failed: %s", e, exc_info=True)
        return None


def refresh_followers(screen_name: str) -> FollowerResult | None:
    """Re-run the follower pipeline. Returns None on failure.

    Spends one geocoding lookup per follower with a location.
    """
    orch = _get_orchestrator()
    try:
        return orch.run_followers(screen_name, render=False)
    except Exception as e:
        st.error(f"Follower pipeline error: {e}")
        logger.error("Follower pipeline failed: %s", e, exc_info=True)
        return None


def get_defaults() -> dict[str, str]:
    """Configured default sources for the sidebar inputs."""
    return {
        "spreadsheet_id": settings.spreadsheet_id or "",
        "twitter_handle": settings.twitter_handle or "",
    }
