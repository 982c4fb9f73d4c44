"""Degree features for the data-flow network.

Node size in the rendered network grows linearly with how connected a system
is:
- Degree: in-degree (edges ending at the node) + out-degree (edges starting at it)
- Size: 5 + 3 × degree

Parallel edges are counted, not deduplicated. Systems with no flows at all
are left out of the render set.
"""

import logging

import pandas as pd

logger = logging.getLogger(__name__)

BASE_NODE_SIZE = 5
SIZE_PER_EDGE = 3


def restrict_edges(nodes: pd.DataFrame, edges: pd.DataFrame) -> pd.DataFrame:
    """Keep only edges whose endpoints are both known nodes.

    Args:
        nodes: DataFrame with column: id
        edges: DataFrame with columns: from, to

    Returns:
        Filtered copy of edges (original row order, fresh index).
    """
    for col in ("from", "to"):
        if col not in edges.columns:
            raise ValueError(f"Missing required column: {col}")
    if "id" not in nodes.columns:
        raise ValueError("Missing required column: id")

    known = set(nodes["id"])
    mask = edges["from"].isin(known) & edges["to"].isin(known)
    dropped = int((~mask).sum())
    if dropped:
        unknown = sorted(
            (set(edges.loc[~mask, "from"]) | set(edges.loc[~mask, "to"])) - known
        )
        logger.warning(
            "Dropping %d edge(s) that reference unknown systems: %s",
            dropped, unknown,
        )
    return edges.loc[mask].reset_index(drop=True)


def compute_degrees(nodes: pd.DataFrame, edges: pd.DataFrame) -> pd.DataFrame:
    """Count in-, out- and total degree per node.

    Edges referencing ids outside ``nodes`` are ignored (see restrict_edges).

    Args:
        nodes: DataFrame with column: id
        edges: DataFrame with columns: from, to

    Returns:
        DataFrame indexed by node id with integer columns in_degree,
        out_degree and degree. Every node appears; missing counts are 0.

    Example:
        >>> nodes = pd.DataFrame({"id": ["A", "B", "C"]})
        >>> edges = pd.DataFrame({"from": ["A", "B", "B"], "to": ["B", "C", "C"]})
        >>> compute_degrees(nodes, edges)["degree"].tolist()
        [1, 3, 2]
    """
    edges = restrict_edges(nodes, edges)
    ids = pd.Index(nodes["id"], name="id")

    in_degree = edges["to"].value_counts().reindex(ids, fill_value=0)
    out_degree = edges["from"].value_counts().reindex(ids, fill_value=0)

    degrees = pd.DataFrame({
        "in_degree": in_degree.astype(int),
        "out_degree": out_degree.astype(int),
    }, index=ids)
    degrees["degree"] = degrees["in_degree"] + degrees["out_degree"]
    return degrees


def compute_node_size(degree: pd.Series) -> pd.Series:
    """Map total degree to marker size: 5 + 3 × degree."""
    return BASE_NODE_SIZE + SIZE_PER_EDGE * degree


def build_render_nodes(nodes: pd.DataFrame, edges: pd.DataFrame) -> pd.DataFrame:
    """Attach degree and size to nodes and drop orphans.

    Args:
        nodes: DataFrame with columns: id, data_type, owner
        edges: DataFrame with columns: from, to

    Returns:
        Copy of the connected nodes with in_degree, out_degree, degree and
        size columns, in the original node order.
    """
    degrees = compute_degrees(nodes, edges)
    out = nodes.merge(degrees.reset_index(), on="id", how="left")
    out["size"] = compute_node_size(out["degree"])

    orphans = out["degree"] == 0
    if orphans.any():
        logger.info(
            "Excluding %d system(s) with no data flows: %s",
            int(orphans.sum()), out.loc[orphans, "id"].tolist(),
        )
    return out.loc[~orphans].reset_index(drop=True)
