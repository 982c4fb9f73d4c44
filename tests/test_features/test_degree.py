"""Tests for network degree features."""

import pandas as pd
import pytest

from sightline.features.degree import (
    build_render_nodes,
    compute_degrees,
    compute_node_size,
    restrict_edges,
)


@pytest.fixture
def nodes() -> pd.DataFrame:
    return pd.DataFrame({
        "id": ["A", "B", "C", "D"],
        "data_type": ["Customer", "Financial", "Customer", "Archive"],
        "owner": ["Sales", "Finance", "Sales", "IT"],
    })


@pytest.fixture
def edges() -> pd.DataFrame:
    # B -> C appears twice: parallel edges are counted
    return pd.DataFrame({"from": ["A", "B", "B"], "to": ["B", "C", "C"]})


class TestComputeDegrees:
    """Test compute_degrees()."""

    def test_counts_parallel_edges(self, nodes, edges):
        degrees = compute_degrees(nodes, edges)

        assert degrees.loc["A"].tolist() == [0, 1, 1]
        assert degrees.loc["B"].tolist() == [1, 2, 3]
        assert degrees.loc["C"].tolist() == [2, 0, 2]

    def test_every_node_present(self, nodes, edges):
        """Nodes with no edges have zero degree."""
        degrees = compute_degrees(nodes, edges)

        assert degrees.index.tolist() == ["A", "B", "C", "D"]
        assert degrees.loc["D", "degree"] == 0

    def test_self_loop_counts_twice(self):
        """A self-loop is one in and one out."""
        nodes = pd.DataFrame({"id": ["A"]})
        edges = pd.DataFrame({"from": ["A"], "to": ["A"]})

        assert compute_degrees(nodes, edges).loc["A", "degree"] == 2

    def test_no_edges(self, nodes):
        degrees = compute_degrees(nodes, pd.DataFrame({"from": [], "to": []}))

        assert (degrees["degree"] == 0).all()


class TestRestrictEdges:
    """Test restrict_edges()."""

    def test_drops_unknown_endpoints(self, nodes):
        edges = pd.DataFrame({"from": ["A", "Ghost"], "to": ["B", "A"]})

        result = restrict_edges(nodes, edges)

        assert result.to_dict("records") == [{"from": "A", "to": "B"}]

    def test_unknown_edges_not_counted(self, nodes):
        """Edges to unknown systems do not inflate degree."""
        edges = pd.DataFrame({"from": ["A", "A"], "to": ["B", "Ghost"]})

        assert compute_degrees(nodes, edges).loc["A", "out_degree"] == 1

    def test_missing_column_raises(self, nodes):
        with pytest.raises(ValueError, match="Missing required column: to"):
            restrict_edges(nodes, pd.DataFrame({"from": ["A"]}))


class TestNodeSize:
    """Test compute_node_size()."""

    def test_linear_in_degree(self):
        assert compute_node_size(pd.Series([0, 1, 3])).tolist() == [5, 8, 14]


class TestBuildRenderNodes:
    """Test build_render_nodes()."""

    def test_sizes_and_orphans(self, nodes, edges):
        """A→B, B→C, B→C gives sizes 8, 14, 11 and drops D."""
        result = build_render_nodes(nodes, edges)

        assert result["id"].tolist() == ["A", "B", "C"]
        assert result["size"].tolist() == [8, 14, 11]

    def test_keeps_attributes(self, nodes, edges):
        result = build_render_nodes(nodes, edges)

        assert result.loc[result["id"] == "B", "owner"].item() == "Finance"
        assert {"in_degree", "out_degree", "degree", "size"} <= set(result.columns)

    def test_all_orphans(self, nodes):
        result = build_render_nodes(nodes, pd.DataFrame({"from": [], "to": []}))

        assert result.empty
