"""Tests for the interactive network diagram."""

import pandas as pd
import pytest

from sightline.charts.network import (
    ALL_OWNERS,
    OTHER_COLOR,
    OTHER_LABEL,
    assign_categories,
    build_network_figure,
    compute_layout,
)
from sightline.features.degree import build_render_nodes


@pytest.fixture
def network() -> tuple[pd.DataFrame, pd.DataFrame]:
    nodes = pd.DataFrame({
        "id": ["CRM", "Billing", "Reporting", "Ledger"],
        "data_type": ["Customer", "Financial", "Analytics", "Financial"],
        "owner": ["Sales", "Finance", "Finance", "Finance"],
    })
    edges = pd.DataFrame({
        "from": ["CRM", "Billing", "Billing", "Ledger"],
        "to": ["Billing", "Reporting", "Reporting", "Reporting"],
    })
    return build_render_nodes(nodes, edges), edges


class TestComputeLayout:
    """Test compute_layout()."""

    def test_same_seed_same_positions(self, network):
        nodes, edges = network

        assert compute_layout(nodes, edges, seed=42) == compute_layout(nodes, edges, seed=42)

    def test_every_node_placed(self, network):
        nodes, edges = network

        layout = compute_layout(nodes, edges)

        assert set(layout) == set(nodes["id"])

    def test_empty(self):
        empty = pd.DataFrame({"id": []})

        assert compute_layout(empty, pd.DataFrame({"from": [], "to": []})) == {}


class TestAssignCategories:
    """Test assign_categories()."""

    def test_observed_types(self):
        category, colors = assign_categories(pd.Series(["B", "A", "B"]))

        assert category.tolist() == ["B", "A", "B"]
        assert list(colors) == ["A", "B"]

    def test_declared_types_with_other(self):
        category, colors = assign_categories(
            pd.Series(["Customer", "Secret", None]), declared=["Customer", "Financial"]
        )

        assert category.tolist() == ["Customer", OTHER_LABEL, OTHER_LABEL]
        assert list(colors) == ["Customer", "Financial", OTHER_LABEL]
        assert colors[OTHER_LABEL] == OTHER_COLOR


class TestBuildNetworkFigure:
    """Test build_network_figure()."""

    def test_traces(self, network):
        nodes, edges = network

        fig = build_network_figure(nodes, edges)

        assert fig.data[0].mode == "lines"
        node_traces = [t for t in fig.data if t.mode == "markers+text"]
        # (Analytics, Finance), (Customer, Sales), (Financial, Finance)
        assert [(t.name, t.text) for t in node_traces] == [
            ("Analytics", ("Reporting",)),
            ("Customer", ("CRM",)),
            ("Financial", ("Billing", "Ledger")),
        ]

    def test_marker_size_from_degree(self, network):
        nodes, edges = network

        fig = build_network_figure(nodes, edges)

        financial = next(t for t in fig.data if t.name == "Financial")
        assert list(financial.marker.size) == [14, 8]

    def test_legend_grouped_by_data_type(self):
        nodes = pd.DataFrame({
            "id": ["A", "B"], "data_type": ["Customer", "Customer"],
            "owner": ["Sales", "Support"], "size": [8, 8],
        })
        edges = pd.DataFrame({"from": ["A"], "to": ["B"]})

        fig = build_network_figure(nodes, edges)

        customer = [t for t in fig.data[1:] if t.legendgroup == "Customer"]
        assert [t.showlegend for t in customer] == [True, False]

    def test_owner_dropdown(self, network):
        nodes, edges = network

        fig = build_network_figure(nodes, edges)

        buttons = fig.layout.updatemenus[0].buttons
        assert [b.label for b in buttons] == [ALL_OWNERS, "Finance", "Sales"]
        # traces: all flows, Finance flows, Sales flows, then node traces
        # (Analytics, Finance), (Customer, Sales), (Financial, Finance)
        assert buttons[0].args[0]["visible"] == [True, False, False, True, True, True]
        assert buttons[1].args[0]["visible"] == [False, True, False, True, False, True]
        assert buttons[2].args[0]["visible"] == [False, False, True, False, True, False]

    def test_owner_view_hides_flows_to_other_owners(self, network):
        """A single-owner view only draws flows between that owner's systems."""
        nodes, edges = network

        fig = build_network_figure(nodes, edges)

        finance, sales = fig.data[1], fig.data[2]
        assert finance.name == "flows (Finance)"
        assert finance.visible is False
        # Billing->Reporting twice and Ledger->Reporting; CRM->Billing crosses owners
        assert len(finance.x) == 9
        assert len(sales.x) == 0

    def test_deterministic(self, network):
        nodes, edges = network

        first = build_network_figure(nodes, edges, seed=7)
        second = build_network_figure(nodes, edges, seed=7)

        assert first.data[0].x == second.data[0].x
