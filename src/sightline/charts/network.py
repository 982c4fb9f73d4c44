"""Interactive data-flow network diagram.

Nodes are colored and grouped in the legend by data type, sized by degree,
and an owner dropdown restricts the visible nodes to one owner. The layout is
a seeded spring layout, so the same tables always give the same picture.
"""

import logging

import networkx as nx
import pandas as pd
import plotly.graph_objects as go

logger = logging.getLogger(__name__)

PALETTE = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
]
OTHER_COLOR = "#9E9E9E"
OTHER_LABEL = "Other"
EDGE_COLOR = "#B0B0B0"
ALL_OWNERS = "All owners"


def compute_layout(nodes: pd.DataFrame, edges: pd.DataFrame, seed: int = 42) -> dict[str, tuple[float, float]]:
    """Seeded spring layout over the directed flow graph.

    Returns:
        Mapping node id → (x, y)
    """
    graph = nx.MultiDiGraph()
    graph.add_nodes_from(nodes["id"])
    graph.add_edges_from(zip(edges["from"], edges["to"]))
    if graph.number_of_nodes() == 0:
        return {}
    positions = nx.spring_layout(graph, seed=seed)
    return {node: (float(xy[0]), float(xy[1])) for node, xy in positions.items()}


def assign_categories(
    data_types: pd.Series,
    declared: list[str] | None = None,
) -> tuple[pd.Series, dict[str, str]]:
    """Resolve the legend category and color of every node.

    Without a declared list, every observed data type gets its own entry.
    With one, only declared types get their own entry; anything else is
    shown under "Other".

    Returns:
        (category per node, category → color)
    """
    observed = data_types.fillna(OTHER_LABEL).astype(str)

    if declared is None:
        order = sorted(observed.unique())
        category = observed
    else:
        order = list(declared)
        undeclared = sorted(set(observed) - set(order))
        if undeclared:
            logger.warning(
                "Data types not in the declared legend are shown as %r: %s",
                OTHER_LABEL, undeclared,
            )
        category = observed.where(observed.isin(order), OTHER_LABEL)
        if undeclared and OTHER_LABEL not in order:
            order.append(OTHER_LABEL)

    colors = {}
    for i, name in enumerate(order):
        colors[name] = OTHER_COLOR if name == OTHER_LABEL else PALETTE[i % len(PALETTE)]
    return category, colors


def _edge_trace(
    edges: pd.DataFrame,
    layout: dict[str, tuple[float, float]],
    name: str = "flows",
    visible: bool = True,
) -> go.Scatter:
    xs: list[float | None] = []
    ys: list[float | None] = []
    for src, dst in zip(edges["from"], edges["to"]):
        x0, y0 = layout[src]
        x1, y1 = layout[dst]
        xs += [x0, x1, None]
        ys += [y0, y1, None]
    return go.Scatter(
        x=xs, y=ys,
        mode="lines",
        line=dict(width=1, color=EDGE_COLOR),
        hoverinfo="skip",
        showlegend=False,
        name=name,
        visible=visible,
    )


def build_network_figure(
    nodes: pd.DataFrame,
    edges: pd.DataFrame,
    seed: int = 42,
    data_types: list[str] | None = None,
    title: str = "Data Flows",
) -> go.Figure:
    """Build the interactive network figure.

    Args:
        nodes: Render nodes (id, data_type, owner, size; optional title)
        edges: Flows between render nodes (from, to)
        seed: Layout seed
        data_types: Optional pre-declared legend categories
        title: Figure title

    Returns:
        Plotly figure: an edge trace for all flows, one hidden edge trace
        per owner (flows between that owner's systems), and one node trace
        per (data type, owner) pair, with an owner dropdown.
    """
    layout = compute_layout(nodes, edges, seed=seed)
    nodes = nodes.copy()
    nodes["category"], colors = assign_categories(nodes["data_type"], data_types)
    nodes["owner_key"] = nodes["owner"].fillna("unknown").astype(str)
    hover = nodes["title"] if "title" in nodes.columns else nodes["id"]
    nodes["hover"] = hover

    owners = sorted(nodes["owner_key"].unique())
    owner_of = dict(zip(nodes["id"], nodes["owner_key"]))

    fig = go.Figure()
    fig.add_trace(_edge_trace(edges, layout))
    # (kind, owner) per trace; owner None = shown only with all owners
    trace_keys: list[tuple[str, str | None]] = [("edges", None)]
    for owner in owners:
        internal = edges[
            (edges["from"].map(owner_of) == owner) & (edges["to"].map(owner_of) == owner)
        ]
        fig.add_trace(_edge_trace(internal, layout, name=f"flows ({owner})", visible=False))
        trace_keys.append(("edges", owner))

    seen_categories: set[str] = set()
    for category in colors:
        group = nodes[nodes["category"] == category]
        for owner, rows in group.groupby("owner_key", sort=True):
            fig.add_trace(go.Scatter(
                x=[layout[n][0] for n in rows["id"]],
                y=[layout[n][1] for n in rows["id"]],
                mode="markers+text",
                text=rows["id"].tolist(),
                textposition="top center",
                hovertext=rows["hover"].tolist(),
                hovertemplate="%{hovertext}<extra></extra>",
                marker=dict(
                    size=rows["size"].tolist(),
                    color=colors[category],
                    line=dict(width=1, color="white"),
                ),
                name=category,
                legendgroup=category,
                showlegend=category not in seen_categories,
            ))
            seen_categories.add(category)
            trace_keys.append(("nodes", owner))

    show_all = [kind == "nodes" or key is None for kind, key in trace_keys]
    buttons = [dict(label=ALL_OWNERS, method="update", args=[{"visible": show_all}])]
    for owner in owners:
        visible = [key == owner for _, key in trace_keys]
        buttons.append(dict(label=owner, method="update", args=[{"visible": visible}]))

    fig.update_layout(
        title=title,
        showlegend=True,
        legend_title_text="Data type",
        hovermode="closest",
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        plot_bgcolor="white",
        height=700,
        updatemenus=[dict(buttons=buttons, direction="down", x=0.0, y=1.08,
                          xanchor="left", yanchor="top", showactive=True)],
    )
    return fig
