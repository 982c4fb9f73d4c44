"""Data Flows page - interactive network diagram."""

import streamlit as st

from sightline.charts.network import build_network_figure
from sightline.config import settings
from sightline.dashboard.data import load_network


def render() -> None:
    """Render the Data Flows page."""
    st.markdown("## Data Flows")

    with st.expander("How to read this page"):
        st.markdown("""
- Each **node** is a system; each **line** is a data flow between two systems.
- **Color** shows the system's data type (legend on the right; click to hide a type).
- **Size** grows with the number of flows in and out: 5 + 3 × flows.
- The **owner** dropdown (top left of the chart) shows one owner's systems.
- Systems with no flows are not drawn.
        """)

    result = load_network()
    if result is None:
        st.info("No network loaded yet. Enter a spreadsheet id and press **Load network** in the sidebar.")
        return

    seed = st.number_input("Layout seed", value=settings.layout_seed, step=1)
    fig = build_network_figure(
        result.nodes, result.edges, seed=int(seed), data_types=settings.data_types,
    )
    st.plotly_chart(fig, use_container_width=True)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Systems", len(result.nodes))
    with col2:
        st.metric("Flows", len(result.edges))
    with col3:
        st.metric("Data types", result.nodes["data_type"].nunique())

    st.markdown("### Systems")
    st.dataframe(
        result.nodes[["id", "data_type", "owner", "in_degree", "out_degree", "degree", "size"]]
        .sort_values("degree", ascending=False),
        hide_index=True,
        use_container_width=True,
    )
