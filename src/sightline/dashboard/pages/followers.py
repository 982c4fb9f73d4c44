"""Followers page - scatter plots, word cloud, maps and detail table."""

import matplotlib.pyplot as plt
import streamlit as st

from sightline.charts import (
    build_interactive_map,
    build_scatter,
    build_static_map,
    build_wordcloud,
    filter_table,
    format_follower_table,
)
from sightline.config import settings
from sightline.dashboard.data import load_followers


def _show(fig) -> None:
    st.pyplot(fig)
    plt.close(fig)


def render() -> None:
    """Render the Followers page for the most recently loaded account."""
    st.markdown("## Followers")

    result = load_followers()
    if result is None:
        st.info("No followers loaded yet. Enter a handle and press **Load followers** in the sidebar.")
        return
    if result.screen_name:
        st.markdown(f"**@{result.screen_name}**")

    followers = result.followers
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Followers", len(followers))
    with col2:
        st.metric("Geocoded", int(followers["longitude"].notna().sum()))
    with col3:
        st.metric("Continental US", int(followers["in_continental_us"].sum()))

    # --- Followers vs. favorites ---
    st.markdown("### Followers vs. favorites")
    left, right = st.columns(2)
    with left:
        _show(build_scatter(followers))
    with right:
        _show(build_scatter(followers, log_scale=True))

    # --- Word cloud ---
    st.markdown("### What followers say about themselves")
    cloud = build_wordcloud(
        result.terms,
        max_words=settings.wordcloud_max_words,
        min_frequency=settings.wordcloud_min_frequency,
        seed=settings.wordcloud_seed,
    )
    if cloud is None:
        st.caption("No description terms to show.")
    else:
        st.image(cloud.to_array(), use_container_width=True)

    # --- Maps ---
    st.markdown("### Where followers are")
    tab_world, tab_us, tab_static = st.tabs(["World", "Continental US", "Static maps"])
    with tab_world:
        st.plotly_chart(build_interactive_map(followers, "world"), use_container_width=True)
    with tab_us:
        st.plotly_chart(build_interactive_map(followers, "us"), use_container_width=True)
    with tab_static:
        _show(build_static_map(followers, "world"))
        _show(build_static_map(followers, "us"))
    st.caption(
        "Continental US uses a longitude/latitude box, which also admits parts of "
        "southern Canada and northern Mexico."
    )

    # --- Table ---
    st.markdown("### Follower details")
    query = st.text_input("Search", placeholder="handle, location or description")
    table = filter_table(format_follower_table(followers), query)
    st.dataframe(table, hide_index=True, use_container_width=True)
