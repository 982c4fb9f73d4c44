"""Main Streamlit application for the SIGHTLINE dashboard.

Run with:
    streamlit run src/sightline/dashboard/app.py
"""

import streamlit as st

from sightline import __version__
from sightline.dashboard.data import get_defaults, refresh_followers, refresh_network

# Page configuration
st.set_page_config(
    page_title="SIGHTLINE",
    page_icon="S",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: 700;
        color: #1f77b4;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)

# Header
st.markdown('<div class="main-header">SIGHTLINE</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="sub-header">Data-flow network and follower atlas</div>',
    unsafe_allow_html=True
)

defaults = get_defaults()

# Sidebar
with st.sidebar:
    st.markdown("### Data Flows")
    spreadsheet_id = st.text_input(
        "Spreadsheet id",
        value=defaults["spreadsheet_id"],
        help="Key from the URL of the published sheet",
    )
    if st.button("Load network", use_container_width=True, disabled=not spreadsheet_id):
        with st.spinner("Reading spreadsheet..."):
            network = refresh_network(spreadsheet_id)
        if network:
            st.success(f"{len(network.nodes)} systems, {len(network.edges)} flows")

    st.markdown("### Followers")
    handle = st.text_input(
        "Handle",
        value=defaults["twitter_handle"],
        help="Account whose followers are shown",
    ).strip().lstrip("@")
    if st.button("Load followers", use_container_width=True, disabled=not handle,
                 help="Fetches followers and geocodes every location (uses API quota)"):
        with st.spinner(f"Fetching and geocoding followers of @{handle}..."):
            followers = refresh_followers(handle)
        if followers:
            st.success(f"{len(followers.followers)} followers")

    # Page selection
    st.markdown("### Navigation")
    page = st.radio(
        "Select Page",
        ["Data Flows", "Followers"],
        label_visibility="collapsed"
    )

    st.markdown("---")
    st.caption(f"**Version**: {__version__}")

# Route to selected page
if page == "Data Flows":
    from sightline.dashboard.pages import network
    network.render()

elif page == "Followers":
    from sightline.dashboard.pages import followers as followers_page
    followers_page.render()
