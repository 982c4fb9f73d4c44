"""Streamlit dashboard for SIGHTLINE.

Pages:
    - Data Flows: interactive network diagram and system table
    - Followers: scatter plots, word cloud, maps and searchable table
"""
