"""Tests for follower location maps."""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from sightline.charts.maps import build_interactive_map, build_static_map, select_region


@pytest.fixture
def followers() -> pd.DataFrame:
    return pd.DataFrame({
        "screen_name": ["denver_dev", "parisian", "nowhere"],
        "location": ["Denver, CO", "Paris", None],
        "longitude": [-104.99, 2.35, np.nan],
        "latitude": [39.74, 48.86, np.nan],
        "in_continental_us": [True, False, False],
    })


class TestSelectRegion:
    """Test select_region()."""

    def test_world_drops_unresolved(self, followers):
        assert select_region(followers, "world")["screen_name"].tolist() == ["denver_dev", "parisian"]

    def test_us_uses_flag(self, followers):
        assert select_region(followers, "us")["screen_name"].tolist() == ["denver_dev"]

    def test_unknown_region(self, followers):
        with pytest.raises(ValueError, match="region"):
            select_region(followers, "mars")


class TestMaps:
    """Test static and interactive map builders."""

    def test_static_map_points(self, followers):
        fig = build_static_map(followers, "us")
        try:
            assert len(fig.axes[0].collections[0].get_offsets()) == 1
        finally:
            plt.close(fig)

    def test_interactive_world(self, followers):
        fig = build_interactive_map(followers, "world")

        assert fig.layout.geo.scope == "world"
        assert list(fig.data[0].lon) == [-104.99, 2.35]
        assert fig.data[0].hovertext[0] == "@denver_dev<br>Denver, CO"

    def test_interactive_us(self, followers):
        fig = build_interactive_map(followers, "us")

        assert fig.layout.geo.scope == "usa"
        assert len(fig.data[0].lon) == 1
