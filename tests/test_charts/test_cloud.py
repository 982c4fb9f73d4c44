"""Tests for the description word cloud."""

import pandas as pd

from sightline.charts.cloud import build_wordcloud


def test_builds_from_frequencies():
    terms = pd.Series({"data": 5, "maps": 3, "cats": 1})

    cloud = build_wordcloud(terms, seed=1234, width=400, height=300)

    assert cloud is not None
    assert set(cloud.words_) == {"data", "maps", "cats"}


def test_min_frequency_filters():
    terms = pd.Series({"data": 5, "maps": 3, "cats": 1})

    cloud = build_wordcloud(terms, min_frequency=2, width=400, height=300)

    assert set(cloud.words_) == {"data", "maps"}


def test_nothing_to_draw():
    assert build_wordcloud(pd.Series(dtype="int64")) is None
    assert build_wordcloud(pd.Series({"data": 1}), min_frequency=2) is None


def test_same_seed_same_layout():
    terms = pd.Series({"data": 5, "maps": 3, "cats": 1})

    first = build_wordcloud(terms, seed=1234, width=400, height=300)
    second = build_wordcloud(terms, seed=1234, width=400, height=300)

    assert first.layout_ == second.layout_
