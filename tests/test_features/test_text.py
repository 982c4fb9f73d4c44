"""Tests for description text features."""

import pandas as pd
import pytest

from sightline.features.text import (
    build_term_frequencies,
    clean_descriptions,
    count_terms,
    sample_descriptions,
)


class TestSampleDescriptions:
    """Test sample_descriptions()."""

    def test_small_input_unchanged(self):
        descriptions = pd.Series(["a", "b", "c"])

        result = sample_descriptions(descriptions, cap=10, seed=1)

        assert result.tolist() == ["a", "b", "c"]

    def test_caps_without_replacement(self):
        descriptions = pd.Series([f"d{i}" for i in range(50)])

        result = sample_descriptions(descriptions, cap=20, seed=1234)

        assert len(result) == 20
        assert result.is_unique

    def test_same_seed_same_sample(self):
        descriptions = pd.Series([f"d{i}" for i in range(50)])

        first = sample_descriptions(descriptions, cap=10, seed=1234)
        second = sample_descriptions(descriptions, cap=10, seed=1234)

        assert first.tolist() == second.tolist()

    def test_invalid_cap(self):
        with pytest.raises(ValueError):
            sample_descriptions(pd.Series(["a"]), cap=0, seed=1)


class TestCleanDescriptions:
    """Test clean_descriptions()."""

    def test_normalization_steps(self):
        result = clean_descriptions(pd.Series(["Data Nerd 2009!!  Maps,   charts"]))

        assert result.tolist() == ["data nerd maps charts"]

    def test_drops_placeholders(self):
        result = clean_descriptions(pd.Series(["NA", None, "cats"]))

        assert result.tolist() == ["cats"]

    def test_removes_stopwords(self):
        result = clean_descriptions(pd.Series(["I love the maps"]))

        assert result.tolist() == ["love maps"]

    def test_typographic_apostrophes_match_stopwords(self):
        result = clean_descriptions(pd.Series(["I’m a map nerd, don’t ask"]))

        assert result.tolist() == ["map nerd ask"]

    def test_custom_stopwords(self):
        result = clean_descriptions(pd.Series(["maps and cats"]), stopwords={"cats"})

        assert result.tolist() == ["maps and"]


class TestCountTerms:
    """Test count_terms()."""

    def test_sorted_by_count_then_term(self):
        result = count_terms(["maps data", "data cats", "data maps"])

        assert result.to_dict() == {"data": 3, "maps": 2, "cats": 1}
        assert result.index.name == "term"

    def test_empty(self):
        result = count_terms(["", ""])

        assert result.empty
        assert result.name == "frequency"


class TestBuildTermFrequencies:
    """Test build_term_frequencies()."""

    def test_end_to_end(self):
        result = build_term_frequencies(pd.Series(["Data nerd", "data, maps & 42 cats", None]))

        assert result.to_dict() == {"data": 2, "cats": 1, "maps": 1, "nerd": 1}

    def test_reproducible_with_sampling(self):
        descriptions = pd.Series([f"term{i} word" for i in range(300)])

        first = build_term_frequencies(descriptions, cap=100, seed=1234)
        second = build_term_frequencies(descriptions, cap=100, seed=1234)

        pd.testing.assert_series_equal(first, second)
        # numerals are stripped, so every sampled description adds one "term" and one "word"
        assert first.to_dict() == {"term": 100, "word": 100}
