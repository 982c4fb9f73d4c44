"""Description text features for the word cloud.

Pipeline, applied in order to each follower description:
1. Null-placeholder removal (missing values and the literal "NA")
2. Case-folding (typographic apostrophes become ')
3. Numeral stripping
4. Stopword removal (fixed English list)
5. Punctuation stripping
6. Whitespace collapsing

Stopwords are removed before punctuation so contractions such as "i'm" or
"don't" match the list.
"""

import logging
import re
import string
from collections import Counter
from typing import Iterable

import pandas as pd
from wordcloud import STOPWORDS

logger = logging.getLogger(__name__)

ENGLISH_STOPWORDS: frozenset[str] = frozenset(STOPWORDS)
NULL_PLACEHOLDERS = frozenset({"NA"})

_NUMERALS = re.compile(r"\d+")
# Typographic apostrophes, folded to ' before stopword matching
_APOSTROPHES = re.compile("[\u2018\u2019\u02bc]")
_PUNCTUATION = re.compile(f"[{re.escape(string.punctuation)}\u201c\u201d\u2026\u2013\u2014]")
_WHITESPACE = re.compile(r"\s+")


def sample_descriptions(descriptions: pd.Series, cap: int, seed: int) -> pd.Series:
    """Cap the number of descriptions with a reproducible uniform sample.

    Args:
        descriptions: One entry per follower (missing values allowed)
        cap: Maximum number of entries to keep
        seed: Random seed for the sample

    Returns:
        The input unchanged when it has at most ``cap`` entries, otherwise
        exactly ``cap`` entries drawn without replacement.
    """
    if cap < 1:
        raise ValueError(f"cap must be >= 1, got {cap}")
    if len(descriptions) <= cap:
        return descriptions
    logger.info("Sampling %d of %d descriptions (seed=%d)", cap, len(descriptions), seed)
    return descriptions.sample(n=cap, random_state=seed)


def clean_descriptions(
    descriptions: pd.Series,
    stopwords: Iterable[str] = ENGLISH_STOPWORDS,
) -> pd.Series:
    """Normalize descriptions into space-separated terms.

    Args:
        descriptions: Raw description text (missing values allowed)
        stopwords: Lower-case words to remove

    Returns:
        Series of cleaned strings; null placeholders are dropped, so the
        result may be shorter than the input. Entries may be "" when every
        word was removed.
    """
    stop = frozenset(stopwords)
    text = descriptions.dropna().astype(str)
    text = text[~text.str.strip().isin(NULL_PLACEHOLDERS)]

    text = text.str.lower()
    text = text.str.replace(_APOSTROPHES, "'", regex=True)
    text = text.str.replace(_NUMERALS, "", regex=True)
    text = text.map(lambda s: " ".join(w for w in s.split() if w not in stop))
    text = text.str.replace(_PUNCTUATION, "", regex=True)
    text = text.str.replace(_WHITESPACE, " ", regex=True).str.strip()
    return text


def count_terms(cleaned: Iterable[str]) -> pd.Series:
    """Count whitespace-separated terms.

    Returns:
        Series indexed by term (name "frequency"), sorted by descending
        count then term.
    """
    counts = Counter(term for doc in cleaned for term in doc.split())
    if not counts:
        return pd.Series(dtype="int64", name="frequency")
    ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    terms, freqs = zip(*ordered)
    return pd.Series(list(freqs), index=pd.Index(list(terms), name="term"),
                     name="frequency", dtype="int64")


def build_term_frequencies(
    descriptions: pd.Series,
    cap: int = 1000,
    seed: int = 1234,
    stopwords: Iterable[str] = ENGLISH_STOPWORDS,
) -> pd.Series:
    """Sample, clean and count follower descriptions.

    Args:
        descriptions: One description per follower
        cap: Maximum descriptions considered (default: 1000)
        seed: Sampling seed (default: 1234)
        stopwords: Words to drop (default: fixed English list)

    Returns:
        Term → frequency Series, most frequent first.

    Example:
        >>> build_term_frequencies(pd.Series(["Data nerd", "data, maps & 42 cats", None])).to_dict()
        {'data': 2, 'cats': 1, 'maps': 1, 'nerd': 1}
    """
    sampled = sample_descriptions(descriptions, cap=cap, seed=seed)
    cleaned = clean_descriptions(sampled, stopwords=stopwords)
    frequencies = count_terms(cleaned)
    logger.info(
        "Term frequencies: %d distinct terms from %d descriptions",
        len(frequencies), len(cleaned),
    )
    return frequencies
