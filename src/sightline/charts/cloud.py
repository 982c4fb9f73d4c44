"""Word cloud of follower description terms."""

import logging

import pandas as pd
from wordcloud import WordCloud

logger = logging.getLogger(__name__)


def build_wordcloud(
    frequencies: pd.Series,
    max_words: int = 200,
    min_frequency: int = 1,
    seed: int = 1234,
    width: int = 1200,
    height: int = 800,
) -> WordCloud | None:
    """Lay out a word cloud from term frequencies.

    Args:
        frequencies: Term → count Series
        max_words: Most terms shown
        min_frequency: Terms below this count are left out
        seed: Layout seed
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        Generated WordCloud, or None when no term reaches min_frequency
    """
    kept = frequencies[frequencies >= min_frequency]
    if kept.empty:
        logger.warning("No terms with frequency >= %d, word cloud skipped", min_frequency)
        return None

    cloud = WordCloud(
        width=width,
        height=height,
        max_words=max_words,
        background_color="white",
        random_state=seed,
        collocations=False,
    )
    return cloud.generate_from_frequencies({str(k): int(v) for k, v in kept.items()})
