"""Example 2: Description Term Frequencies

Cleans a handful of follower descriptions, counts terms and renders the
word cloud, without calling any API.
"""

import pandas as pd

from sightline.charts import build_wordcloud
from sightline.features import build_term_frequencies


def main():
    descriptions = pd.Series([
        "Data nerd. Maps & charts since 2009!",
        "Public health researcher; maps, data, coffee.",
        "NA",
        None,
        "I tweet about cats and open data",
        "Cartographer | data viz | 3 cats",
    ])

    terms = build_term_frequencies(descriptions, cap=1000, seed=1234)
    print("Top terms:")
    print(terms.head(10).to_string())

    cloud = build_wordcloud(terms, max_words=50, seed=1234)
    if cloud is not None:
        cloud.to_file("wordcloud_example.png")
        print("\nWrote wordcloud_example.png")


if __name__ == "__main__":
    main()
