"""Write rendered artifacts for a pipeline run to an output directory.

Network run:
    network.html

Follower run:
    followers_scatter.png, followers_scatter_log.png
    wordcloud.png
    map_world.png, map_us.png, map_world.html, map_us.html
    followers_table.csv
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt

from sightline.charts.cloud import build_wordcloud
from sightline.charts.followers import build_scatter
from sightline.charts.maps import REGIONS, build_interactive_map, build_static_map
from sightline.charts.network import build_network_figure
from sightline.charts.table import format_follower_table

if TYPE_CHECKING:
    from sightline.pipeline.processor import FollowerResult, NetworkResult

logger = logging.getLogger(__name__)


def _save_figure(fig: plt.Figure, path: Path) -> Path:
    try:
        fig.savefig(path, dpi=120)
    finally:
        plt.close(fig)
    return path


def write_network_report(
    result: NetworkResult,
    out_dir: str | Path,
    seed: int = 42,
    data_types: list[str] | None = None,
) -> list[Path]:
    """Render the network diagram to HTML.

    Returns:
        Paths written
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    fig = build_network_figure(result.nodes, result.edges, seed=seed, data_types=data_types)
    path = out / "network.html"
    fig.write_html(path, include_plotlyjs="cdn")
    logger.info("Wrote %s", path)
    return [path]


def write_follower_report(
    result: FollowerResult,
    out_dir: str | Path,
    max_words: int = 200,
    min_frequency: int = 1,
    seed: int = 1234,
) -> list[Path]:
    """Render scatter plots, word cloud, maps and table.

    Returns:
        Paths written. With no terms the word cloud is skipped and any
        previous wordcloud.png is removed
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    followers = result.followers
    written.append(_save_figure(build_scatter(followers), out / "followers_scatter.png"))
    written.append(_save_figure(build_scatter(followers, log_scale=True),
                                out / "followers_scatter_log.png"))

    cloud = build_wordcloud(result.terms, max_words=max_words,
                            min_frequency=min_frequency, seed=seed)
    path = out / "wordcloud.png"
    if cloud is not None:
        cloud.to_file(str(path))
        written.append(path)
    elif path.exists():
        path.unlink()
        logger.info("No terms; removed previous %s", path)

    for region in REGIONS:
        written.append(_save_figure(build_static_map(followers, region),
                                    out / f"map_{region}.png"))
        path = out / f"map_{region}.html"
        build_interactive_map(followers, region).write_html(path, include_plotlyjs="cdn")
        written.append(path)

    path = out / "followers_table.csv"
    format_follower_table(followers).to_csv(path, index=False)
    written.append(path)

    for path in written:
        logger.info("Wrote %s", path)
    return written
