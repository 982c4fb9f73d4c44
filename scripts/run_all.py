#!/usr/bin/env python3
"""SIGHTLINE — Scheduled refresh runner.

Runs both pipelines for the configured spreadsheet and account, writing
artifacts, Parquet exports and a dated log file. Designed to be called from
cron so the dashboard always shows a recent snapshot.

Usage:
    python scripts/run_all.py
    python scripts/run_all.py --skip-followers   # network only (no API quota)

Scheduling:
    crontab -e
    0 6 * * * /path/to/sightline/.venv/bin/python /path/to/sightline/scripts/run_all.py >> /path/to/sightline/logs/cron.log 2>&1
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Load .env before importing sightline (settings are read at import time)
load_dotenv(PROJECT_ROOT / ".env")

from sightline.config import settings  # noqa: E402
from sightline.pipeline.orchestrator import Orchestrator  # noqa: E402


def setup_logging(log_dir: Path, run_date: date) -> None:
    """Configure logging to both console and a dated log file."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"run_{run_date.isoformat()}.log"

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def save_summary(summaries: dict, run_date: date, output_dir: Path) -> None:
    """Save run summaries as JSON for inspection."""
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / f"summary_{run_date.isoformat()}.json"

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(summaries, f, indent=2, default=str)

    logging.getLogger(__name__).info("Summary saved to %s", output_file)


def main() -> int:
    """Main entry point for the refresh runner."""
    parser = argparse.ArgumentParser(
        description="SIGHTLINE — refresh both pipelines",
    )
    parser.add_argument(
        "--skip-followers",
        action="store_true",
        help="Only run the network pipeline",
    )
    parser.add_argument(
        "--cache-dir",
        type=str,
        default=str(PROJECT_ROOT / settings.cache_dir),
        help="Parquet export directory (default: data/)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=str(PROJECT_ROOT / settings.output_dir),
        help="Artifact directory (default: output/)",
    )
    args = parser.parse_args()

    run_date = date.today()
    setup_logging(PROJECT_ROOT / "logs", run_date)
    logger = logging.getLogger(__name__)

    orchestrator = Orchestrator(cache_dir=args.cache_dir, output_dir=args.output_dir)
    summaries: dict[str, dict] = {}
    failed = False

    try:
        if settings.spreadsheet_id:
            summaries["network"] = orchestrator.run_network(settings.spreadsheet_id).summary()
        else:
            logger.warning("SPREADSHEET_ID not set, network pipeline skipped")

        if args.skip_followers:
            logger.info("Follower pipeline skipped (--skip-followers)")
        elif settings.twitter_handle:
            summaries["followers"] = orchestrator.run_followers(settings.twitter_handle).summary()
        else:
            logger.warning("TWITTER_HANDLE not set, follower pipeline skipped")

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except Exception as e:
        logger.error("Refresh failed: %s", e, exc_info=True)
        failed = True

    save_summary(summaries, run_date, Path(args.output_dir))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
