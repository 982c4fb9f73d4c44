"""Command-line interface for SIGHTLINE.

Runs either pipeline from the terminal and writes its artifacts.

Usage:
    sightline network 1AbCdEf...
    sightline followers some_handle --output-dir out/
    sightline version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from sightline import __version__
from sightline.clients import SourceUnavailableError
from sightline.config import MissingCredentialsError, settings
from sightline.pipeline.orchestrator import Orchestrator

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured ArgumentParser with all commands and arguments.
    """
    parser = argparse.ArgumentParser(
        prog="sightline",
        description="SIGHTLINE — data-flow network and follower atlas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sightline network 1AbCdEfGhIjKlMnOpQrStUvWxYz
  sightline followers some_handle --sample-size 500
  sightline version
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # network command
    network_parser = subparsers.add_parser(
        "network",
        help="Render the data-flow network from a published spreadsheet",
        description="Read 'Systems' and 'Data Flows' worksheets and render the network",
    )
    network_parser.add_argument(
        "spreadsheet_id",
        type=str,
        help="Spreadsheet key (from the sheet URL)",
    )
    network_parser.add_argument(
        "--layout-seed",
        type=int,
        default=None,
        help=f"Network layout seed (default: {settings.layout_seed})",
    )

    # followers command
    followers_parser = subparsers.add_parser(
        "followers",
        help="Fetch, geocode and chart an account's followers",
        description="Fetch followers, geocode locations, render charts and maps",
    )
    followers_parser.add_argument(
        "handle",
        type=str,
        help="Account handle, with or without @",
    )
    followers_parser.add_argument(
        "--sample-size",
        type=positive_int,
        default=None,
        help=f"Descriptions sampled for the word cloud (default: {settings.wordcloud_sample_size})",
    )
    followers_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help=f"Word cloud sampling/layout seed (default: {settings.wordcloud_seed})",
    )

    for sub in (network_parser, followers_parser):
        sub.add_argument(
            "--output-dir",
            type=Path,
            default=Path(settings.output_dir),
            help=f"Directory for rendered artifacts (default: ./{settings.output_dir})",
        )
        sub.add_argument(
            "--cache-dir",
            type=Path,
            default=Path(settings.cache_dir),
            help=f"Directory for Parquet exports (default: ./{settings.cache_dir})",
        )
        sub.add_argument(
            "--format",
            type=str,
            choices=["text", "json"],
            default="text",
            help="Summary output format (default: text)",
        )

    # version command
    subparsers.add_parser(
        "version",
        help="Show version information",
    )

    return parser


def _print_summary(summary: dict, fmt: str) -> None:
    if fmt == "json":
        print(json.dumps(summary, indent=2))
        return
    for key, value in summary.items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value) or "—"
        print(f"{key:>15}: {value}")


def _run(action, fmt: str) -> int:
    """Run a pipeline callable and map failures to exit codes."""
    try:
        result = action()
        _print_summary(result.summary(), fmt)
        return 0
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except (SourceUnavailableError, MissingCredentialsError) as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error("Pipeline failed: %s", e, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_network(args: argparse.Namespace) -> int:
    """Execute the network command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    logger.info(
        "Running network pipeline for %s (output_dir=%s)",
        args.spreadsheet_id, args.output_dir,
    )
    orchestrator = Orchestrator(cache_dir=str(args.cache_dir), output_dir=str(args.output_dir))
    return _run(
        lambda: orchestrator.run_network(args.spreadsheet_id, layout_seed=args.layout_seed),
        args.format,
    )


def cmd_followers(args: argparse.Namespace) -> int:
    """Execute the followers command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    overrides = {}
    if args.sample_size is not None:
        overrides["wordcloud_sample_size"] = args.sample_size
    if args.seed is not None:
        overrides["wordcloud_seed"] = args.seed
    config = settings.model_copy(update=overrides) if overrides else settings

    logger.info(
        "Running follower pipeline for @%s (output_dir=%s)",
        args.handle.lstrip("@"), args.output_dir,
    )
    orchestrator = Orchestrator(
        cache_dir=str(args.cache_dir),
        output_dir=str(args.output_dir),
        config=config,
    )
    return _run(lambda: orchestrator.run_followers(args.handle), args.format)


def cmd_version(args: argparse.Namespace) -> int:
    """Execute the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    print(f"SIGHTLINE v{__version__}")
    print("Data-flow network and follower atlas")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = create_parser()
    args = parser.parse_args(argv)

    # Route to command handler
    if args.command == "network":
        return cmd_network(args)
    elif args.command == "followers":
        return cmd_followers(args)
    elif args.command == "version":
        return cmd_version(args)
    else:
        # No command specified
        parser.print_help()
        return 0


def cli_entry() -> None:
    """Console script entry point for setuptools."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
