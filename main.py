#!/usr/bin/env python3
"""
HackRadar - Hackathon winners aggregator.

Command-line entry point for running one winners pass:
  - Read the configured RSS feeds
  - Pick likely winner announcement articles
  - Crawl them for project links and enrich each project
  - Print execution summary (or the JSON payload)

Usage:
    python main.py                      # Run one pass, print summary
    python main.py --json               # Print the /api/winners payload
    python main.py --max-projects 10    # Stop after 10 projects
    python main.py --ideas "AI for mental health"

Examples:
    # Quick sequential run with verbose logs
    python main.py --max-articles 3 --workers 1 --verbose

    # Check configuration
    python main.py --show-config
"""

import argparse
import json
import sys

from hackradar import __version__
from hackradar.config import (
    LOG_LEVEL,
    MAX_ARTICLES,
    MAX_PROJECTS,
    ENRICH_WORKERS,
    MAX_QUERY_CHARS,
    print_config_summary,
    validate_config,
)
from hackradar.logging_setup import configure_logging
from hackradar.pipeline import PipelineConfig, PipelineResult, WinnersPipeline
from hackradar.services.idea_generator import generate_ideas


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="hackradar",
        description="Aggregate hackathon winner projects from RSS feeds.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           Run one pass and print a summary
  %(prog)s --json                    Print the winners JSON payload
  %(prog)s --max-articles 3          Crawl at most 3 articles
  %(prog)s --max-projects 10         Stop after 10 projects
  %(prog)s --workers 1               Enrich projects sequentially
  %(prog)s --ideas "climate tech"    Print idea suggestions instead
  %(prog)s -v --max-articles 2       Verbose run over 2 articles
        """,
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the WinnersResponse JSON instead of the summary",
    )

    parser.add_argument(
        "--max-articles", "-a",
        type=positive_int,
        default=None,
        metavar="N",
        help=f"Newest qualifying articles to crawl (default: {MAX_ARTICLES})",
    )

    parser.add_argument(
        "--max-projects", "-p",
        type=positive_int,
        default=None,
        metavar="N",
        help=f"Maximum projects to collect (default: {MAX_PROJECTS})",
    )

    parser.add_argument(
        "--workers", "-w",
        type=positive_int,
        default=None,
        metavar="N",
        help=f"Enrichment worker threads, 1 = sequential (default: {ENRICH_WORKERS})",
    )

    parser.add_argument(
        "--ideas",
        metavar="QUERY",
        help="Print idea suggestions for QUERY and exit",
    )

    # Output options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed progress and debug logs",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show errors and final output",
    )

    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("HackRadar Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def show_ideas(query: str) -> int:
    """Print idea suggestions for a query."""
    query = query.strip()[:MAX_QUERY_CHARS]
    if not query:
        print("❌ Query cannot be empty")
        return 2

    response = generate_ideas(query)
    print(json.dumps(response.to_dict(), indent=2))
    return 0


def print_result(result: PipelineResult, as_json: bool = False) -> None:
    """Print the pass summary or its JSON payload."""
    if as_json:
        print(json.dumps(result.response.to_dict(), indent=2))
    else:
        print(result.to_summary())


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error, 2 = bad input).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging("DEBUG")
    elif args.quiet:
        configure_logging("ERROR")
    else:
        configure_logging(LOG_LEVEL)

    if args.show_config:
        show_config()
        return 0

    if args.ideas is not None:
        return show_ideas(args.ideas)

    config = PipelineConfig(
        max_articles=MAX_ARTICLES if args.max_articles is None else args.max_articles,
        max_projects=MAX_PROJECTS if args.max_projects is None else args.max_projects,
        enrich_workers=ENRICH_WORKERS if args.workers is None else args.workers,
        verbose=args.verbose,
    )

    if not args.quiet and not args.json:
        print("=" * 60)
        print("HackRadar Winners Pass")
        print("=" * 60)
        print("Settings:")
        print(f"  Sources: {', '.join(config.source_names)}")
        print(f"  Max articles: {config.max_articles}")
        print(f"  Max projects: {config.max_projects}")
        print(f"  Workers: {config.enrich_workers}")
        print()

    try:
        result = WinnersPipeline(config).run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130
    except Exception as e:
        print(f"\n❌ Pipeline error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    print_result(result, as_json=args.json)

    if result.source_results and result.sources_succeeded == 0:
        # All sources failed
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
