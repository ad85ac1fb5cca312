"""Command-line interface for car_stats."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from car_stats import __version__
from car_stats.analysis.statistics import analyze_dataset
from car_stats.config import get_settings
from car_stats.core.parser import ListingParser, ParseResult


def _print_counts(result: ParseResult) -> None:
    print(f"File: {result.path}")
    print(f"Valid rows: {result.parsed}")
    print(f"Skipped rows: {result.skipped}")
    for reason, count in result.skip_reasons.items():
        if count:
            print(f"  {reason}: {count}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid CAR_STATS_* configuration: {e}", file=sys.stderr)
        return 2

    parser = argparse.ArgumentParser(
        prog="car-stats",
        description="Descriptive statistics for used-car listing CSV files",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=str(settings.csv_path),
        help=f"Listings CSV file (default: {settings.csv_path})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {settings.log_level})",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    result = ListingParser(encoding=settings.encoding).parse_file(args.path)
    analysis = analyze_dataset(result)

    if args.json:
        payload = {"parse": result.to_dict(), "analysis": analysis.to_dict()}
        print(json.dumps(payload, indent=2, allow_nan=False))
        return 0

    if result.error:
        print(f"Error: {result.error}", file=sys.stderr)

    _print_counts(result)
    if analysis.success:
        print()
        print(analysis.format_for_display())

    return 0


if __name__ == "__main__":
    sys.exit(main())
