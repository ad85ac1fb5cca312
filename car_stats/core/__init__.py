"""Core functionality for car_stats.

This module contains:
- Listing schema (named positional columns)
- Row parser and validator with skip counting
"""

from car_stats.core.schema import ColumnDefinition, ListingSchema

__all__ = [
    "ColumnDefinition",
    "ListingSchema",
]


def __getattr__(name: str):
    """Lazy imports for the parser, which pulls in pandas."""
    if name in (
        "ListingParser",
        "ListingRecord",
        "ParseResult",
        "RowRejected",
        "SkipReason",
        "is_numeric",
        "parse_line",
        "parse_listings",
        "split_fields",
    ):
        from car_stats.core import parser

        return getattr(parser, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
