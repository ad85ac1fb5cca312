"""car_stats: descriptive statistics for used-car listings.

This package reads a CSV file of used-car listings, keeps the rows whose
kilometers, year, engine size and price columns are numeric, and computes
means, standard deviations and Pearson correlations over them.
"""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy imports for main package exports."""
    if name in ("ListingParser", "ParseResult", "parse_listings"):
        from car_stats.core import parser

        return getattr(parser, name)
    if name == "ListingSchema":
        from car_stats.core.schema import ListingSchema

        return ListingSchema
    if name == "analyze_dataset":
        from car_stats.analysis.statistics import analyze_dataset

        return analyze_dataset
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ListingParser",
    "ListingSchema",
    "ParseResult",
    "__version__",
    "analyze_dataset",
    "parse_listings",
]
