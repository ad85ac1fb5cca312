"""Statistical analysis for car_stats.

This module contains:
- Mean and population standard deviation
- Pearson correlation
- Column summaries and pairwise correlation reports
"""

from car_stats.analysis.statistics import (
    AnalysisResult,
    ColumnSummary,
    CorrelationResult,
    analyze_dataset,
    correlate_columns,
    interpret_correlation,
    mean,
    pearson_correlation,
    standard_deviation,
    summarize_column,
)

__all__ = [
    # Core statistics
    "mean",
    "standard_deviation",
    "pearson_correlation",
    # Reports
    "summarize_column",
    "correlate_columns",
    "interpret_correlation",
    "analyze_dataset",
    "ColumnSummary",
    "CorrelationResult",
    "AnalysisResult",
]
