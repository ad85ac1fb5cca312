"""Descriptive statistics for validated listing columns.

This module provides:
- mean, standard_deviation and pearson_correlation over plain float sequences
- Per-column summaries and pairwise correlation reports for a parsed dataset

Invalid input is never an error here. Every function returns the sentinel
value 0.0 when the statistic is undefined for its input (empty column, too few
values, mismatched lengths, zero variance). Malformed rows are rejected
earlier, by the parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Sequence

import numpy as np
from scipy import stats

if TYPE_CHECKING:
    from car_stats.core.parser import ParseResult


def mean(data: Sequence[float]) -> float:
    """Arithmetic mean of data.

    Returns:
        The mean, or 0.0 for an empty sequence
    """
    values = np.asarray(data, dtype=float)
    if values.size == 0:
        return 0.0
    return float(values.mean())


def standard_deviation(data: Sequence[float]) -> float:
    """Population standard deviation of data (divides by N, not N - 1).

    Computed as the square root of the average squared deviation from the mean.

    Returns:
        The standard deviation, or 0.0 for fewer than 2 elements
    """
    values = np.asarray(data, dtype=float)
    if values.size < 2:
        return 0.0
    deviations = values - values.mean()
    return float(np.sqrt(np.mean(deviations**2)))


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson product-moment correlation coefficient of x and y.

    Returns:
        r in [-1, 1], or 0.0 if x and y differ in length, are empty, or
        either has zero variance
    """
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    if xs.size == 0 or xs.size != ys.size:
        return 0.0

    dx = xs - xs.mean()
    dy = ys - ys.mean()
    sxx = float(np.sum(dx * dx))
    syy = float(np.sum(dy * dy))

    # Either denominator factor sqrt(sxx), sqrt(syy) being zero
    if sxx == 0.0 or syy == 0.0:
        return 0.0

    r = float(np.sum(dx * dy)) / float(np.sqrt(sxx * syy))
    return float(np.clip(r, -1.0, 1.0))


def _json_float(value: float | None) -> float | None:
    """Map NaN and infinities to None so results serialize as strict JSON."""
    if value is None or not np.isfinite(value):
        return None
    return float(value)


def _pearson_p_value(r: float, n: int) -> float:
    """Two-sided p-value for r under the null of no correlation."""
    if r * r >= 1.0:
        return 0.0
    t = r * np.sqrt((n - 2) / (1.0 - r * r))
    return float(2.0 * stats.t.sf(abs(t), n - 2))


@dataclass
class ColumnSummary:
    """Summary statistics for one column.

    Attributes:
        column: Column name
        count: Number of values
        mean: Arithmetic mean
        std: Population standard deviation
        min: Minimum value
        max: Maximum value
        median: Median value
    """

    column: str
    count: int
    mean: float
    std: float
    min: float
    max: float
    median: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "column": self.column,
            "count": self.count,
            "mean": _json_float(self.mean),
            "std": _json_float(self.std),
            "min": _json_float(self.min),
            "max": _json_float(self.max),
            "median": _json_float(self.median),
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        lines = [
            f"{self.column} (n={self.count})",
            f"  Mean: {self.mean:.4g}",
            f"  Std Dev: {self.std:.4g}",
            f"  Median: {self.median:.4g}",
            f"  Range: [{self.min:.4g}, {self.max:.4g}]",
        ]
        return "\n".join(lines)


@dataclass
class CorrelationResult:
    """Result from correlating two columns.

    Attributes:
        column_x: First column name
        column_y: Second column name
        n_points: Number of paired values
        pearson_r: Pearson correlation coefficient
        pearson_p: Two-sided p-value, None when it cannot be computed
        interpretation: Human-readable interpretation
    """

    column_x: str
    column_y: str
    n_points: int
    pearson_r: float
    pearson_p: float | None = None
    interpretation: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "column_x": self.column_x,
            "column_y": self.column_y,
            "n_points": self.n_points,
            "pearson": {
                "r": _json_float(self.pearson_r),
                "p_value": _json_float(self.pearson_p),
            },
            "interpretation": self.interpretation,
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        header = f"{self.column_x} vs {self.column_y} (n={self.n_points})"
        if self.pearson_p is None:
            line = f"  Pearson r = {self.pearson_r:.3f}"
        else:
            line = f"  Pearson r = {self.pearson_r:.3f} (p = {self.pearson_p:.2e})"
        lines = [header, line]
        if self.interpretation:
            lines.append(f"  {self.interpretation}")
        return "\n".join(lines)


@dataclass
class AnalysisResult:
    """Complete result from analysing a dataset.

    Attributes:
        success: Whether analysis completed successfully
        summaries: One summary per column
        correlations: Pairwise correlation results
        error: Error message if failed
    """

    success: bool
    summaries: list[ColumnSummary] = field(default_factory=list)
    correlations: list[CorrelationResult] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "summaries": [s.to_dict() for s in self.summaries],
            "correlations": [c.to_dict() for c in self.correlations],
            "error": self.error,
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        if not self.success:
            return f"Analysis failed: {self.error}"

        parts = [s.format_for_display() for s in self.summaries]
        parts.extend(c.format_for_display() for c in self.correlations)
        return "\n\n".join(parts) if parts else "No analysis results."


def summarize_column(name: str, values: Sequence[float]) -> ColumnSummary:
    """Build a ColumnSummary; min, max and median are 0.0 for an empty column."""
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return ColumnSummary(
            column=name, count=0, mean=0.0, std=0.0, min=0.0, max=0.0, median=0.0
        )
    return ColumnSummary(
        column=name,
        count=int(data.size),
        mean=mean(data),
        std=standard_deviation(data),
        min=float(data.min()),
        max=float(data.max()),
        median=float(np.median(data)),
    )


def correlate_columns(
    name_x: str,
    x: Sequence[float],
    name_y: str,
    y: Sequence[float],
) -> CorrelationResult:
    """Correlate two columns and interpret the result."""
    r = pearson_correlation(x, y)
    n_points = len(x) if len(x) == len(y) else 0

    p_value = None
    if n_points >= 3 and standard_deviation(x) > 0.0 and standard_deviation(y) > 0.0:
        p_value = _pearson_p_value(r, n_points)

    return CorrelationResult(
        column_x=name_x,
        column_y=name_y,
        n_points=n_points,
        pearson_r=r,
        pearson_p=p_value,
        interpretation=interpret_correlation(r, p_value),
    )


def interpret_correlation(pearson_r: float, pearson_p: float | None) -> str:
    """Generate human-readable interpretation of a correlation."""
    if np.isnan(pearson_r):
        return "Correlation undefined: a column holds non-finite values."

    abs_r = abs(pearson_r)

    if abs_r < 0.1:
        strength = "negligible"
    elif abs_r < 0.3:
        strength = "weak"
    elif abs_r < 0.5:
        strength = "moderate"
    elif abs_r < 0.7:
        strength = "strong"
    else:
        strength = "very strong"

    direction = "positive" if pearson_r > 0 else "negative"

    if pearson_p is None:
        significance = "significance not available"
    elif pearson_p < 0.001:
        significance = "highly significant (p < 0.001)"
    elif pearson_p < 0.01:
        significance = "significant (p < 0.01)"
    elif pearson_p < 0.05:
        significance = "marginally significant (p < 0.05)"
    else:
        significance = "not statistically significant"

    if strength == "negligible":
        return f"Negligible correlation, {significance}."
    return f"{strength.capitalize()} {direction} correlation, {significance}."


def analyze_dataset(result: ParseResult) -> AnalysisResult:
    """Summarize every column and correlate every pair of columns.

    Args:
        result: Output of the listing parser

    Returns:
        AnalysisResult; unsuccessful if the dataset holds no records
    """
    from car_stats.core.parser import ListingRecord

    if not result.records:
        return AnalysisResult(
            success=False,
            error=result.error or "No valid rows to analyze",
        )

    names = list(ListingRecord._fields)
    columns = {name: result.column(name) for name in names}

    summaries = [summarize_column(name, columns[name]) for name in names]

    correlations = []
    for i, name_x in enumerate(names):
        for name_y in names[i + 1 :]:
            correlations.append(
                correlate_columns(name_x, columns[name_x], name_y, columns[name_y])
            )

    return AnalysisResult(success=True, summaries=summaries, correlations=correlations)
