"""Row parsing and validation for used-car listings.

This module turns raw CSV lines into validated numeric records. It handles:
- Header skipping (line 0 is never data and never counted as a skip)
- Naive comma splitting with per-field whitespace trimming
- Numeric validation of the four analysed columns
- Skip counting, broken down by rejection reason
- Whole-file failures (missing or unopenable file) as diagnostics, not errors

Example:
    >>> from car_stats.core.parser import parse_listings
    >>> result = parse_listings("Egypt-Used-Car-Price.csv")
    >>> print(f"Parsed {result.parsed} rows, skipped {result.skipped}")
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, NamedTuple

import pandas as pd

from car_stats.core.schema import ListingSchema

if TYPE_CHECKING:
    from typing import IO

logger = logging.getLogger(__name__)

# Floating-point literal grammar: sign, digits, optional fraction and exponent,
# or one of the special values. Python's float() also accepts digit-group
# underscores, which are not numbers in a CSV file.
_FLOAT_RE = re.compile(
    r"""
    [+-]?
    (?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
        | inf(?:inity)?
        | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


class SkipReason(str, Enum):
    """Why a data line was rejected."""

    TOO_FEW_FIELDS = "too_few_fields"
    NON_NUMERIC = "non_numeric"
    UNREADABLE = "unreadable"


class ListingRecord(NamedTuple):
    """A validated listing, in output order."""

    kilometers: float
    year: float
    engine: float
    price: float


class RowRejected(ValueError):
    """Raised when a single line cannot become a ListingRecord."""

    def __init__(self, reason: SkipReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason


@dataclass
class ParseResult:
    """Outcome of one parsing pass over a listings file.

    Attributes:
        path: Source file path (None when parsing in-memory lines)
        records: Validated records in input line order
        skipped: Total number of rejected data lines
        skip_reasons: Rejected line count per SkipReason value
        total_lines: Number of lines read, header included
        error: Whole-file diagnostic if the file could not be read
    """

    path: str | None = None
    records: list[ListingRecord] = field(default_factory=list)
    skipped: int = 0
    skip_reasons: dict[str, int] = field(
        default_factory=lambda: {reason.value: 0 for reason in SkipReason}
    )
    total_lines: int = 0
    error: str | None = None

    @property
    def parsed(self) -> int:
        """Number of validated records."""
        return len(self.records)

    @property
    def success(self) -> bool:
        return self.error is None

    def record_skip(self, reason: SkipReason) -> None:
        self.skipped += 1
        self.skip_reasons[reason.value] += 1

    def column(self, name: str) -> list[float]:
        """Get the values of one named column, in dataset order.

        Raises:
            KeyError: If the name is not a record field
        """
        if name not in ListingRecord._fields:
            valid = ", ".join(ListingRecord._fields)
            raise KeyError(f"Unknown column {name!r}. Valid columns: {valid}")
        position = ListingRecord._fields.index(name)
        return [record[position] for record in self.records]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert the records to a DataFrame with one column per field."""
        return pd.DataFrame.from_records(
            self.records, columns=list(ListingRecord._fields)
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert counts and diagnostics to a dictionary (records omitted)."""
        return {
            "path": self.path,
            "parsed": self.parsed,
            "skipped": self.skipped,
            "skip_reasons": dict(self.skip_reasons),
            "total_lines": self.total_lines,
            "error": self.error,
        }


def is_numeric(text: str) -> bool:
    """Check whether text is a valid floating-point literal.

    Accepts signed values, decimals, scientific notation and the special
    values inf/infinity/nan. Rejects empty strings and anything else.
    """
    return _FLOAT_RE.fullmatch(text) is not None


def split_fields(line: str) -> list[str]:
    """Split a line on commas and trim each field. No quoting support."""
    return [part.strip() for part in line.split(",")]


def parse_line(line: str, schema: ListingSchema | None = None) -> ListingRecord:
    """Parse a single data line into a ListingRecord.

    Args:
        line: Raw line text, without the line terminator
        schema: Column layout (default: ListingSchema())

    Returns:
        Validated ListingRecord

    Raises:
        RowRejected: If the line has too few fields or a non-numeric target field
    """
    schema = schema or ListingSchema()
    fields = split_fields(line)

    if len(fields) < schema.MIN_FIELDS:
        raise RowRejected(
            SkipReason.TOO_FEW_FIELDS,
            f"Expected at least {schema.MIN_FIELDS} fields, got {len(fields)}",
        )

    values = []
    for column in schema.COLUMNS.values():
        text = fields[column.index]
        if not is_numeric(text):
            raise RowRejected(
                SkipReason.NON_NUMERIC,
                f"Field {column.name} (index {column.index}) is not numeric: {text!r}",
            )
        values.append(float(text))

    return ListingRecord(*values)


class ListingParser:
    """Reads a listings file into validated records.

    Each data line is either fully accepted as a ListingRecord or fully
    rejected and counted; no partial records are produced.

    Example:
        >>> parser = ListingParser()
        >>> result = parser.parse_file("Egypt-Used-Car-Price.csv")
        >>> result.parsed + result.skipped + 1 == result.total_lines
        True
    """

    def __init__(
        self,
        schema: ListingSchema | None = None,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the parser.

        Args:
            schema: Column layout (default: ListingSchema())
            encoding: Text encoding used to decode byte lines
        """
        self.schema = schema or ListingSchema()
        self.encoding = encoding

    def parse_file(self, path: Path | str) -> ParseResult:
        """Parse a listings file.

        A missing or unopenable file yields an empty result with ``error`` set;
        no exception is raised.

        Args:
            path: Path to the CSV file

        Returns:
            ParseResult with records and skip counts
        """
        path = Path(path)
        result = ParseResult(path=str(path))

        logger.info(f"Reading listings from {path}")

        try:
            with path.open("rb") as fh:
                self._consume(fh, result)
        except FileNotFoundError:
            result.error = f"File '{path}' does not exist"
            logger.warning(result.error)
            return result
        except OSError as e:
            result.error = f"Could not open file '{path}': {e}"
            logger.error(result.error)
            return result

        logger.info(
            f"Parsed {result.parsed} rows, skipped {result.skipped} rows "
            f"({result.total_lines} lines read)"
        )
        return result

    def parse_lines(self, lines: Iterable[str | bytes]) -> ParseResult:
        """Parse in-memory lines; the first line is treated as the header."""
        result = ParseResult()
        self._consume(lines, result)
        return result

    def _consume(
        self,
        lines: Iterable[str | bytes] | IO[bytes],
        result: ParseResult,
    ) -> None:
        """Feed lines into result, stopping at the first read error."""
        iterator = iter(lines)

        while True:
            try:
                raw = next(iterator)
            except StopIteration:
                break
            except OSError as e:
                # The failed read counts as a line; header failures stay uncounted
                if result.total_lines > 0:
                    result.record_skip(SkipReason.UNREADABLE)
                result.total_lines += 1
                logger.error(f"Read error after {result.total_lines - 1} lines: {e}")
                break

            index = result.total_lines
            result.total_lines += 1

            if index == 0:
                continue

            self._handle_line(raw, index, result)

    def _handle_line(self, raw: str | bytes, index: int, result: ParseResult) -> None:
        """Parse one data line and record it or its rejection."""
        if isinstance(raw, bytes):
            try:
                line = raw.decode(self.encoding)
            except UnicodeDecodeError as e:
                logger.debug(f"Line {index}: undecodable ({e})")
                result.record_skip(SkipReason.UNREADABLE)
                return
        else:
            line = raw

        line = line.rstrip("\r\n")

        try:
            record = parse_line(line, self.schema)
        except RowRejected as e:
            logger.debug(f"Line {index}: {e}")
            result.record_skip(e.reason)
            return

        result.records.append(record)


def parse_listings(
    path: Path | str,
    schema: ListingSchema | None = None,
    encoding: str = "utf-8",
) -> ParseResult:
    """Parse a listings file with a default-configured ListingParser."""
    return ListingParser(schema=schema, encoding=encoding).parse_file(path)
