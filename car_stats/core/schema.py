"""Column layout for the used-car listings CSV.

The listings file has no reliable header, so the four numeric columns used for
analysis are located by fixed position in the comma-split line. This module
gives those positions names.

Example:
    >>> schema = ListingSchema()
    >>> schema.get_column("price").index
    11
    >>> schema.column_names()
    ('kilometers', 'year', 'engine', 'price')
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ColumnDefinition:
    """Definition of a single numeric column in the listings file."""

    name: str
    index: int  # 0-based position in the split line
    description: str
    unit: str | None = None


class ListingSchema:
    """Named positional columns of the listings file.

    ``COLUMNS`` is ordered by output position, not by file position: a parsed
    record is ``(kilometers, year, engine, price)`` even though the file holds
    them at indices 8, 5, 7 and 11.
    """

    # A line needs at least this many fields to be considered at all
    MIN_FIELDS: ClassVar[int] = 12

    COLUMNS: ClassVar[dict[str, ColumnDefinition]] = {
        "kilometers": ColumnDefinition(
            name="kilometers",
            index=8,
            description="Odometer reading",
            unit="km",
        ),
        "year": ColumnDefinition(
            name="year",
            index=5,
            description="Model year",
        ),
        "engine": ColumnDefinition(
            name="engine",
            index=7,
            description="Engine displacement",
            unit="L",
        ),
        "price": ColumnDefinition(
            name="price",
            index=11,
            description="Listed price",
            unit="EGP",
        ),
    }

    def get_column(self, name: str) -> ColumnDefinition:
        """Look up a column by name.

        Raises:
            KeyError: If the name is not a known column
        """
        try:
            return self.COLUMNS[name]
        except KeyError:
            valid = ", ".join(self.COLUMNS)
            raise KeyError(f"Unknown column {name!r}. Valid columns: {valid}") from None

    def column_names(self) -> tuple[str, ...]:
        return tuple(self.COLUMNS)

    def indices(self) -> tuple[int, ...]:
        """Field positions in output order."""
        return tuple(col.index for col in self.COLUMNS.values())
