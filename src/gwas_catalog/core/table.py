"""
In-memory tabular store for GWAS Catalog association records.

A ``Table`` holds a header and an ordered sequence of rows, every value kept
as text. Typed interpretation happens on demand through the parsers in
``gwas_catalog.core.parsing``. Tables are never mutated after construction:
subsetting returns a new, independent ``Table``.
"""

import logging
from collections import Counter
from collections.abc import Mapping
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import pandas as pd

from .exceptions import IndexOutOfRange, UnknownColumn

logger = logging.getLogger(__name__)

Row = Tuple[str, ...]


class ColumnIndex(Mapping):
    """
    Read-only mapping from column name to ordinal position.

    Built once from a header. When a name appears more than once, the later
    ordinal wins and the earlier column is only reachable by position.
    """

    def __init__(self, header: Sequence[str]):
        positions: Dict[str, int] = {}
        for i, name in enumerate(header):
            positions[name] = i
        self._positions = positions
        self._width = len(header)

    def __getitem__(self, name: str) -> int:
        return self._positions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    @property
    def width(self) -> int:
        """Number of header entries, duplicates included."""
        return self._width

    def __repr__(self) -> str:
        return f"ColumnIndex({self._positions!r})"


class Table:
    """
    An immutable header plus rows of string fields.

    Row length is not checked here; use
    ``gwas_catalog.core.integrity.check_row_integrity`` for that.
    """

    __slots__ = ("_header", "_rows", "_column_index")

    def __init__(self, header: Sequence[str], rows: Iterable[Sequence[str]] = ()):
        self._header: Row = tuple(header)
        self._rows: Tuple[Row, ...] = tuple(tuple(row) for row in rows)
        self._column_index = ColumnIndex(self._header)

    @property
    def header(self) -> Row:
        return self._header

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    @property
    def column_index(self) -> ColumnIndex:
        return self._column_index

    def row_count(self) -> int:
        """Number of rows in this table."""
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._header == other._header and self._rows == other._rows

    def __hash__(self) -> int:
        return hash((self._header, self._rows))

    def __repr__(self) -> str:
        return f"Table(columns={len(self._header)}, rows={len(self._rows)})"

    def column_index_of(self, name: str) -> int:
        """
        Get the ordinal position of a column.

        Raises:
            UnknownColumn: If ``name`` is not in the header
        """
        try:
            return self._column_index[name]
        except KeyError:
            raise UnknownColumn(name, self._header) from None

    def has_column(self, name: str) -> bool:
        return name in self._column_index

    def row(self, row_index: int) -> Row:
        """Get one row by position."""
        self._check_row(row_index)
        return self._rows[row_index]

    def cell(self, row_index: int, col_index: int) -> str:
        """
        Get a single field.

        Raises:
            IndexOutOfRange: If either ordinal is outside the table, or the
                row is too short to hold ``col_index``
        """
        self._check_row(row_index)
        self._check_column(col_index)
        row = self._rows[row_index]
        if col_index >= len(row):
            raise IndexOutOfRange("column", col_index, len(row))
        return row[col_index]

    def column(self, col_index: int) -> List[str]:
        """Values of one column in row order; short rows are skipped."""
        self._check_column(col_index)
        return [row[col_index] for row in self._rows if col_index < len(row)]

    def unique_values(self, col_index: int) -> frozenset:
        """Distinct values found at ``col_index`` across all rows."""
        self._check_column(col_index)
        return frozenset(row[col_index] for row in self._rows if col_index < len(row))

    def value_counts(self, col_index: int) -> Dict[str, int]:
        """Number of rows carrying each distinct value at ``col_index``."""
        self._check_column(col_index)
        return dict(Counter(row[col_index] for row in self._rows if col_index < len(row)))

    def filtered_copy(self, col_index: int, target_value: str) -> "Table":
        """
        Create a new table holding only the rows whose field at
        ``col_index`` equals ``target_value``.

        Row order and header are preserved. The result is empty when no row
        matches.
        """
        self._check_column(col_index)
        kept = [
            row for row in self._rows
            if col_index < len(row) and row[col_index] == target_value
        ]
        logger.debug(
            f"Subset {self._header[col_index]}={target_value!r}: "
            f"{len(kept)}/{len(self._rows)} rows"
        )
        return Table(self._header, kept)

    def subset(self, column_name: str, target_value: str) -> "Table":
        """Same as ``filtered_copy`` but addressed by column name."""
        return self.filtered_copy(self.column_index_of(column_name), target_value)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Export the table as a DataFrame of strings.

        Rows of the wrong width are padded with empty strings or truncated
        so the frame stays rectangular.
        """
        width = len(self._header)
        records = [
            list(row[:width]) + [""] * (width - len(row)) for row in self._rows
        ]
        return pd.DataFrame(records, columns=list(self._header), dtype=str)

    def _check_row(self, row_index: int) -> None:
        if not 0 <= row_index < len(self._rows):
            raise IndexOutOfRange("row", row_index, len(self._rows))

    def _check_column(self, col_index: int) -> None:
        if not 0 <= col_index < len(self._header):
            raise IndexOutOfRange("column", col_index, len(self._header))


def filter_values(
    values: Iterable[str],
    predicate: Optional[Callable[[str], bool]] = None,
) -> frozenset:
    """Keep the values accepted by ``predicate`` (all of them when it is None)."""
    if predicate is None:
        return frozenset(values)
    return frozenset(v for v in values if predicate(v))
