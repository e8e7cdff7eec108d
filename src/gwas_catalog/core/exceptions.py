"""
Exceptions raised by the catalog table core.

Parse failures are not represented here: a field that does not parse as a
number is an expected outcome and is reported as ``None`` by the parsers.
"""

from typing import List, Sequence, Tuple


class CatalogError(Exception):
    """Base class for all catalog table errors."""


class UnknownColumn(CatalogError, KeyError):
    """A column name has no entry in the table's column index."""

    def __init__(self, name: str, available: Sequence[str] = ()):
        self.name = name
        self.available = list(available)
        super().__init__(name)

    def __str__(self) -> str:
        message = f"Unknown column: {self.name!r}"
        if self.available:
            message += f". Available columns: {self.available}"
        return message


class IndexOutOfRange(CatalogError, IndexError):
    """A row or column ordinal is outside the bounds of the table."""

    def __init__(self, kind: str, index: int, size: int):
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"{kind} index {index} out of range [0, {size})")


class IntegrityViolation(CatalogError, ValueError):
    """One or more rows disagree with the header on field count."""

    def __init__(self, expected_width: int, mismatches: List[Tuple[int, int]]):
        self.expected_width = expected_width
        self.mismatches = list(mismatches)
        preview = ", ".join(
            f"row {row} has {width} fields" for row, width in self.mismatches[:5]
        )
        if len(self.mismatches) > 5:
            preview += f", ... ({len(self.mismatches) - 5} more)"
        super().__init__(
            f"{len(self.mismatches)} row(s) do not have {expected_width} fields: {preview}"
        )
