"""
Explicit data-integrity checks.

Nothing here runs on load. Callers invoke these diagnostics when they want a
report on malformed input.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .exceptions import IntegrityViolation
from .table import Table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegrityReport:
    """Outcome of a row-width check against the header."""

    expected_width: int
    n_rows: int
    mismatches: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.mismatches

    @property
    def offending_rows(self) -> List[int]:
        return [row for row, _ in self.mismatches]

    def raise_for_violations(self) -> None:
        if self.mismatches:
            raise IntegrityViolation(self.expected_width, self.mismatches)

    def to_dict(self) -> Dict:
        return {
            "ok": self.ok,
            "expected_width": self.expected_width,
            "n_rows": self.n_rows,
            "n_mismatches": len(self.mismatches),
            "mismatches": [
                {"row": row, "n_fields": width} for row, width in self.mismatches
            ],
        }


def check_row_integrity(table: Table) -> IntegrityReport:
    """Compare every row's field count with the header length."""
    expected = len(table.header)
    mismatches = [
        (i, len(row)) for i, row in enumerate(table.rows) if len(row) != expected
    ]
    if mismatches:
        logger.warning(
            f"{len(mismatches)} of {len(table)} rows do not have {expected} fields"
        )
    return IntegrityReport(expected_width=expected, n_rows=len(table), mismatches=mismatches)


def find_duplicate_columns(header: Sequence[str]) -> Dict[str, List[int]]:
    """
    Column names that appear more than once, with all their positions.

    Only the last position of a duplicated name is reachable by name.
    """
    positions: Dict[str, List[int]] = {}
    for i, name in enumerate(header):
        positions.setdefault(name, []).append(i)
    return {name: idx for name, idx in positions.items() if len(idx) > 1}
