"""
Row masks and paired extraction.

A mask is the set of row indices of one table whose field in a given column
parses successfully. Two masks computed against the same table can be
intersected to find the rows that are valid in both columns.
"""

import logging
from typing import Any, Iterable, List, Tuple

from .exceptions import IndexOutOfRange
from .parsing import Parser
from .table import Table

logger = logging.getLogger(__name__)

RowMask = frozenset


def compute_mask(table: Table, col_index: int, parse_fn: Parser) -> RowMask:
    """
    Compute the rows of ``table`` whose field at ``col_index`` parses.

    Rows too short to hold the column count as failures.
    """
    width = len(table.header)
    if not 0 <= col_index < width:
        raise IndexOutOfRange("column", col_index, width)

    mask = frozenset(
        i for i, row in enumerate(table.rows)
        if col_index < len(row) and parse_fn(row[col_index]) is not None
    )
    logger.debug(f"Mask on {table.header[col_index]}: {len(mask)}/{len(table)} rows")
    return mask


def intersect(mask_a: Iterable[int], mask_b: Iterable[int]) -> RowMask:
    """
    Rows present in both masks.

    The smaller mask is hashed and the larger one probes it; the result does
    not depend on argument order.
    """
    a = mask_a if isinstance(mask_a, (set, frozenset)) else frozenset(mask_a)
    b = mask_b if isinstance(mask_b, (set, frozenset)) else frozenset(mask_b)
    build, probe = (a, b) if len(a) <= len(b) else (b, a)
    return frozenset(i for i in probe if i in build)


def paired_values(
    table: Table,
    col_a: int,
    parse_a: Parser,
    col_b: int,
    parse_b: Parser,
) -> List[Tuple[Any, Any]]:
    """
    Emit ``(value_a, value_b)`` for every row where both fields parse.

    Rows valid in only one of the two columns are left out. Pairs come back
    in original row order.
    """
    both = intersect(
        compute_mask(table, col_a, parse_a),
        compute_mask(table, col_b, parse_b),
    )

    pairs = []
    for i in sorted(both):
        row = table.rows[i]
        pairs.append((parse_a(row[col_a]), parse_b(row[col_b])))

    logger.debug(
        f"Paired {table.header[col_a]} / {table.header[col_b]}: "
        f"{len(pairs)}/{len(table)} rows"
    )
    return pairs
