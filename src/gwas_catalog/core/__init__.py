"""
Catalog table core: in-memory store, parsers, masks and integrity checks.
"""

from .exceptions import CatalogError, UnknownColumn, IndexOutOfRange, IntegrityViolation
from .table import ColumnIndex, Table, filter_values
from .parsing import parse_int, parse_unsigned, parse_float, get_parser, PARSERS
from .masks import compute_mask, intersect, paired_values
from .integrity import IntegrityReport, check_row_integrity, find_duplicate_columns

__all__ = [
    "CatalogError",
    "UnknownColumn",
    "IndexOutOfRange",
    "IntegrityViolation",
    "ColumnIndex",
    "Table",
    "filter_values",
    "parse_int",
    "parse_unsigned",
    "parse_float",
    "get_parser",
    "PARSERS",
    "compute_mask",
    "intersect",
    "paired_values",
    "IntegrityReport",
    "check_row_integrity",
    "find_duplicate_columns",
]
