"""
GWAS Catalog - in-memory indexing and filtering of GWAS Catalog association exports.
"""

from .core import (
    Table,
    ColumnIndex,
    compute_mask,
    intersect,
    paired_values,
    check_row_integrity,
)
from .catalog import GWASCatalog

__version__ = "0.1.0"

__all__ = [
    "Table",
    "ColumnIndex",
    "compute_mask",
    "intersect",
    "paired_values",
    "check_row_integrity",
    "GWASCatalog",
]
