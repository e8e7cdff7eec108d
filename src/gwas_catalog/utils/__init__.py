"""
GWAS Catalog Utilities Package
"""

from .file_handlers import (
    split_line,
    read_lines,
    read_catalog,
    write_results,
)
from .validators import (
    validate_file_path,
    validate_rsid,
    validate_chromosome,
    validate_count,
    is_rsid,
)

__all__ = [
    "split_line",
    "read_lines",
    "read_catalog",
    "write_results",
    "validate_file_path",
    "validate_rsid",
    "validate_chromosome",
    "validate_count",
    "is_rsid",
]
