"""
Input validation utilities for the GWAS Catalog server.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

CATALOG_EXTENSIONS = ['tsv', 'txt', 'tsv.gz', 'txt.gz']

# Characters that mark a SNPS field as a multi-variant or haplotype entry
_RSID_SEPARATORS = (' ', '\t', ';')


def validate_file_path(
    file_path: str,
    must_exist: bool = True,
    allowed_extensions: Optional[List[str]] = None,
    base_dir: Optional[str] = None
) -> Path:
    """
    Validate and sanitize a file path.

    Args:
        file_path: Path to validate
        must_exist: Whether the file must exist
        allowed_extensions: List of allowed file extensions
        base_dir: Optional base directory to restrict access

    Returns:
        Validated Path object

    Raises:
        ValueError: If path is invalid
        FileNotFoundError: If file doesn't exist and must_exist=True
    """
    if not file_path:
        raise ValueError("No catalog path given")

    path = Path(file_path).resolve()

    if base_dir:
        base = Path(base_dir).resolve()
        if base != path and base not in path.parents:
            raise ValueError("Access denied: path outside allowed directory")

    suspicious_patterns = ['..', '~', '$', '|', ';', '&']
    for pattern in suspicious_patterns:
        if pattern in str(file_path):
            raise ValueError(f"Invalid path: contains suspicious pattern '{pattern}'")

    if allowed_extensions:
        ext = path.suffix.lower().lstrip('.')
        # Handle double extensions like .tsv.gz
        double_ext = ''.join(path.suffixes[-2:]).lower().lstrip('.')

        if ext not in allowed_extensions and double_ext not in allowed_extensions:
            raise ValueError(
                f"Invalid file extension: {path.suffix}. "
                f"Allowed: {allowed_extensions}"
            )

    if must_exist and not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    return path


def is_rsid(value: str) -> bool:
    """
    Check whether a SNPS field holds a single rsID.

    Catalog entries such as 'rs123; rs456', 'rs123 x rs456' or 'chr6:1234'
    are rejected.
    """
    return value.startswith('rs') and not any(sep in value for sep in _RSID_SEPARATORS)


def validate_rsid(rsid: str) -> str:
    """
    Validate an rsID (SNP identifier).

    Args:
        rsid: rsID to validate (e.g., 'rs12345')

    Returns:
        Normalized rsID

    Raises:
        ValueError: If rsID format is invalid
    """
    rsid = rsid.strip().lower()

    if re.match(r'^rs\d+$', rsid):
        return rsid

    raise ValueError(
        f"Invalid rsID format: {rsid}. "
        "Expected format: rs followed by numbers (e.g., rs12345)"
    )


def validate_chromosome(chrom: str) -> str:
    """
    Validate and normalize a chromosome name to the catalog's CHR_ID form.

    Args:
        chrom: Chromosome name (e.g., '1', 'chr1', 'X', 'chrX')

    Returns:
        Normalized chromosome name ('1'-'22', 'X', 'Y' or 'MT')
    """
    chrom = str(chrom).strip().upper()

    if chrom.startswith('CHR'):
        chrom = chrom[3:]

    valid_chroms = set(str(i) for i in range(1, 23)) | {'X', 'Y', 'MT', 'M'}

    if chrom not in valid_chroms:
        raise ValueError(
            f"Invalid chromosome: {chrom}. "
            f"Valid values: 1-22, X, Y, MT"
        )

    if chrom == 'M':
        chrom = 'MT'

    return chrom


def validate_count(value: int, name: str, min_value: int = 0) -> int:
    """
    Validate a non-negative integer parameter such as a minimum row count.

    Raises:
        ValueError: If the value is not an integer or is below ``min_value``
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid {name}: {value}. Must be an integer.")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {name}: {value}. Must be an integer.")

    if number != value and not isinstance(value, str):
        raise ValueError(f"Invalid {name}: {value}. Must be an integer.")

    if number < min_value:
        raise ValueError(f"Invalid {name}: {value}. Must be >= {min_value}.")

    return number
