"""
File handlers for GWAS Catalog association exports.
"""

import gzip
import json
import logging
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from ..core.table import Table

logger = logging.getLogger(__name__)


def split_line(line: str) -> List[str]:
    """
    Split one record on every tab.

    Only the line terminator is removed, so trailing empty fields are kept.
    There is no quoting: a tab always separates fields.
    """
    return line.rstrip("\r\n").split("\t")


def read_lines(file_path: Union[str, Path]) -> List[str]:
    """
    Read all lines of a text file (.gz is decompressed).

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {file_path}")

    opener = gzip.open if str(file_path).endswith('.gz') else open
    with opener(file_path, 'rt', encoding='utf-8', newline='') as f:
        lines = [line.rstrip("\r\n") for line in f]

    if not lines:
        raise ValueError(f"Catalog file is empty: {file_path}")
    return lines


def read_catalog(file_path: Union[str, Path]) -> Table:
    """
    Read a tab-separated GWAS Catalog export into a Table.

    The first line is the header; every following line becomes a row
    verbatim. A blank line becomes a single empty field,
    which ``check_row_integrity`` reports.

    Args:
        file_path: Path to the associations file (.tsv, .txt or .gz)

    Returns:
        Table holding every record as text
    """
    lines = read_lines(file_path)
    header = split_line(lines[0])
    rows = [split_line(line) for line in lines[1:]]

    logger.info(f"Loaded {len(rows)} associations with {len(header)} columns from {file_path}")
    return Table(header, rows)


def write_results(
    data: Union[Table, pd.DataFrame, Dict, list],
    output_path: str,
    format: str = 'tsv'
) -> str:
    """
    Write results to file.

    Args:
        data: Data to write (Table, DataFrame, dict, or list)
        output_path: Output file path
        format: Output format ('tsv', 'csv', 'json')

    Returns:
        Path to written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(data, Table):
        data = data.to_dataframe()

    if isinstance(data, pd.DataFrame):
        if format == 'tsv':
            data.to_csv(output_path, sep='\t', index=False)
        elif format == 'csv':
            data.to_csv(output_path, index=False)
        elif format == 'json':
            data.to_json(output_path, orient='records', indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")
    else:
        with open(output_path, 'w') as f:
            json.dump(data, f, indent=2, default=str)

    logger.info(f"Results written to: {output_path}")
    return str(output_path)
