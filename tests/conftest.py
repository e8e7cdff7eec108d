"""
Pytest fixtures for GWAS Catalog tests.
"""

import gzip
import pytest
import tempfile
from pathlib import Path

from gwas_catalog.core.table import Table


CATALOG_HEADER = [
    "PUBMEDID", "DISEASE/TRAIT", "CHR_ID", "CHR_POS", "SNPS", "P-VALUE", "OR or BETA"
]

CATALOG_ROWS = [
    ["1001", "Type 2 diabetes", "6", "32600000", "rs9272346", "2E-8", "1.25"],
    ["1001", "Type 2 diabetes", "6", "31400000", "rs2596542", "1E-9", "0.85"],
    ["1001", "Type 2 diabetes", "6", "", "rs1111; rs2222", "3E-6", "1.10"],
    ["1002", "Type 2 diabetes", "10", "114758349", "rs7903146", "1E-40", "1.37"],
    ["1002", "Type 2 diabetes", "6", "20679709", "rs7754840", "4E-11", "NR"],
    ["1003", "Height", "6", "34200000", "rs1234567", "5E-8", "0.03"],
    ["1003", "Height", "1", "1200000", "chr1:1200000", "6E-9", "-0.02"],
    ["1003", "Height", "X", "15000000", "rs7654321", "2E-12", ""],
    ["1004", "Asthma", "17", "39900000", "rs7216389", "9E-10", "1.45"],
]


def write_catalog(path: Path, header, rows) -> Path:
    lines = ["\t".join(header)] + ["\t".join(row) for row in rows]
    content = "\n".join(lines) + "\n"
    if str(path).endswith(".gz"):
        with gzip.open(path, "wt") as f:
            f.write(content)
    else:
        path.write_text(content)
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def example_table():
    """Three-row table mixing valid and invalid numeric fields."""
    return Table(
        ["ID", "CHR_POS", "OR or BETA"],
        [["x1", "100", "1.2"], ["x2", "abc", "0.9"], ["x3", "200", "n/a"]],
    )


@pytest.fixture
def catalog_table():
    """Small in-memory catalog table."""
    return Table(CATALOG_HEADER, CATALOG_ROWS)


@pytest.fixture
def sample_catalog(temp_dir):
    """Create a sample GWAS Catalog associations file for testing."""
    return write_catalog(temp_dir / "associations.tsv", CATALOG_HEADER, CATALOG_ROWS)


@pytest.fixture
def malformed_catalog(temp_dir):
    """Catalog file with one short and one long row."""
    rows = [list(r) for r in CATALOG_ROWS]
    rows[2] = rows[2][:5]
    rows[4] = rows[4] + ["extra"]
    return write_catalog(temp_dir / "malformed.tsv", CATALOG_HEADER, rows)
