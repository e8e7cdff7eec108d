"""
Tests for catalog file handling.
"""

import json

import pandas as pd
import pytest

from gwas_catalog.core.integrity import check_row_integrity
from gwas_catalog.core.table import Table
from gwas_catalog.utils.file_handlers import read_catalog, read_lines, split_line, write_results

from conftest import CATALOG_HEADER, CATALOG_ROWS, write_catalog


class TestSplitLine:
    """Tests for tab splitting."""

    def test_split(self):
        assert split_line("a\tb\tc\n") == ["a", "b", "c"]

    def test_keeps_empty_fields(self):
        assert split_line("a\t\t\n") == ["a", "", ""]

    def test_crlf(self):
        assert split_line("a\tb\r\n") == ["a", "b"]

    def test_no_quoting(self):
        assert split_line('"a\tb"\tc') == ['"a', 'b"', "c"]

    def test_keeps_spaces(self):
        assert split_line(" a \tb") == [" a ", "b"]


class TestReadCatalog:
    """Tests for loading a catalog export."""

    def test_read(self, sample_catalog):
        table = read_catalog(sample_catalog)
        assert table.header == tuple(CATALOG_HEADER)
        assert table.row_count() == len(CATALOG_ROWS)
        assert table.row(2) == tuple(CATALOG_ROWS[2])

    def test_trailing_empty_fields(self, sample_catalog):
        table = read_catalog(sample_catalog)
        assert table.cell(7, 6) == ""

    def test_gzip(self, temp_dir):
        path = write_catalog(temp_dir / "associations.tsv.gz", CATALOG_HEADER, CATALOG_ROWS)
        assert read_catalog(path) == read_catalog(write_catalog(
            temp_dir / "plain.tsv", CATALOG_HEADER, CATALOG_ROWS
        ))

    def test_malformed_rows_load(self, malformed_catalog):
        table = read_catalog(malformed_catalog)
        assert table.row_count() == len(CATALOG_ROWS)
        assert len(table.row(2)) == 5
        assert len(table.row(4)) == 8

    def test_header_only(self, temp_dir):
        path = temp_dir / "header.tsv"
        path.write_text("A\tB\n")
        table = read_catalog(path)
        assert table.header == ("A", "B")
        assert table.row_count() == 0

    def test_blank_lines_kept_as_rows(self, temp_dir):
        path = temp_dir / "blank.tsv"
        path.write_text("A\tB\n1\t2\n\n3\t4\n")
        table = read_catalog(path)
        assert table.row_count() == 3
        assert table.row(1) == ("",)
        assert check_row_integrity(table).mismatches == [(1, 1)]

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            read_catalog(temp_dir / "missing.tsv")

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.tsv"
        path.write_text("")
        with pytest.raises(ValueError):
            read_lines(path)


class TestWriteResults:
    """Tests for writing results."""

    def test_write_table_tsv(self, temp_dir, example_table):
        out = write_results(example_table, str(temp_dir / "out" / "subset.tsv"))
        df = pd.read_csv(out, sep="\t", dtype=str, keep_default_na=False)
        assert list(df.columns) == ["ID", "CHR_POS", "OR or BETA"]
        assert df["ID"].tolist() == ["x1", "x2", "x3"]

    def test_write_records_json(self, temp_dir):
        records = [{"CHR_POS": 100, "OR or BETA": 1.2}]
        out = write_results(records, str(temp_dir / "pairs.json"), format="json")
        with open(out) as f:
            assert json.load(f) == records

    def test_unsupported_format(self, temp_dir, example_table):
        with pytest.raises(ValueError):
            write_results(example_table, str(temp_dir / "out.xyz"), format="xyz")

    def test_round_trip_through_loader(self, temp_dir, catalog_table):
        out = write_results(catalog_table, str(temp_dir / "copy.tsv"))
        assert read_catalog(out) == catalog_table

    def test_write_empty_table(self, temp_dir):
        out = write_results(Table(["A", "B"]), str(temp_dir / "empty.tsv"))
        assert read_catalog(out).row_count() == 0
