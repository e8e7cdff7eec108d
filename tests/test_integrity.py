"""
Tests for the explicit integrity checks.
"""

import pytest

from gwas_catalog.core.exceptions import IntegrityViolation
from gwas_catalog.core.integrity import check_row_integrity, find_duplicate_columns
from gwas_catalog.core.table import Table


class TestCheckRowIntegrity:
    """Tests for row width checks."""

    def test_clean_table(self, catalog_table):
        report = check_row_integrity(catalog_table)
        assert report.ok
        assert report.mismatches == []
        assert report.n_rows == 9
        report.raise_for_violations()

    def test_reports_all_mismatches(self):
        table = Table(["A", "B", "C"], [["1", "2", "3"], ["1"], ["1", "2", "3"], ["1", "2", "3", "4"]])
        report = check_row_integrity(table)
        assert not report.ok
        assert report.expected_width == 3
        assert report.mismatches == [(1, 1), (3, 4)]
        assert report.offending_rows == [1, 3]

    def test_raise_for_violations(self):
        table = Table(["A", "B"], [["1"]])
        with pytest.raises(IntegrityViolation) as excinfo:
            check_row_integrity(table).raise_for_violations()
        assert excinfo.value.mismatches == [(0, 1)]
        assert isinstance(excinfo.value, ValueError)

    def test_not_run_on_construction(self):
        table = Table(["A", "B"], [["1"], ["1", "2", "3"]])
        assert table.row_count() == 2
        assert table.unique_values(0) == {"1"}

    def test_to_dict(self):
        report = check_row_integrity(Table(["A", "B"], [["1", "2"], ["1"]]))
        assert report.to_dict() == {
            "ok": False,
            "expected_width": 2,
            "n_rows": 2,
            "n_mismatches": 1,
            "mismatches": [{"row": 1, "n_fields": 1}],
        }


class TestFindDuplicateColumns:
    """Tests for duplicate header detection."""

    def test_no_duplicates(self, catalog_table):
        assert find_duplicate_columns(catalog_table.header) == {}

    def test_duplicates(self):
        assert find_duplicate_columns(["A", "B", "A", "C", "A", "B"]) == {
            "A": [0, 2, 4],
            "B": [1, 5],
        }

    def test_earlier_duplicate_reachable_by_position(self):
        table = Table(["A", "B", "A"], [["first", "x", "second"]])
        assert table.cell(0, table.column_index_of("A")) == "second"
        assert table.cell(0, 0) == "first"
