"""
Tests for type-directed field parsers.
"""

import math

import pytest

from gwas_catalog.core.parsing import (
    get_parser,
    parse_float,
    parse_int,
    parse_unsigned,
)


class TestParseInt:
    """Tests for integer parsing."""

    @pytest.mark.parametrize("field,expected", [
        ("100", 100),
        ("0", 0),
        ("-5", -5),
        ("+7", 7),
        ("007", 7),
    ])
    def test_valid(self, field, expected):
        assert parse_int(field) == expected

    @pytest.mark.parametrize("field", ["", "abc", "1.5", " 1", "1 ", "1e3", "1_000", "12;13"])
    def test_invalid(self, field):
        assert parse_int(field) is None

    def test_non_string(self):
        assert parse_int(None) is None


class TestParseUnsigned:
    """Tests for position parsing."""

    def test_valid(self):
        assert parse_unsigned("32600000") == 32600000
        assert parse_unsigned("0") == 0

    @pytest.mark.parametrize("field", ["-1", "", "32600000 x 32600100", "NR", "1.0"])
    def test_invalid(self, field):
        assert parse_unsigned(field) is None


class TestParseFloat:
    """Tests for effect size parsing."""

    @pytest.mark.parametrize("field,expected", [
        ("1.2", 1.2),
        ("0.9", 0.9),
        ("-0.02", -0.02),
        ("3", 3.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1E-9", 1e-9),
        ("2e+3", 2000.0),
    ])
    def test_valid(self, field, expected):
        assert parse_float(field) == pytest.approx(expected)

    def test_infinity(self):
        assert math.isinf(parse_float("inf"))
        assert parse_float("-Infinity") == float("-inf")

    @pytest.mark.parametrize("field", ["", "n/a", "NR", "nan", "NaN", " 1.2", "1.2 ", "1_0.5", "1.2.3", "e5"])
    def test_invalid(self, field):
        assert parse_float(field) is None

    def test_idempotent(self):
        assert parse_float("1.25") == parse_float("1.25")


class TestGetParser:
    """Tests for parser lookup by type name."""

    def test_lookup(self):
        assert get_parser("int") is parse_int
        assert get_parser("unsigned") is parse_unsigned
        assert get_parser("float") is parse_float

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_parser("complex")
