from fractions import Fraction

import pytest

from parsing import ParseError, parse_decimal, parse_literal, parse_number
from tower import GaussianRational, Integer, Rational


class TestScanners:
    def test_decimal(self):
        assert parse_decimal("2.50x", 0) == (Fraction(5, 2), 4)
        assert parse_decimal("17/3", 0) == (Fraction(17), 2)

    def test_literal(self):
        assert parse_literal("3/4i", 0) == (Fraction(3, 4), 3)
        assert parse_literal("0.1", 0) == (Fraction(1, 10), 3)

    def test_literal_rejects_zero_denominator(self):
        with pytest.raises(ParseError):
            parse_literal("1/0", 0)

    def test_decimal_needs_digits_after_point(self):
        with pytest.raises(ParseError):
            parse_decimal("1.", 0)


class TestParseNumber:
    @pytest.mark.parametrize("text, expected", [
        ("7", Integer(7)),
        ("-7/3", Rational(-7, 3)),
        ("  2.5 ", Rational(5, 2)),
        ("3i", GaussianRational(0, 1, 3, 1)),
        ("-i", GaussianRational(0, 1, -1, 1)),
        ("i", GaussianRational(0, 1, 1, 1)),
        ("1/2 + -3/4i", GaussianRational(1, 2, -3, 4)),
        ("1/2 - 3/4i", GaussianRational(1, 2, -3, 4)),
        ("4/2 + 0/1i", Integer(2)),
    ])
    def test_accepted(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("value", [
        Integer(-12),
        Rational(22, 7),
        GaussianRational(1, 3, -5, 8),
        GaussianRational(-2, 1, 1, 1),
    ])
    def test_reads_back_printed_values(self, value):
        assert parse_number(str(value)) == value

    @pytest.mark.parametrize("text", [
        "",
        "   ",
        "3i + 2",
        "1/2 3i",
        "1 + 2",
        "1 + 2i x",
        "abc",
        "1/0",
    ])
    def test_rejected(self, text):
        with pytest.raises(ParseError):
            parse_number(text)

    def test_parse_error_is_value_error(self):
        assert issubclass(ParseError, ValueError)
