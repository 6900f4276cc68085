"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from fintrack.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45", Decimal("123.45")),
        ("100", Decimal("100.00")),
        ("1,234.56", Decimal("1234.56")),
        ("1 234,56", Decimal("1234.56")),
        ("$15.00", Decimal("15.00")),
        ("250 ₽", Decimal("250.00")),
        ("0.01", Decimal("0.01")),
        ("999999.99", Decimal("999999.99")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize(
    "text", ["", "   ", "abc", "0", "-5", "1000000", "1.234", "nan"]
)
def test_parse_amount_rejects(text):
    with pytest.raises(ValueError):
        parse_amount(text)
