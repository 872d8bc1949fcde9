from decimal import Decimal

import pytest

from recipe_utils.ingredients.number_utils import (
    format_quantity,
    parse_decimal,
    parse_fraction,
    snap_to_fraction,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2", 2.0),
        ("1.5", 1.5),
        (" 3 ", 3.0),
        (".25", 0.25),
    ],
)
def test_parse_decimal(text, expected):
    assert parse_decimal(text) == expected


@pytest.mark.parametrize("text", ["1/2", "1 1/2", "a pinch", "", "nan", "inf", "2 cups"])
def test_parse_decimal_rejects(text):
    with pytest.raises(ValueError):
        parse_decimal(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1/2", Decimal("0.5")),
        ("3/4", Decimal("0.75")),
        ("1 1/2", Decimal("1.5")),
        ("2  1/4", Decimal("2.25")),
        ("11/2", Decimal("5.5")),
    ],
)
def test_parse_fraction(text, expected):
    assert parse_fraction(text) == expected


def test_parse_fraction_not_a_fraction():
    with pytest.raises(ValueError):
        parse_fraction("a pinch")


def test_parse_fraction_zero_denominator():
    with pytest.raises(ZeroDivisionError):
        parse_fraction("1/0")


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, "2.5"),
        (4.0, "4"),
        (2.5000001, "2.5"),
        (1.234, "1.23"),
        (2.999, "3"),
        (100.0, "100"),
        (0.125, "0.13"),
        (0.0, "0"),
        (-0.001, "0"),
        (Decimal("0.75"), "0.75"),
        (1e30, "1000000000000000019884624838656"),
    ],
)
def test_format_quantity(value, expected):
    assert format_quantity(value) == expected


@pytest.mark.parametrize(
    "quantity, expected",
    [
        ("1.5", "1 1/2"),
        ("0.5", "1/2"),
        ("0.25", "1/4"),
        ("0.33", "1/3"),
        ("0.67", "2/3"),
        ("0.75", "3/4"),
        ("2.25", "2 1/4"),
        ("1.7", "1 2/3"),
        # Within tolerance of both 1/4 and 1/3; the earlier entry wins
        ("0.3", "1/4"),
        ("2.1", "2.1"),
        ("0.9", "0.9"),
        ("3", "3"),
        ("-0.5", "-0.5"),
    ],
)
def test_snap_to_fraction(quantity, expected):
    assert snap_to_fraction(quantity) == expected
