import math

import pytest

from insight_format.numbers import (
    format_dollar,
    format_locale,
    format_multiple,
    format_non_percent,
    format_percent,
    format_value,
    format_with_commas,
    is_integral,
    is_number,
    percent_decimal_places,
    round_to,
    to_fixed,
    to_precision,
)
from insight_format.types import FieldCategory


def _significant_digits(text: str) -> str:
    return text.rstrip("%").replace("-", "").replace(".", "").lstrip("0")


# =============================================================================
# Predicates
# =============================================================================


def test_bool_is_not_a_number():
    assert not is_number(True)
    assert not is_number(False)
    assert is_number(0)
    assert is_number(0.5)


@pytest.mark.parametrize("value, expected", [(5, True), (5.0, True), (5.5, False), (-0.0, True)])
def test_is_integral(value, expected):
    assert is_integral(value) is expected


# =============================================================================
# Rounding primitives
# =============================================================================


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (0.125, 2, "0.13"),  # exact tie rounds away from zero
        (-0.125, 2, "-0.13"),
        (1.005, 2, "1.00"),  # stored just below 1.005
        (12.3456, 2, "12.35"),
        (3, 2, "3.00"),
        (0.00347, 4, "0.0035"),
    ],
)
def test_to_fixed(value, digits, expected):
    assert to_fixed(value, digits) == expected


def test_round_to_keeps_ints_and_drops_negative_zero():
    assert round_to(7) == 7
    assert isinstance(round_to(7), int)
    assert round_to(12.3456) == 12.35
    assert math.copysign(1, round_to(-0.001)) == 1.0


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.00347, "0.0035"),
        (1.5, "1.5"),
        (12.5, "13"),
        (123.456, "1.2e+2"),
        (0.000000123, "1.2e-7"),
        (0.0, "0.0"),
    ],
)
def test_to_precision(value, expected):
    assert to_precision(value, 2) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (1234567, "1,234,567"),
        (1234567.891, "1,234,567.891"),
        (1234.5, "1,234.5"),
        (1234.0, "1,234"),
        (0.1 + 0.2, "0.3"),
        (-9876.54321, "-9,876.543"),
    ],
)
def test_format_with_commas(value, expected):
    assert format_with_commas(value) == expected


def test_format_locale_rounds_shortest_decimal():
    # 1.005 prints as "1.005", so half-up gives 1.01 (unlike to_fixed)
    assert format_locale(1.005, 2) == "1.01"
    assert format_locale(189.456, 2) == "189.46"
    assert format_locale(31.2, 2) == "31.2"


# =============================================================================
# Category rules
# =============================================================================


def test_format_dollar():
    assert format_dollar(1234567) == "1,234,567"
    assert format_dollar(1234.567) == "1,234.57"
    assert format_dollar(1234.5) == "1,234.5"
    assert format_dollar(2.0) == "2"
    assert format_dollar(-9876543.219) == "-9,876,543.22"


def test_format_multiple_returns_number():
    result = format_multiple(12.3456)
    assert result == 12.35
    assert isinstance(result, float)
    assert format_multiple(8) == 8


def test_format_non_percent():
    assert format_non_percent(15812547000) == 15812547000
    assert format_non_percent(6.13) == 6.13
    assert format_non_percent(3.14159) == 3.14


def test_format_percent_normal_value():
    assert format_percent(0.1234) == "12.34%"
    assert format_percent(-0.05) == "-5.00%"
    assert format_percent(1.5607601454639075) == "156.08%"


def test_format_percent_keeps_two_significant_digits_for_tiny_values():
    result = format_percent(0.0000347)
    assert result == "0.0035%"
    assert len(_significant_digits(result)) >= 2

    assert format_percent(1e-7) == "0.000010%"
    assert format_percent(-0.0000347) == "-0.0035%"


def test_format_percent_below_fixed_notation_range_uses_minimum_decimals():
    # 3e-9 * 100 is below 1e-6, where two-digit precision switches to
    # exponential notation and the minimum of four decimals applies
    assert percent_decimal_places(3e-9) == 4
    assert format_percent(3e-9) == "0.0000%"


@pytest.mark.parametrize(
    "value, expected",
    [(0.1234, 2), (0.0002, 2), (0.0000347, 4), (0.0000001, 6)],
)
def test_percent_decimal_places(value, expected):
    assert percent_decimal_places(value) == expected


def test_integer_is_never_percent_formatted():
    assert format_percent(5) == 5
    assert format_percent(5.0) == 5.0
    assert format_value(FieldCategory.PERCENT, 5) == 5


# =============================================================================
# Dispatch
# =============================================================================


@pytest.mark.parametrize(
    "category, value, expected",
    [
        (FieldCategory.DOLLAR, 1234567, "1,234,567"),
        (FieldCategory.MULTIPLE, 12.3456, 12.35),
        (FieldCategory.NON_PERCENT, 2.456, 2.46),
        (FieldCategory.PERCENT, 0.1234, "12.34%"),
    ],
)
def test_format_value_dispatch(category, value, expected):
    assert format_value(category, value) == expected


@pytest.mark.parametrize("category", list(FieldCategory))
def test_format_value_passes_non_finite_through(category):
    assert math.isnan(format_value(category, float("nan")))
    assert format_value(category, float("inf")) == float("inf")
    assert format_value(category, float("-inf")) == float("-inf")


@pytest.mark.parametrize("value", ["12.5", None, True, [1.5], {"a": 1.5}])
def test_format_value_ignores_non_numbers(value):
    assert format_value(FieldCategory.PERCENT, value) == value
