"""Render a single number under a field category.

The rounding helpers reproduce what browsers show for the same payloads:

- ``to_fixed`` rounds the exact binary value half away from zero and always
  prints the requested decimals, like ``Number.prototype.toFixed``.
- ``format_locale`` rounds the shortest decimal representation and drops
  trailing zeros, like ``toLocaleString('en-US')``.
- ``to_precision`` follows ``Number.prototype.toPrecision``, including its
  switch to exponential notation for exponents below -6.

Python's ``round`` (half to even) is not used anywhere in this module.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

from insight_format.types import (
    DEFAULT_DECIMALS,
    LOCALE_MAX_FRACTION_DIGITS,
    SMALL_PERCENT_MIN_DECIMALS,
    SMALL_PERCENT_SIGNIFICANT_DIGITS,
    SMALL_PERCENT_THRESHOLD,
    FieldCategory,
)

# Wide enough for every digit of the largest double plus its decimals.
_WIDE = Context(prec=400)


# =============================================================================
# Number predicates
# =============================================================================


def is_number(value: Any) -> bool:
    """JSON numbers only. ``bool`` is a JSON boolean, not a number."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    return is_number(value) and (isinstance(value, int) or math.isfinite(value))


def is_integral(value: int | float) -> bool:
    """``Number.isInteger``: ints and whole floats such as ``5.0``."""
    if isinstance(value, int):
        return True
    return math.isfinite(value) and value.is_integer()


# =============================================================================
# Rounding primitives
# =============================================================================


def _quantum(digits: int) -> Decimal:
    return Decimal(1).scaleb(-digits)


def to_fixed(value: int | float, digits: int = DEFAULT_DECIMALS) -> str:
    """Fixed-point string with exactly ``digits`` decimals."""
    rounded = Decimal(value).quantize(_quantum(digits), rounding=ROUND_HALF_UP, context=_WIDE)
    return f"{rounded:f}"


def round_to(value: int | float, digits: int = DEFAULT_DECIMALS) -> int | float:
    """``Number(x.toFixed(digits))``: ints come back untouched."""
    if isinstance(value, int):
        return value
    rounded = float(to_fixed(value, digits))
    # -0.0 serializes as "-0.0"; the browser shows 0
    return 0.0 if rounded == 0 else rounded


def to_precision(value: float, precision: int) -> str:
    """String with ``precision`` significant digits."""
    if value == 0:
        return "0" if precision == 1 else "0." + "0" * (precision - 1)

    sign = "-" if value < 0 else ""
    exact = Decimal(value).copy_abs()
    exponent = exact.adjusted()
    scaled = exact.scaleb(precision - 1 - exponent, context=_WIDE).quantize(
        Decimal(1), rounding=ROUND_HALF_UP, context=_WIDE
    )
    if scaled >= 10**precision:
        scaled = scaled.scaleb(-1, context=_WIDE)
        exponent += 1
    digits = str(int(scaled))

    if exponent < -6 or exponent >= precision:
        mantissa = digits[0] + ("." + digits[1:] if precision > 1 else "")
        return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
    if exponent == precision - 1:
        return sign + digits
    if exponent >= 0:
        return f"{sign}{digits[:exponent + 1]}.{digits[exponent + 1:]}"
    return f"{sign}0.{'0' * (-(exponent + 1))}{digits}"


def format_locale(value: int | float, max_fraction_digits: int = LOCALE_MAX_FRACTION_DIGITS) -> str:
    """en-US grouping with at most ``max_fraction_digits`` decimals, trailing zeros dropped."""
    if isinstance(value, int):
        return f"{value:,}"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"

    rounded = Decimal(repr(value)).quantize(
        _quantum(max_fraction_digits), rounding=ROUND_HALF_UP, context=_WIDE
    )
    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_with_commas(value: int | float) -> str:
    """``toLocaleString('en-US')`` with its default precision."""
    return format_locale(value)


# =============================================================================
# Category rules
# =============================================================================


def percent_decimal_places(value: float) -> int:
    """Decimals for ``value * 100`` so tiny ratios keep two significant digits.

    0.1234 -> 2 ("12.34%"), 0.0000347 -> 4 ("0.0035%"), 1e-7 -> 6 ("0.000010%").
    """
    abs_percent = abs(value * 100)
    if abs_percent >= SMALL_PERCENT_THRESHOLD:
        return DEFAULT_DECIMALS
    text = to_precision(abs_percent, SMALL_PERCENT_SIGNIFICANT_DIGITS)
    _, _, decimals = text.partition(".")
    if len(decimals) > DEFAULT_DECIMALS:
        return len(decimals)
    return SMALL_PERCENT_MIN_DECIMALS


def format_dollar(value: int | float) -> str:
    if is_integral(value):
        return format_with_commas(int(value))
    return format_with_commas(round_to(value, DEFAULT_DECIMALS))


def format_multiple(value: int | float) -> int | float:
    return round_to(value, DEFAULT_DECIMALS)


def format_non_percent(value: int | float) -> int | float:
    if is_integral(value):
        return value
    return round_to(value, DEFAULT_DECIMALS)


def format_percent(value: int | float) -> int | float | str:
    """Fraction to percent string. Whole numbers are returned as-is.

    ``0.1234`` -> ``"12.34%"``; ``5`` stays ``5``, never ``"500%"``.
    """
    if is_integral(value):
        return value
    places = percent_decimal_places(value)
    return f"{to_fixed(value * 100, places)}%"


_RULES = {
    FieldCategory.DOLLAR: format_dollar,
    FieldCategory.MULTIPLE: format_multiple,
    FieldCategory.NON_PERCENT: format_non_percent,
    FieldCategory.PERCENT: format_percent,
}


def format_value(category: FieldCategory, value: Any) -> Any:
    """Apply the category's rule. Non-numbers and NaN/inf are returned unchanged."""
    if not is_finite_number(value):
        return value
    return _RULES[category](value)
