"""Display strings for single values shown outside the payload transformers.

Every helper returns ``"N/A"`` for missing or non-finite input.
"""

from __future__ import annotations

from typing import Any

from insight_format.numbers import format_locale, is_finite_number, to_fixed
from insight_format.types import DEFAULT_DECIMALS, NOT_AVAILABLE

# (threshold, divisor, suffix), largest first
LARGE_NUMBER_SCALES: tuple[tuple[float, float, str], ...] = (
    (1e12, 1e12, "T"),
    (1e9, 1e9, "B"),
    (1e6, 1e6, "M"),
)


def _grouped_fixed(value: int | float, decimals: int) -> str:
    """Comma-grouped with exactly ``decimals`` decimals."""
    text = to_fixed(value, decimals)
    whole, _, fraction = text.partition(".")
    sign = "-" if whole.startswith("-") else ""
    grouped = f"{int(whole.lstrip('-')):,}"
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def format_currency(value: Any) -> str:
    """``1234.5`` -> ``"$1,234.50"``, ``-5`` -> ``"-$5.00"``."""
    if not is_finite_number(value):
        return NOT_AVAILABLE
    text = _grouped_fixed(value, DEFAULT_DECIMALS)
    if text.startswith("-"):
        return f"-${text[1:]}"
    return f"${text}"


def format_number(value: Any, decimals: int = DEFAULT_DECIMALS) -> str:
    """Grouped number with a fixed number of decimals."""
    if not is_finite_number(value):
        return NOT_AVAILABLE
    return _grouped_fixed(value, decimals)


def format_large_number(value: Any) -> str:
    """Dollar amount scaled to T/B/M: ``2_345_000_000`` -> ``"$2.35B"``."""
    if not is_finite_number(value):
        return NOT_AVAILABLE
    for threshold, divisor, suffix in LARGE_NUMBER_SCALES:
        if abs(value) >= threshold:
            return f"${format_locale(value / divisor, DEFAULT_DECIMALS)}{suffix}"
    return f"${format_locale(value, DEFAULT_DECIMALS)}"


def format_percentage(value: Any) -> str:
    """Value already expressed in percent: ``12.345`` -> ``"12.35%"``."""
    if not is_finite_number(value):
        return NOT_AVAILABLE
    return f"{format_locale(value, DEFAULT_DECIMALS)}%"


def format_percent(value: Any) -> str:
    """Fraction to percent: ``0.1234`` -> ``"12.34%"``."""
    if not is_finite_number(value):
        return NOT_AVAILABLE
    return f"{format_locale(value * 100, DEFAULT_DECIMALS)}%"
