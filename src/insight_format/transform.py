"""Tree transformers for provider JSON payloads.

Three independent entry points, one per payload family:

- ``percentify_values``: statements, key metrics, ratios. Walks the whole tree
  and formats every number by the key that encloses it.
- ``format_quote_data``: ``/quote`` payloads. One level deep, fixed allowlist.
- ``format_earnings_calendar``: Finnhub earnings calendar. Four entry fields.

They disagree on precision and field sets on purpose; each matches the
strings its consumers already render.
"""

from __future__ import annotations

from typing import Any

import structlog

from insight_format.classifier import classify_field
from insight_format.config import get_settings
from insight_format.fields import (
    EARNINGS_CALENDAR_KEY,
    EARNINGS_EPS_FIELDS,
    EARNINGS_REVENUE_FIELDS,
    QUOTE_CHANGE_PERCENT_FIELD,
    QUOTE_EPS_FIELD,
    QUOTE_PRICE_FIELDS,
    QUOTE_SHARES_FIELD,
)
from insight_format.numbers import (
    format_locale,
    format_value,
    format_with_commas,
    is_finite_number,
    is_integral,
    is_number,
    round_to,
    to_fixed,
)
from insight_format.types import DEFAULT_DECIMALS, JsonValue

logger = structlog.get_logger(__name__)


# =============================================================================
# Generic payloads
# =============================================================================


def percentify_values(
    node: JsonValue,
    parent_key: str | None = None,
    *,
    max_depth: int | None = None,
) -> JsonValue:
    """Format every numeric leaf of ``node`` by the key that encloses it.

    Keys, key order, and list lengths are preserved. List elements are walked
    without a parent key, so a number sitting directly in a list is treated
    as a percent. Subtrees nested deeper than ``max_depth`` (default from
    settings) are returned unformatted.

    Args:
        node: Parsed JSON value
        parent_key: Key under which ``node`` was found, if any
        max_depth: Override for ``formatting.max_depth``

    Returns:
        A new tree. ``node`` is not modified, but subtrees cut off at
        ``max_depth`` are the input's own objects, not copies.
    """
    if max_depth is None:
        max_depth = get_settings().formatting.max_depth

    # (source, enclosing key, depth, output container, slot in that container)
    root: list[Any] = [None]
    stack: list[tuple[Any, Any, int, Any, Any]] = [(node, parent_key, 0, root, 0)]
    while stack:
        current, key, depth, target, slot = stack.pop()

        if isinstance(current, (list, dict)) and depth >= max_depth:
            logger.warning("payload nesting exceeds max depth", max_depth=max_depth, key=key)
            target[slot] = current
        elif isinstance(current, list):
            items: list[Any] = [None] * len(current)
            target[slot] = items
            stack.extend((item, None, depth + 1, items, i) for i, item in enumerate(current))
        elif isinstance(current, dict):
            # fromkeys fixes the output key order before any value is filled in
            mapping = dict.fromkeys(current)
            target[slot] = mapping
            stack.extend((value, k, depth + 1, mapping, k) for k, value in current.items())
        else:
            target[slot] = _percentify_leaf(current, key)

    return root[0]


def _percentify_leaf(value: Any, parent_key: str | None) -> Any:
    if not is_number(value):
        return value
    if not is_finite_number(value):
        logger.debug("non-finite value left unformatted", key=parent_key)
        return value
    return format_value(classify_field(parent_key), value)


# =============================================================================
# Quote payloads
# =============================================================================


def _format_quote_field(key: str, value: int | float) -> Any:
    lower = key.lower()
    if lower == QUOTE_CHANGE_PERCENT_FIELD:
        return f"{to_fixed(value, DEFAULT_DECIMALS)}%"
    if lower == QUOTE_SHARES_FIELD:
        return format_with_commas(value)
    if lower == QUOTE_EPS_FIELD:
        return value
    if lower in QUOTE_PRICE_FIELDS:
        if is_integral(value):
            return format_with_commas(int(value))
        return format_locale(value, max_fraction_digits=DEFAULT_DECIMALS)
    return value


def _format_quote_object(node: Any) -> Any:
    if not isinstance(node, dict):
        return node
    result: dict[str, Any] = {}
    for key, value in node.items():
        if is_finite_number(value):
            result[key] = _format_quote_field(key, value)
        else:
            result[key] = value
    return result


def format_quote_data(node: JsonValue) -> JsonValue:
    """Format a quote object, or a list of them.

    Lists are mapped at any nesting; each object's own numeric values are
    touched and containers nested inside an object are copied through as-is.
    """
    # (source, output list, index in that list)
    root: list[Any] = [None]
    stack: list[tuple[Any, list[Any], int]] = [(node, root, 0)]
    while stack:
        current, target, index = stack.pop()
        if isinstance(current, list):
            items: list[Any] = [None] * len(current)
            target[index] = items
            stack.extend((item, items, i) for i, item in enumerate(current))
        else:
            target[index] = _format_quote_object(current)
    return root[0]


# =============================================================================
# Earnings calendar payloads
# =============================================================================


def _format_calendar_entry(entry: Any) -> Any:
    if not isinstance(entry, dict):
        return entry

    formatted = dict(entry)
    for field_name in EARNINGS_REVENUE_FIELDS:
        value = entry.get(field_name)
        if is_finite_number(value):
            formatted[field_name] = format_with_commas(value)
    for field_name in EARNINGS_EPS_FIELDS:
        value = entry.get(field_name)
        if is_finite_number(value):
            formatted[field_name] = round_to(value, DEFAULT_DECIMALS)
    return formatted


def format_earnings_calendar(payload: JsonValue) -> JsonValue:
    """Format revenue and EPS figures in an earnings calendar response.

    ``{"earningsCalendar": [...]}`` entries get comma-grouped revenue and
    2-decimal EPS. Anything without that list comes back unchanged.
    """
    if not isinstance(payload, dict):
        return payload

    entries = payload.get(EARNINGS_CALENDAR_KEY)
    if not isinstance(entries, list):
        return payload

    return {
        **payload,
        EARNINGS_CALENDAR_KEY: [_format_calendar_entry(entry) for entry in entries],
    }
