"""Provider endpoint catalog and formatter selection.

Callers that proxy a provider endpoint pass the endpoint name and raw payload
to ``format_endpoint_payload`` and get back the body to return.
"""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

import structlog

from insight_format.errors import (
    EmptyPayloadError,
    UnknownEndpointError,
    UnsupportedPeriodError,
)
from insight_format.transform import (
    format_earnings_calendar,
    format_quote_data,
    percentify_values,
)
from insight_format.types import JsonValue

logger = structlog.get_logger(__name__)

Formatter = Callable[[JsonValue], JsonValue]

# endpoint name -> upstream path
ENDPOINTS: MappingProxyType[str, str] = MappingProxyType({
    # Basic data
    "quote": "/quote",
    "quote_short": "/quote-short",
    "search": "/search",
    "profile": "/profile",
    # Financial statements
    "income-statement": "/income-statement",
    "balance-sheet-statement": "/balance-sheet-statement",
    "cash-flow-statement": "/cash-flow-statement",
    # Metrics and ratios (annual only)
    "key-metrics": "/key-metrics",
    "ratios": "/ratios",
    # Finnhub
    "earnings-calendar": "/calendar/earnings",
})

ANNUAL_ONLY_ENDPOINTS: frozenset[str] = frozenset({"key-metrics", "ratios"})

ANNUAL_PERIOD = "annual"
QUARTER_PERIODS: frozenset[str] = frozenset({"quarter", "quarterly"})
VALID_PERIODS: tuple[str, ...] = (ANNUAL_PERIOD, "quarter", "quarterly")

# Statements cap at this many periods per request.
MAX_PERIODS = 5


def _passthrough(payload: JsonValue) -> JsonValue:
    return payload


_FORMATTERS: MappingProxyType[str, Formatter] = MappingProxyType({
    "quote": format_quote_data,
    "quote_short": _passthrough,
    "search": _passthrough,
    "profile": _passthrough,
    "income-statement": percentify_values,
    "balance-sheet-statement": percentify_values,
    "cash-flow-statement": percentify_values,
    "key-metrics": percentify_values,
    "ratios": percentify_values,
    "earnings-calendar": format_earnings_calendar,
})


def _require_endpoint(endpoint: str) -> None:
    if endpoint not in ENDPOINTS:
        raise UnknownEndpointError(endpoint, ENDPOINTS.keys())


def validate_period(endpoint: str, period: str | None = None) -> str:
    """Check a reporting period against an endpoint and return it normalized.

    ``None`` means annual.

    Raises:
        UnknownEndpointError: If the endpoint is not in ENDPOINTS.
        UnsupportedPeriodError: If the period is unknown, or quarterly data is
            requested from an annual-only endpoint.
    """
    _require_endpoint(endpoint)
    normalized = (period or ANNUAL_PERIOD).lower()
    if normalized not in VALID_PERIODS:
        raise UnsupportedPeriodError(endpoint, normalized, VALID_PERIODS)
    if endpoint in ANNUAL_ONLY_ENDPOINTS and normalized in QUARTER_PERIODS:
        raise UnsupportedPeriodError(endpoint, normalized, (ANNUAL_PERIOD,))
    return normalized


def clamp_limit(limit: int | None) -> int:
    """Number of periods to request: default and ceiling MAX_PERIODS, floor 1."""
    if limit is None:
        return MAX_PERIODS
    return max(1, min(limit, MAX_PERIODS))


def get_formatter(endpoint: str) -> Formatter:
    """Transformer for an endpoint's payload.

    Raises:
        UnknownEndpointError: If the endpoint is not in ENDPOINTS.
    """
    _require_endpoint(endpoint)
    return _FORMATTERS[endpoint]


def _is_empty(payload: Any) -> bool:
    return payload is None or (isinstance(payload, (list, dict)) and not payload)


def format_endpoint_payload(
    endpoint: str,
    payload: JsonValue,
    symbol: str | None = None,
) -> JsonValue:
    """Format a raw provider payload for the given endpoint.

    Raises:
        UnknownEndpointError: If the endpoint is not in ENDPOINTS.
        EmptyPayloadError: If the provider returned nothing.
    """
    formatter = get_formatter(endpoint)
    if _is_empty(payload):
        raise EmptyPayloadError(endpoint, symbol)
    logger.debug("formatting payload", endpoint=endpoint, symbol=symbol)
    return formatter(payload)
