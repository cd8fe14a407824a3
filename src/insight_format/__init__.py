"""
insight_format - display formatting for financial data provider payloads.

Rewrites numeric leaves of provider JSON (statements, metrics, ratios,
quotes, earnings calendars) into percentages, dollar strings, multiples, or
rounded decimals, based on the key that holds each number.

Entry points:
- percentify_values: statements, key metrics, ratios
- format_quote_data: quote payloads
- format_earnings_calendar: Finnhub earnings calendar
- format_endpoint_payload: pick the transformer by endpoint name
"""

from insight_format.classifier import (
    classify_field,
    is_dollar_field,
    is_multiple_field,
    is_non_percent_field,
    normalize_key,
)
from insight_format.endpoints import (
    format_endpoint_payload,
    get_formatter,
    validate_period,
)
from insight_format.errors import (
    ConfigurationError,
    EmptyPayloadError,
    InsightFormatError,
    UnknownEndpointError,
    UnsupportedPeriodError,
)
from insight_format.numbers import format_value
from insight_format.transform import (
    format_earnings_calendar,
    format_quote_data,
    percentify_values,
)
from insight_format.types import FieldCategory, JsonValue

__all__ = [
    "ConfigurationError",
    "EmptyPayloadError",
    "FieldCategory",
    "InsightFormatError",
    "JsonValue",
    "UnknownEndpointError",
    "UnsupportedPeriodError",
    "classify_field",
    "format_earnings_calendar",
    "format_endpoint_payload",
    "format_quote_data",
    "format_value",
    "get_formatter",
    "is_dollar_field",
    "is_multiple_field",
    "is_non_percent_field",
    "normalize_key",
    "percentify_values",
    "validate_period",
]
