"""Exceptions raised around the formatting core.

The transformers themselves never raise; these cover endpoint dispatch and
settings validation.
"""

from __future__ import annotations

from collections.abc import Iterable


class InsightFormatError(Exception):
    """Base class for insight_format errors."""


class ConfigurationError(InsightFormatError):
    """Settings file or environment variable holds an invalid value."""


class UnknownEndpointError(InsightFormatError, ValueError):
    """Endpoint name is not one of the supported provider endpoints."""

    def __init__(self, endpoint: str, valid_endpoints: Iterable[str]) -> None:
        self.endpoint = endpoint
        self.valid_endpoints = sorted(valid_endpoints)
        super().__init__(
            f"Invalid endpoint: {endpoint}. "
            f"Supported: {', '.join(self.valid_endpoints)}"
        )


class UnsupportedPeriodError(InsightFormatError, ValueError):
    """Requested reporting period is not available for the endpoint."""

    def __init__(self, endpoint: str, period: str, valid_periods: Iterable[str]) -> None:
        self.endpoint = endpoint
        self.period = period
        self.valid_periods = list(valid_periods)
        super().__init__(
            f"The {endpoint} endpoint does not support period '{period}'. "
            f"Supported: {', '.join(self.valid_periods)}"
        )


class EmptyPayloadError(InsightFormatError, ValueError):
    """Provider returned no data for the request."""

    def __init__(self, endpoint: str, symbol: str | None = None) -> None:
        self.endpoint = endpoint
        self.symbol = symbol
        detail = f"No {endpoint} data available"
        if symbol:
            detail += f" for symbol {symbol}"
        super().__init__(detail)
