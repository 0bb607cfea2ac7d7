"""Shared constants and exceptions."""

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_INTERVAL,
    DEFAULT_RANGE,
    DEFAULT_REFRESH_MS,
    MIN_REFRESH_MS,
)
from .exceptions import ConfigurationError, QuoteError, QuoteFetchError

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_RANGE",
    "DEFAULT_INTERVAL",
    "DEFAULT_CHART_WIDTH",
    "DEFAULT_CHART_HEIGHT",
    "DEFAULT_REFRESH_MS",
    "MIN_REFRESH_MS",
    "QuoteError",
    "QuoteFetchError",
    "ConfigurationError",
]
