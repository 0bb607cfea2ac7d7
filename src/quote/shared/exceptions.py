"""Consolidated exceptions for the quote CLI.

The parsing and rendering core never raises; these cover the fetch,
configuration and command-line layers around it.
"""


class QuoteError(Exception):
    """Base exception for quote errors"""

    pass


class QuoteFetchError(QuoteError):
    """Raised when the chart endpoint cannot be reached or answers non-2xx"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(QuoteError):
    """Raised when configuration is invalid or missing"""

    pass
