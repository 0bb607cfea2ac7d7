"""Yahoo Finance chart API client"""

import time
from dataclasses import dataclass
from datetime import datetime

import requests
from loguru import logger

from quote.shared.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_INTERVAL,
    DEFAULT_RANGE,
)
from quote.shared.exceptions import QuoteFetchError


@dataclass
class FetchResult:
    """Raw response body plus fetch metadata"""

    body: str
    status_code: int
    duration_ms: float
    fetched_at: datetime


def build_chart_url(
    symbol: str, exchange: str | None = None, base_url: str = DEFAULT_BASE_URL
) -> str:
    """Build the chart URL for a ticker

    Args:
        symbol: Ticker symbol, e.g. "AAPL"
        exchange: Optional exchange suffix, e.g. "NS" for "RELIANCE.NS"
        base_url: Endpoint the symbol is appended to

    Returns:
        Full chart URL
    """
    ticker = symbol.strip().upper()
    if exchange and exchange.strip():
        ticker = f"{ticker}.{exchange.strip().upper()}"

    if not base_url.endswith("/"):
        base_url += "/"
    return f"{base_url}{ticker}"


class YahooChartClient:
    """Client for the Yahoo Finance v8 chart endpoint"""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        chart_range: str = DEFAULT_RANGE,
        chart_interval: str = DEFAULT_INTERVAL,
        timeout: float = 10.0,
    ):
        self.base_url = base_url
        self.chart_range = chart_range
        self.chart_interval = chart_interval
        self.timeout = timeout

    def fetch(self, symbol: str, exchange: str | None = None) -> FetchResult:
        """Fetch the raw chart response for a ticker

        Args:
            symbol: Ticker symbol
            exchange: Optional exchange suffix

        Returns:
            FetchResult with the body and timing

        Raises:
            QuoteFetchError: On connection failure or a non-2xx status
        """
        url = build_chart_url(symbol, exchange, self.base_url)
        logger.debug(f"Fetching {url}")

        fetched_at = datetime.now()
        started = time.perf_counter()

        try:
            response = requests.get(
                url,
                params=self._build_params(),
                headers=self._build_headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Error querying chart API for {symbol}: {e}")
            raise QuoteFetchError(f"Failed to fetch data: {e}") from e

        duration_ms = (time.perf_counter() - started) * 1000

        if not response.ok:
            logger.error(
                f"Chart API returned HTTP {response.status_code} for {url}"
            )
            raise QuoteFetchError(
                f"Failed to fetch data: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug(
            f"Received {len(response.content)} bytes in {duration_ms:.0f} ms"
        )

        return FetchResult(
            body=response.text,
            status_code=response.status_code,
            duration_ms=duration_ms,
            fetched_at=fetched_at,
        )

    def _build_params(self) -> dict:
        return {"interval": self.chart_interval, "range": self.chart_range}

    def _build_headers(self) -> dict:
        """Browser-like headers; the endpoint rejects bare clients"""
        return {
            "user-agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
            "accept": "application/json, text/plain, */*",
        }
