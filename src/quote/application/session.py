"""One quote fetch cycle and the fetch metadata that outlives it"""

from datetime import datetime

from loguru import logger
from rich.console import Console, RenderableType

from quote.core.config import Config
from quote.domain.models import Snapshot
from quote.infrastructure.yahoo_client import YahooChartClient
from quote.parsing import extract
from quote.rendering import build_dashboard, render, render_error
from quote.shared.exceptions import QuoteFetchError


class QuoteSession:
    """Fetches, parses and displays quotes for a single ticker

    ``last_fetch_time`` and ``fetch_duration_ms`` belong to the session, not
    to any Snapshot, so they survive a failed refresh.
    """

    def __init__(
        self,
        client: YahooChartClient,
        console: Console,
        config: Config | None = None,
    ):
        self.client = client
        self.console = console
        self.config = config or Config()
        self.last_fetch_time: datetime | None = None
        self.fetch_duration_ms: float | None = None

    def refresh(self, symbol: str, exchange: str | None = None) -> Snapshot:
        """Fetch and parse a fresh snapshot

        Raises:
            QuoteFetchError: If the request fails
        """
        result = self.client.fetch(symbol, exchange)
        self.last_fetch_time = result.fetched_at
        self.fetch_duration_ms = result.duration_ms
        return extract(result.body)

    def build_view(
        self,
        symbol: str,
        snapshot: Snapshot,
        watching: bool = False,
        interval_ms: int | None = None,
    ) -> RenderableType:
        if not snapshot.has_data:
            logger.warning(f"No valid data for {symbol.upper()}")
            return render_error(f"No valid data found for {symbol.upper()}")

        chart = render(
            snapshot.prices,
            snapshot.timestamps,
            width=self.config.chart_width,
            height=self.config.chart_height,
        )
        return build_dashboard(
            snapshot,
            chart,
            last_fetch_time=self.last_fetch_time,
            fetch_duration_ms=self.fetch_duration_ms,
            watching=watching,
            interval_ms=interval_ms,
        )

    def show(
        self,
        symbol: str,
        exchange: str | None = None,
        watching: bool = False,
        interval_ms: int | None = None,
    ) -> bool:
        """Run one fetch cycle and print the result

        Returns:
            True if a snapshot with data was displayed
        """
        try:
            snapshot = self.refresh(symbol, exchange)
        except QuoteFetchError as e:
            view = render_error(str(e))
            ok = False
        else:
            view = self.build_view(symbol, snapshot, watching, interval_ms)
            ok = snapshot.has_data

        if watching:
            self.console.clear()
        self.console.print(view)
        return ok
