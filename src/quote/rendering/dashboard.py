"""Colorized terminal dashboard around a rendered chart."""

from datetime import datetime

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from quote.domain.models import Snapshot


def _change_style(change: float) -> str:
    if change > 0:
        return "green"
    if change < 0:
        return "red"
    return "white"


def _format_price(value: float) -> str:
    return f"{value:,.2f}" if value else "-"


def _format_range(low: float, high: float) -> str:
    if not low and not high:
        return "-"
    return f"{_format_price(low)} - {_format_price(high)}"


def build_header(snapshot: Snapshot) -> Text:
    """Name, symbol and exchange, then the price line"""
    header = Text()
    header.append(snapshot.name or snapshot.symbol, style="bold cyan")
    if snapshot.name and snapshot.symbol:
        header.append(f" ({snapshot.symbol})", style="cyan")
    if snapshot.exchange_name:
        header.append(f"  {snapshot.exchange_name}", style="dim")
    header.append("\n")

    style = _change_style(snapshot.change)
    arrow = "▲" if snapshot.change > 0 else "▼" if snapshot.change < 0 else "•"
    header.append(f"{snapshot.current_price:,.2f}", style=f"bold {style}")
    header.append(
        f"  {arrow} {snapshot.change:+,.2f} ({snapshot.change_percent:+.2f}%)",
        style=style,
    )
    return header


def build_stats_table(snapshot: Snapshot) -> Table:
    """Two-column key statistics grid"""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim")
    table.add_column(justify="right")
    table.add_column(style="dim")
    table.add_column(justify="right")

    table.add_row(
        "Prev Close",
        _format_price(snapshot.previous_close),
        "Volume",
        f"{snapshot.volume:,}" if snapshot.volume else "-",
    )
    table.add_row(
        "Day Range",
        _format_range(snapshot.day_low, snapshot.day_high),
        "52W Range",
        _format_range(snapshot.fifty_two_week_low, snapshot.fifty_two_week_high),
    )
    table.add_row(
        "Currency",
        snapshot.currency or "-",
        "Exchange",
        snapshot.exchange_name or "-",
    )
    return table


def build_footer(
    last_fetch_time: datetime | None,
    fetch_duration_ms: float | None,
    watching: bool = False,
    interval_ms: int | None = None,
) -> Text:
    footer = Text(style="dim")
    if last_fetch_time is not None:
        footer.append(f"Updated {last_fetch_time.strftime('%H:%M:%S')}")
    if fetch_duration_ms is not None:
        footer.append(f"  ({fetch_duration_ms:.0f} ms)")
    if watching:
        every = f" every {interval_ms} ms" if interval_ms else ""
        footer.append(f"  Refreshing{every}, press Ctrl+C to exit")
    return footer


def build_dashboard(
    snapshot: Snapshot,
    chart_text: str,
    last_fetch_time: datetime | None = None,
    fetch_duration_ms: float | None = None,
    watching: bool = False,
    interval_ms: int | None = None,
) -> RenderableType:
    """Compose header, statistics, chart and footer into one panel.

    Args:
        snapshot: Parsed snapshot with ``has_data`` set
        chart_text: Output of the chart renderer
        last_fetch_time: When the snapshot was fetched
        fetch_duration_ms: How long the fetch took
        watching: Whether the refresh hint is shown
        interval_ms: Refresh interval for the hint

    Returns:
        Rich renderable ready for ``Console.print``
    """
    body = Group(
        build_header(snapshot),
        Text(),
        build_stats_table(snapshot),
        Text(),
        Text(chart_text, style=_change_style(snapshot.change)),
        Text(),
        build_footer(last_fetch_time, fetch_duration_ms, watching, interval_ms),
    )
    return Panel(
        body,
        title=f"[bold]{snapshot.symbol or 'quote'}[/bold]",
        border_style="cyan",
        expand=False,
    )


def render_error(message: str) -> RenderableType:
    """Red error panel for fetch failures and empty results"""
    return Panel(
        Text(message, style="red"),
        title="[bold red]Error[/bold red]",
        border_style="red",
        expand=False,
    )
