import argparse
import sys

from loguru import logger
from rich.console import Console

from quote.application.session import QuoteSession
from quote.application.watch import (
    CancellationToken,
    clamp_interval_ms,
    install_signal_handlers,
    restore_signal_handlers,
    run_watch,
)
from quote.core.config import Config
from quote.infrastructure.yahoo_client import YahooChartClient
from quote.shared.exceptions import ConfigurationError

USAGE = """Usage: quote SYMBOL [EXCHANGE] [options]

Fast, real-time stock quotes in your terminal.

Options:
  -e, --exchange CODE   Exchange suffix (e.g. NS, L, TO)
  -w, --watch           Refresh continuously until Ctrl+C
  -i, --interval MS     Refresh interval in milliseconds (minimum 100)
  -h, --help            Show this help and exit

Examples:
  quote AAPL
  quote RELIANCE NS
  quote TSLA --watch --interval 2000
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quote", add_help=False)
    parser.add_argument("symbol", nargs="?")
    parser.add_argument("exchange", nargs="?")
    parser.add_argument("-e", "--exchange", dest="exchange_option")
    parser.add_argument("-w", "--watch", action="store_true")
    parser.add_argument("-i", "--interval", type=int)
    parser.add_argument("-h", "--help", action="store_true")
    return parser


def configure_logging(config: Config) -> None:
    """Send logs to stderr so they never mix with the dashboard"""
    logger.remove()
    logger.add(sys.stderr, level=config.log_level)
    if config.log_file:
        logger.add(
            config.log_file,
            rotation="1 day",
            retention="30 days",
            compression="gz",
            level="DEBUG",
        )


def _print_usage(console: Console) -> None:
    console.print(USAGE, markup=False, highlight=False)


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """CLI entry point

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:]
        console: Output console, mainly for tests

    Returns:
        Exit code (0 for success or help, 1 for any failure)
    """
    console = console or Console()

    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        return 0 if not e.code else 1

    if args.help:
        _print_usage(console)
        return 0

    if not args.symbol:
        _print_usage(console)
        return 1

    try:
        config = Config.from_env()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    configure_logging(config)

    exchange = args.exchange_option or args.exchange
    client = YahooChartClient(
        base_url=config.base_url,
        chart_range=config.chart_range,
        chart_interval=config.chart_interval,
        timeout=config.timeout_seconds,
    )
    session = QuoteSession(client, console, config)

    try:
        if not args.watch:
            return 0 if session.show(args.symbol, exchange) else 1

        interval_ms = clamp_interval_ms(
            args.interval if args.interval is not None else config.refresh_ms
        )
        token = CancellationToken()
        previous = install_signal_handlers(token)
        try:
            run_watch(
                lambda: session.show(
                    args.symbol, exchange, watching=True, interval_ms=interval_ms
                ),
                interval_ms,
                token,
            )
        finally:
            restore_signal_handlers(previous)
        return 0
    except KeyboardInterrupt:
        logger.warning("Stopped manually.")
        return 1
    except Exception as e:
        logger.opt(exception=True).critical(f"Unhandled exception: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
