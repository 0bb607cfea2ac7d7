"""Configuration management for the quote CLI"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from quote.shared.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_INTERVAL,
    DEFAULT_RANGE,
    DEFAULT_REFRESH_MS,
)
from quote.shared.exceptions import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _positive(name: str, raw: str | None, default, cast):
    """Read a positive number from an environment value

    Raises:
        ConfigurationError: If the value is not a positive number
    """
    if raw is None or raw.strip() == "":
        return default

    try:
        value = cast(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got '{raw}'") from e

    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")

    return value


@dataclass
class Config:
    """Configuration for the quote CLI loaded from environment variables"""

    base_url: str = DEFAULT_BASE_URL
    chart_range: str = DEFAULT_RANGE
    chart_interval: str = DEFAULT_INTERVAL
    timeout_seconds: float = 10.0

    # Watch mode refresh interval (milliseconds)
    refresh_ms: int = DEFAULT_REFRESH_MS

    chart_width: int = DEFAULT_CHART_WIDTH
    chart_height: int = DEFAULT_CHART_HEIGHT

    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables (and ``.env``)

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        load_dotenv(find_dotenv(usecwd=True))

        log_level = (os.getenv("QUOTE_LOG_LEVEL") or cls.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"QUOTE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}"
            )

        base_url = os.getenv("QUOTE_BASE_URL") or cls.base_url
        if not base_url.endswith("/"):
            base_url += "/"

        config = cls(
            base_url=base_url,
            chart_range=os.getenv("QUOTE_RANGE") or cls.chart_range,
            chart_interval=os.getenv("QUOTE_INTERVAL") or cls.chart_interval,
            timeout_seconds=_positive(
                "QUOTE_TIMEOUT_SECONDS",
                os.getenv("QUOTE_TIMEOUT_SECONDS"),
                cls.timeout_seconds,
                float,
            ),
            refresh_ms=_positive(
                "QUOTE_REFRESH_MS", os.getenv("QUOTE_REFRESH_MS"), cls.refresh_ms, int
            ),
            chart_width=_positive(
                "QUOTE_CHART_WIDTH",
                os.getenv("QUOTE_CHART_WIDTH"),
                cls.chart_width,
                int,
            ),
            chart_height=_positive(
                "QUOTE_CHART_HEIGHT",
                os.getenv("QUOTE_CHART_HEIGHT"),
                cls.chart_height,
                int,
            ),
            log_level=log_level,
            log_file=os.getenv("QUOTE_LOG_FILE") or None,
        )

        logger.debug("Configuration loaded:")
        logger.debug(f"  Base URL: {config.base_url}")
        logger.debug(f"  Range/Interval: {config.chart_range}/{config.chart_interval}")
        logger.debug(f"  Timeout: {config.timeout_seconds}s")
        logger.debug(f"  Refresh: {config.refresh_ms} ms")
        logger.debug(f"  Chart: {config.chart_width}x{config.chart_height}")

        return config
