"""Shared constants for fetching and rendering quotes."""

DEFAULT_BASE_URL = "https://query1.finance.yahoo.com/v8/finance/chart/"
DEFAULT_RANGE = "1d"
DEFAULT_INTERVAL = "1m"

DEFAULT_CHART_WIDTH = 60
DEFAULT_CHART_HEIGHT = 10

DEFAULT_REFRESH_MS = 5000
MIN_REFRESH_MS = 100
