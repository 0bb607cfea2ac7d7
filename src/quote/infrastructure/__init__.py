"""External service clients"""

from .yahoo_client import FetchResult, YahooChartClient, build_chart_url

__all__ = ["FetchResult", "YahooChartClient", "build_chart_url"]
