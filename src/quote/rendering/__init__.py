"""Terminal rendering: price chart and dashboard"""

from .chart import NO_DATA_PLACEHOLDER, render
from .dashboard import build_dashboard, render_error

__all__ = ["render", "NO_DATA_PLACEHOLDER", "build_dashboard", "render_error"]
