"""Application layer: quote session and watch loop"""

from .session import QuoteSession
from .watch import (
    CancellationToken,
    clamp_interval_ms,
    install_signal_handlers,
    restore_signal_handlers,
    run_watch,
)

__all__ = [
    "QuoteSession",
    "CancellationToken",
    "clamp_interval_ms",
    "install_signal_handlers",
    "restore_signal_handlers",
    "run_watch",
]
