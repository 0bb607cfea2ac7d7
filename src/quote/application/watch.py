"""Watch mode: repeat a fetch/render cycle until cancelled"""

import signal
import time
from collections.abc import Callable, Iterable

from loguru import logger

from quote.shared.constants import MIN_REFRESH_MS


class CancellationToken:
    """Cooperative stop flag shared between a signal handler and the loop

    The handler only flips a plain attribute; the loop polls it while
    sleeping, so nothing the handler touches is ever locked.
    """

    POLL_SECONDS = 0.05

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def wait(self, seconds: float) -> bool:
        """Sleep up to ``seconds``, waking early on cancel

        Returns:
            True if the token was cancelled
        """
        deadline = time.monotonic() + seconds
        while not self._cancelled:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            time.sleep(min(self.POLL_SECONDS, remaining))
        return self._cancelled


def clamp_interval_ms(interval_ms: int) -> int:
    """Clamp a refresh interval to the minimum supported value"""
    return max(MIN_REFRESH_MS, int(interval_ms))


def run_watch(
    cycle: Callable[[], object], interval_ms: int, token: CancellationToken
) -> int:
    """Run ``cycle`` every ``interval_ms`` until the token is cancelled

    The token is checked at the top of the loop and again before sleeping.
    A cycle that has started always runs to completion.

    Args:
        cycle: One fetch/render/print pass
        interval_ms: Delay between passes, clamped to the minimum
        token: Cancellation token

    Returns:
        Number of completed cycles
    """
    interval = clamp_interval_ms(interval_ms) / 1000
    completed = 0

    while not token.cancelled:
        cycle()
        completed += 1

        if token.cancelled:
            break
        token.wait(interval)

    logger.info(f"Watch loop stopped after {completed} cycle(s)")
    return completed


def install_signal_handlers(
    token: CancellationToken,
    signals: Iterable[signal.Signals] = (signal.SIGINT, signal.SIGTERM),
) -> dict:
    """Route termination signals to ``token.cancel``

    Returns:
        Previous handlers keyed by signal, for ``restore_signal_handlers``
    """

    def _handle(signum, frame):
        token.cancel()

    previous = {}
    for sig in signals:
        previous[sig] = signal.signal(sig, _handle)
    return previous


def restore_signal_handlers(previous: dict) -> None:
    for sig, handler in previous.items():
        signal.signal(sig, handler)
