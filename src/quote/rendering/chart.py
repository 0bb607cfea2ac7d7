"""Fixed-size terminal bar chart for an intraday price series."""

import time
from collections.abc import Sequence
from datetime import datetime

NO_DATA_PLACEHOLDER = "No chart data available"

FILL = "█"
BLANK = " "
LABEL_WIDTH = 10
SEPARATOR = " │"
CORNER = " └"
RULE = "─"

MAX_TIME_LABELS = 5
TIME_FORMAT = "%H:%M"
UNKNOWN_TIME = "--:--"


def render(
    prices: Sequence[float],
    timestamps: Sequence[int] = (),
    width: int = 60,
    height: int = 10,
    now: float | None = None,
) -> str:
    """Render the trailing ``width`` prices as a column bar chart.

    Each column is filled from the baseline up to the highest row whose
    midpoint threshold the value clears. Rows carry their upper bound as a
    label; below the axis rule sit up to five ``HH:MM`` labels and a line
    describing the point count and sampling interval.

    Args:
        prices: Chronological close prices
        timestamps: Unix seconds trailing-aligned with ``prices``; may be empty
        width: Maximum number of columns (most recent points win)
        height: Number of rows
        now: Reference time for synthesized labels, defaults to the clock

    Returns:
        Multi-line chart text, or a placeholder when there are no prices
    """
    values = list(prices)
    if not values:
        return NO_DATA_PLACEHOLDER

    width = max(1, width)
    height = max(1, height)

    window = values[-width:]
    count = len(window)

    low = min(window)
    high = max(window)
    spread = high - low
    flat = spread == 0
    if flat:
        spread = 1

    lines = []
    for row in range(height - 1, -1, -1):
        threshold = low + spread * (row + 0.5) / height
        upper = low + spread * (row + 1) / height
        bars = "".join(
            FILL if value >= threshold or (flat and row == 0) else BLANK
            for value in window
        )
        lines.append(f"{int(upper):>{LABEL_WIDTH}}{SEPARATOR}{bars}")

    lines.append(" " * LABEL_WIDTH + CORNER + RULE * count)

    window_stamps = _window_timestamps(values, list(timestamps), count)
    step, observed = _sampling_interval(window_stamps, count)

    lines.append(_time_axis(window_stamps, count, step, now))
    lines.append(_describe(count, step, observed))

    return "\n".join(lines)


def _window_timestamps(
    values: list[float], timestamps: list[int], count: int
) -> list[int | None]:
    """Map each window column to its aligned timestamp, if it has one."""
    if len(timestamps) > len(values):
        timestamps = timestamps[len(timestamps) - len(values) :]
    offset = len(values) - len(timestamps)
    start = len(values) - count

    stamps: list[int | None] = []
    for column in range(count):
        index = start + column - offset
        stamps.append(timestamps[index] if index >= 0 else None)
    return stamps


def estimate_interval_minutes(count: int) -> int:
    """Guess the per-point spacing from how many points there are."""
    if count <= 78:
        return 1
    if count <= 200:
        return 2
    return 5


def _sampling_interval(
    stamps: list[int | None], count: int
) -> tuple[int, bool]:
    """Return (seconds per point, whether it was observed)."""
    known = [stamp for stamp in stamps if stamp is not None]
    if len(known) >= 2 and known[1] > known[0]:
        return known[1] - known[0], True
    return estimate_interval_minutes(count) * 60, False


def label_indices(count: int) -> list[int]:
    """Evenly spaced column indices for the time axis."""
    if count <= 1:
        return [0]

    slots = min(MAX_TIME_LABELS, count)
    indices: list[int] = []
    for slot in range(slots):
        index = round(slot * (count - 1) / (slots - 1))
        if index not in indices:
            indices.append(index)
    return indices


def _time_axis(
    stamps: list[int | None], count: int, step: int, now: float | None
) -> str:
    anchor_index, anchor_stamp = _anchor(stamps, count, now)

    axis = ""
    for index in label_indices(count):
        stamp = stamps[index]
        if stamp is None:
            stamp = anchor_stamp + (index - anchor_index) * step

        column = LABEL_WIDTH + len(SEPARATOR) + index
        if axis:
            column = max(column, len(axis) + 1)
        axis = axis.ljust(column) + _format_time(stamp)

    return axis


def _anchor(
    stamps: list[int | None], count: int, now: float | None
) -> tuple[int, float]:
    """Pick the reference point synthesized labels are walked from."""
    for index, stamp in enumerate(stamps):
        if stamp is not None:
            return index, stamp
    return count - 1, time.time() if now is None else now


def _format_time(stamp: float) -> str:
    try:
        return datetime.fromtimestamp(stamp).strftime(TIME_FORMAT)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_TIME


def format_interval(seconds: int) -> str:
    """Format a sampling interval as ``5m``, ``1h`` or ``30s``."""
    if seconds % 3600 == 0:
        return f"{seconds // 3600}h"
    if seconds % 60 == 0:
        return f"{seconds // 60}m"
    return f"{seconds}s"


def _describe(count: int, step: int, observed: bool) -> str:
    noun = "point" if count == 1 else "points"
    line = f"{count} {noun}, {format_interval(step)} interval"
    if not observed:
        line += " (estimated)"
    return line
