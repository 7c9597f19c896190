"""Time helpers shared by the cache engine."""

import time
from datetime import timedelta


def now_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def to_millis(value: int | float | timedelta) -> int:
    """Normalize a duration to integer milliseconds.

    Args:
        value: Milliseconds as a number, or a timedelta.

    Returns:
        The duration in whole milliseconds.

    Raises:
        TypeError: If the value is not a number or timedelta.
    """
    if isinstance(value, timedelta):
        return int(value.total_seconds() * 1000)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Duration must be milliseconds or timedelta, got {type(value).__name__}")
    return int(value)
