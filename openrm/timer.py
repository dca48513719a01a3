"""Wall-clock time points, duration conversions and timestamp strings.

A time point is an integer count of nanoseconds since the Unix epoch.
"""

from __future__ import annotations

from datetime import datetime
from time import time_ns

_NS_PER_S = 1_000_000_000
_NS_PER_MS = 1_000_000
_NS_PER_US = 1_000


def _truncating_div(value: int, divisor: int) -> int:
    """Integer division that rounds toward zero, like a duration cast."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def get_time() -> int:
    """Return the current time point in nanoseconds since the epoch."""
    return time_ns()


def get_double_of_s(start: int, end: int) -> float:
    """Return the duration from ``start`` to ``end`` in seconds."""
    return (end - start) / _NS_PER_S


def get_num_of_ms(start: int, end: int) -> int:
    """Return the whole milliseconds from ``start`` to ``end``, truncated toward zero."""
    return _truncating_div(end - start, _NS_PER_MS)


def get_num_of_us(start: int, end: int) -> int:
    """Return the whole microseconds from ``start`` to ``end``, truncated toward zero."""
    return _truncating_div(end - start, _NS_PER_US)


def trans_time_to_ull(time: int) -> int:
    """Return a time point as its nanosecond count since the epoch."""
    value = int(time)
    if value < 0:
        raise ValueError("time point precedes the epoch")
    return value


def trans_ull_to_time(value: int) -> int:
    """Return the time point for a nanosecond count since the epoch."""
    count = int(value)
    if count < 0:
        raise ValueError("nanosecond count must not be negative")
    return count


def get_time_str() -> str:
    """Return the local time as day, hour, minute and second digits (DDHHMMSS)."""
    return datetime.now().strftime("%d%H%M%S")


def get_ms_str() -> str:
    """Return the local time as DDHHMMSS followed by three millisecond digits."""
    now = datetime.now()
    return f"{now.strftime('%d%H%M%S')}{now.microsecond // 1000:03d}"