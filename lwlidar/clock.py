"""Wall-clock time and sleeping helpers used by the sample loops."""

import time

__all__ = ["now_microseconds", "now_milliseconds", "sleep_ms"]


def now_microseconds() -> int:
    """Return the current real time in whole microseconds."""
    return time.time_ns() // 1000


def now_milliseconds() -> int:
    """Return the current real time in whole milliseconds."""
    return now_microseconds() // 1000


def sleep_ms(milliseconds: float) -> None:
    """Block for the given number of milliseconds."""
    if milliseconds < 0:
        raise ValueError(f"cannot sleep for a negative time: {milliseconds} ms")
    time.sleep(milliseconds / 1000)