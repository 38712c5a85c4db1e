"""Wall-clock access in whole seconds since the Unix epoch."""

import math
import numbers
import time
from datetime import datetime, timezone

from core.errors import ClockUnavailable

U64_MAX = (1 << 64) - 1


def system_clock():
    """Current time in seconds since Unix epoch."""
    try:
        seconds = time.time()
    except (OSError, OverflowError, ValueError) as exc:
        raise ClockUnavailable("System clock could not be read", clock="system", cause=exc) from exc
    if seconds < 0:
        raise ClockUnavailable("System clock is set before the Unix epoch", clock="system")
    return int(seconds)


def now_seconds(clock=None):
    """Read ``clock`` (default: system clock) and return a validated whole-second value.

    Any callable returning real-number seconds since the epoch works as a
    clock. Fractional readings are floored; negative, non-finite, non-numeric
    and beyond-u64 readings are rejected.
    """
    clock = clock or system_clock
    name = getattr(clock, "__name__", type(clock).__name__)

    try:
        reading = clock()
    except ClockUnavailable:
        raise
    except Exception as exc:
        raise ClockUnavailable(f"Clock {name} failed", clock=name, cause=exc) from exc
    if isinstance(reading, bool) or not isinstance(reading, numbers.Real):
        raise ClockUnavailable(f"Clock returned {type(reading).__name__}, expected seconds", clock=name)
    if not isinstance(reading, numbers.Integral) and not math.isfinite(reading):
        raise ClockUnavailable(f"Clock returned non-finite reading {reading}", clock=name)
    if reading < 0:
        raise ClockUnavailable(f"Clock returned pre-epoch reading {reading}", clock=name)

    seconds = int(reading) if isinstance(reading, numbers.Integral) else math.floor(reading)
    if seconds > U64_MAX:
        raise ClockUnavailable(f"Clock reading {seconds} exceeds the unsigned 64-bit range", clock=name)
    return seconds


def format_timestamp(seconds=None):
    """Format seconds since epoch as ISO 8601 UTC with microseconds."""
    if seconds is None:
        seconds = time.time()

    dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
