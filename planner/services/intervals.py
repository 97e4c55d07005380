"""Half-open interval helpers shared by every scheduling component."""

from __future__ import annotations

from datetime import datetime

from planner.domain.errors import InvalidInterval
from planner.domain.models import TimeInterval, as_utc


def make_interval(start: datetime, end: datetime) -> TimeInterval:
    """Build a TimeInterval, raising InvalidInterval when start >= end."""
    start, end = as_utc(start), as_utc(end)
    if start >= end:
        raise InvalidInterval(f"interval start {start} is not before end {end}")
    return TimeInterval(start=start, end=end)


def _check(interval: TimeInterval) -> None:
    # Intervals built via model_construct skip validation.
    if interval.start >= interval.end:
        raise InvalidInterval(
            f"interval start {interval.start} is not before end {interval.end}"
        )


def overlaps(a: TimeInterval, b: TimeInterval) -> bool:
    """Return True when the two intervals share any instant.

    Overlap rule: a.start < b.end AND b.start < a.end.
    Exact boundary touches (a.end == b.start) are NOT considered overlaps.
    """
    _check(a)
    _check(b)
    return a.start < b.end and b.start < a.end
