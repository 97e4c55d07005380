"""Per-venue availability tracking over booked intervals."""

from __future__ import annotations

import bisect
from datetime import datetime, timedelta

from planner.domain.errors import OverlapError
from planner.domain.models import TimeInterval, VenueInfo
from planner.services.intervals import overlaps


class VenueAvailability:
    """View over a venue's booked intervals.

    Bookings are written straight into ``venue.booked_intervals``, so the
    venue object passed in is the one that accumulates state.
    """

    def __init__(self, venue: VenueInfo) -> None:
        self.venue = venue

    @property
    def booked(self) -> list[TimeInterval]:
        return self.venue.booked_intervals

    def is_free(self, candidate: TimeInterval) -> bool:
        return not any(overlaps(candidate, booked) for booked in self.booked)

    def earliest_free_slot(self, not_before: datetime, duration: timedelta) -> datetime:
        """Return the first start >= *not_before* with *duration* free after it.

        Gaps are walked in chronological order. Past the last booking the
        venue is always free, so a start is always found.
        """
        candidate = not_before
        for booked in sorted(self.booked, key=TimeInterval.sort_key):
            if booked.end <= candidate:
                continue
            if candidate + duration <= booked.start:
                return candidate
            candidate = max(candidate, booked.end)
        return candidate

    def book(self, interval: TimeInterval) -> None:
        if not self.is_free(interval):
            raise OverlapError(
                f"{self.venue.name} is already booked between "
                f"{interval.start.isoformat()} and {interval.end.isoformat()}"
            )
        bisect.insort(self.booked, interval, key=TimeInterval.sort_key)
