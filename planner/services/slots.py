"""Service for locating the earliest free slot across a list of venues."""

from __future__ import annotations

from datetime import datetime, timedelta

from planner.domain.errors import InvalidRequest
from planner.domain.models import VenueInfo, as_utc
from planner.services.availability import VenueAvailability
from planner.services.capacity import fits


def find_first_available_slot(
    venues: list[VenueInfo],
    required_capacity: int,
    earliest_start: datetime,
    duration_hours: int,
) -> tuple[VenueInfo, datetime] | None:
    """Return the (venue, start) pair with the earliest feasible start.

    Venues are scanned in the given order, which is also the tie-break:
    on equal starts the earlier venue wins. Venues too small for
    *required_capacity* are skipped before any time comparison. Returns
    ``None`` only when no venue is large enough. Nothing is booked.
    """
    if duration_hours <= 0:
        raise InvalidRequest(f"duration_hours must be positive, got {duration_hours}")
    if required_capacity < 1:
        raise InvalidRequest(
            f"required_capacity must be at least 1, got {required_capacity}"
        )

    earliest_start = as_utc(earliest_start)
    duration = timedelta(hours=duration_hours)
    best: tuple[VenueInfo, datetime] | None = None
    for venue in venues:
        if not fits(required_capacity, venue.capacity):
            continue
        start = VenueAvailability(venue).earliest_free_slot(earliest_start, duration)
        if best is None or start < best[1]:
            best = (venue, start)
    return best
