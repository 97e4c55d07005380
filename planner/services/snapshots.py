"""Build per-run venue copies from the record layer."""

from __future__ import annotations

from planner.domain.models import TimeInterval, VenueInfo
from planner.repos.memory import BookingRepository


def snapshot_venues(
    venues: list[VenueInfo], booking_repo: BookingRepository
) -> list[VenueInfo]:
    """Return deep copies of *venues* with committed bookings folded in.

    Each copy's booked intervals are the venue's own blocked intervals plus
    every booking currently held there. Engine runs mutate only the copies.
    """
    snapshots: list[VenueInfo] = []
    for venue in venues:
        snapshot = venue.model_copy(deep=True)
        snapshot.booked_intervals.extend(
            b.interval for b in booking_repo.list_for_venue(venue.id)
        )
        snapshot.booked_intervals.sort(key=TimeInterval.sort_key)
        snapshots.append(snapshot)
    return snapshots
