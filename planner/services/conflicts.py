"""Service for validating a single booking against one venue."""

from __future__ import annotations

from planner.domain.errors import BookingRejected
from planner.domain.models import RejectReason, TimeInterval, VenueInfo
from planner.services.availability import VenueAvailability
from planner.services.capacity import fits


def validate(
    venue: VenueInfo,
    interval: TimeInterval,
    required_capacity: int,
) -> RejectReason | None:
    """Return why *venue* cannot host *interval*, or None when it can.

    Capacity is checked before time. Nothing is booked.
    """
    if not fits(required_capacity, venue.capacity):
        return RejectReason.CAPACITY_EXCEEDED
    if not VenueAvailability(venue).is_free(interval):
        return RejectReason.TIME_CONFLICT
    return None


def book_event(
    venue: VenueInfo,
    interval: TimeInterval,
    required_capacity: int,
) -> None:
    """Validate then book *interval* into *venue*, raising BookingRejected."""
    reason = validate(venue, interval, required_capacity)
    if reason is not None:
        raise BookingRejected(reason, venue.id)
    VenueAvailability(venue).book(interval)
