"""Errors raised by the scheduling engine."""

from __future__ import annotations

from planner.domain.models import RejectReason


class SchedulingError(Exception):
    """Base class for every error the scheduling engine raises."""


class InvalidInterval(SchedulingError, ValueError):
    """A time interval whose start is not strictly before its end."""


class InvalidRequest(SchedulingError, ValueError):
    """A slot query with a non-positive duration or capacity."""


class OverlapError(SchedulingError):
    """Attempted to book a window that is already occupied."""


class BookingRejected(SchedulingError):
    """A single booking failed validation against its venue."""

    def __init__(self, reason: RejectReason, venue_id: str) -> None:
        self.reason = reason
        self.venue_id = venue_id
        super().__init__(f"Booking rejected for venue {venue_id}: {reason}")


class RegistrationError(Exception):
    """A participant could not be registered for a booking."""
