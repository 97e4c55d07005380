"""Service for registering participants on committed bookings.

Registration capacity (``Booking.max_participants``) is unrelated to the
venue capacity the scheduler checks.
"""

from __future__ import annotations

from planner.domain.errors import RegistrationError
from planner.domain.models import Booking, Participant


def available_spots(booking: Booking) -> int:
    return booking.max_participants - len(booking.participant_ids)


def register_participant(booking: Booking, participant: Participant) -> None:
    """Add *participant* to *booking*, raising RegistrationError when refused."""
    if available_spots(booking) <= 0:
        raise RegistrationError("Booking is at full capacity")
    if participant.id in booking.participant_ids:
        raise RegistrationError("Participant already registered")
    booking.participant_ids.append(participant.id)


def unregister_participant(booking: Booking, participant_id: str) -> bool:
    if participant_id not in booking.participant_ids:
        return False
    booking.participant_ids.remove(participant_id)
    return True
