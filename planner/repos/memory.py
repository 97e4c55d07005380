"""In-memory repositories for venues, event requests, bookings and participants."""

from __future__ import annotations

from datetime import datetime

from planner.domain.models import (
    Booking,
    EventRequest,
    Participant,
    VenueInfo,
    as_utc,
)


class VenueRepository:
    """Dict-backed store for VenueInfo instances, keyed by id.

    Iteration follows insertion order, which the slot finder and the
    scheduler use as their venue tie-break.
    """

    def __init__(self) -> None:
        self._store: dict[str, VenueInfo] = {}

    def add(self, venue: VenueInfo) -> None:
        self._store[venue.id] = venue

    def get(self, venue_id: str) -> VenueInfo | None:
        return self._store.get(venue_id)

    def list_all(self) -> list[VenueInfo]:
        return list(self._store.values())

    def remove(self, venue_id: str) -> bool:
        return self._store.pop(venue_id, None) is not None


class EventRequestRepository:
    """Dict-backed store for EventRequest instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, EventRequest] = {}

    def add(self, request: EventRequest) -> None:
        self._store[request.id] = request

    def get(self, request_id: str) -> EventRequest | None:
        return self._store.get(request_id)

    def list_all(self) -> list[EventRequest]:
        return list(self._store.values())

    def remove(self, request_id: str) -> bool:
        return self._store.pop(request_id, None) is not None


class BookingRepository:
    """Dict-backed store for Booking instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, Booking] = {}

    def add(self, booking: Booking) -> None:
        self._store[booking.id] = booking

    def get(self, booking_id: str) -> Booking | None:
        return self._store.get(booking_id)

    def list_all(self) -> list[Booking]:
        return list(self._store.values())

    def remove(self, booking_id: str) -> bool:
        return self._store.pop(booking_id, None) is not None

    def list_for_venue(self, venue_id: str) -> list[Booking]:
        return [b for b in self._store.values() if b.venue_id == venue_id]

    def delete_for_venue(self, venue_id: str) -> None:
        """Delete every booking held at a venue (cascade on venue removal)."""
        to_remove = [bid for bid, b in self._store.items() if b.venue_id == venue_id]
        for bid in to_remove:
            del self._store[bid]

    def search_by_title(self, query: str) -> list[Booking]:
        needle = query.lower()
        return [b for b in self._store.values() if needle in b.title.lower()]

    def list_upcoming(self, now: datetime) -> list[Booking]:
        now = as_utc(now)
        return sorted(
            [b for b in self._store.values() if b.start > now],
            key=lambda b: b.start,
        )


class ParticipantRepository:
    """Dict-backed store for Participant instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, Participant] = {}

    def add(self, participant: Participant) -> None:
        self._store[participant.id] = participant

    def get(self, participant_id: str) -> Participant | None:
        return self._store.get(participant_id)

    def list_all(self) -> list[Participant]:
        return list(self._store.values())


# ---------------------------------------------------------------------------
# Seed data: a few sample venues useful for trying out the scheduler
# ---------------------------------------------------------------------------


def seed_venues(repo: VenueRepository) -> None:
    repo.add(
        VenueInfo(
            name="Main Hall",
            capacity=200,
            location="Building A",
            facilities=["stage", "projector", "sound system"],
        )
    )
    repo.add(
        VenueInfo(
            name="Seminar Room 1",
            capacity=40,
            location="Building B, floor 2",
            facilities=["projector", "whiteboard"],
        )
    )
    repo.add(
        VenueInfo(
            name="Courtyard",
            capacity=500,
            location="Campus centre",
        )
    )
