"""FastAPI application: entry point for the venue event planner."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from fastapi import FastAPI, HTTPException

from planner.config import get_settings
from planner.domain.models import (
    Booking,
    BookingRequest,
    EventRequest,
    Participant,
    ScheduleRequest,
    ScheduleResult,
    SlotQuery,
    SlotResponse,
    VenueInfo,
)
from planner.errors import register_exception_handlers
from planner.logging_config import configure_logging
from planner.repos.memory import (
    BookingRepository,
    EventRequestRepository,
    ParticipantRepository,
    VenueRepository,
    seed_venues,
)
from planner.services.conflicts import book_event
from planner.services.intervals import make_interval
from planner.services.registration import register_participant, unregister_participant
from planner.services.scheduler import create_schedule
from planner.services.slots import find_first_available_slot
from planner.services.snapshots import snapshot_venues

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_title)
register_exception_handlers(app)

# ── Singletons (created at import time for simplicity) ────────────────
venue_repo = VenueRepository()
request_repo = EventRequestRepository()
booking_repo = BookingRepository()
participant_repo = ParticipantRepository()

if settings.seed_demo_data:
    seed_venues(venue_repo)


def _get_venue(venue_id: str) -> VenueInfo:
    venue = venue_repo.get(venue_id)
    if venue is None:
        raise HTTPException(status_code=404, detail="Venue not found")
    return venue


def _get_booking(booking_id: str) -> Booking:
    booking = booking_repo.get(booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


def _default_start() -> datetime:
    now = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0)
    return now + timedelta(hours=get_settings().schedule_lead_hours)


# ── Venues ────────────────────────────────────────────────────────────


@app.post("/venues", response_model=VenueInfo, status_code=201)
def create_venue(venue: VenueInfo) -> VenueInfo:
    if venue_repo.get(venue.id) is not None:
        raise HTTPException(status_code=409, detail="Venue already exists")
    venue_repo.add(venue)
    return venue


@app.get("/venues", response_model=list[VenueInfo])
def list_venues() -> list[VenueInfo]:
    return venue_repo.list_all()


@app.get("/venues/{venue_id}", response_model=VenueInfo)
def get_venue(venue_id: str) -> VenueInfo:
    return _get_venue(venue_id)


@app.delete("/venues/{venue_id}", status_code=200)
def delete_venue(venue_id: str) -> dict:
    """Remove a venue together with every booking held there."""
    _get_venue(venue_id)
    booking_repo.delete_for_venue(venue_id)
    venue_repo.remove(venue_id)
    return {"status": "deleted"}


# ── Event requests ────────────────────────────────────────────────────


@app.post("/event-requests", response_model=EventRequest, status_code=201)
def create_event_request(request: EventRequest) -> EventRequest:
    if request_repo.get(request.id) is not None:
        raise HTTPException(status_code=409, detail="Event request already exists")
    request_repo.add(request)
    return request


@app.get("/event-requests", response_model=list[EventRequest])
def list_event_requests() -> list[EventRequest]:
    return request_repo.list_all()


@app.delete("/event-requests/{request_id}", status_code=200)
def delete_event_request(request_id: str) -> dict:
    if not request_repo.remove(request_id):
        raise HTTPException(status_code=404, detail="Event request not found")
    return {"status": "deleted"}


# ── Bookings ──────────────────────────────────────────────────────────


@app.post("/bookings", response_model=Booking, status_code=201)
def create_booking(body: BookingRequest) -> Booking:
    """Book a single event into a venue after capacity and time checks."""
    venue = _get_venue(body.venue_id)
    interval = make_interval(body.start, body.end)

    (snapshot,) = snapshot_venues([venue], booking_repo)
    book_event(snapshot, interval, body.required_capacity)

    booking = Booking(
        title=body.title,
        venue_id=venue.id,
        start=interval.start,
        end=interval.end,
        max_participants=body.max_participants or body.required_capacity,
    )
    booking_repo.add(booking)
    return booking


@app.get("/bookings", response_model=list[Booking])
def list_bookings(q: str | None = None, upcoming: bool = False) -> list[Booking]:
    """Return bookings, optionally filtered by title or limited to future ones."""
    if upcoming:
        bookings = booking_repo.list_upcoming(datetime.now(timezone.utc))
    else:
        bookings = booking_repo.list_all()
    if q:
        matching = {b.id for b in booking_repo.search_by_title(q)}
        bookings = [b for b in bookings if b.id in matching]
    return bookings


@app.get("/bookings/{booking_id}", response_model=Booking)
def get_booking(booking_id: str) -> Booking:
    return _get_booking(booking_id)


@app.delete("/bookings/{booking_id}", status_code=200)
def delete_booking(booking_id: str) -> dict:
    if not booking_repo.remove(booking_id):
        raise HTTPException(status_code=404, detail="Booking not found")
    return {"status": "deleted"}


# ── Participants ──────────────────────────────────────────────────────


@app.post("/participants", response_model=Participant, status_code=201)
def create_participant(participant: Participant) -> Participant:
    participant_repo.add(participant)
    return participant


@app.get("/participants", response_model=list[Participant])
def list_participants() -> list[Participant]:
    return participant_repo.list_all()


@app.post(
    "/bookings/{booking_id}/participants/{participant_id}", response_model=Booking
)
def register_for_booking(booking_id: str, participant_id: str) -> Booking:
    booking = _get_booking(booking_id)
    participant = participant_repo.get(participant_id)
    if participant is None:
        raise HTTPException(status_code=404, detail="Participant not found")
    register_participant(booking, participant)
    return booking


@app.delete(
    "/bookings/{booking_id}/participants/{participant_id}", response_model=Booking
)
def unregister_from_booking(booking_id: str, participant_id: str) -> Booking:
    booking = _get_booking(booking_id)
    if not unregister_participant(booking, participant_id):
        raise HTTPException(status_code=404, detail="Participant not registered")
    return booking


# ── Scheduling ────────────────────────────────────────────────────────


@app.post("/slots/find", response_model=SlotResponse)
def find_slot(query: SlotQuery) -> SlotResponse:
    """Return the earliest free (venue, start) pair; venue order is the tie-break."""
    if query.venue_ids is None:
        venues = venue_repo.list_all()
    else:
        venues = [_get_venue(vid) for vid in query.venue_ids]

    found = find_first_available_slot(
        snapshot_venues(venues, booking_repo),
        query.required_capacity,
        query.earliest_start,
        query.duration_hours,
    )
    if found is None:
        raise HTTPException(
            status_code=404, detail="No venue can host the requested capacity"
        )
    venue, start = found
    return SlotResponse(
        venue_id=venue.id,
        venue_name=venue.name,
        start=start,
        end=start + timedelta(hours=query.duration_hours),
    )


@app.post("/schedule", response_model=ScheduleResult)
def schedule(body: ScheduleRequest) -> ScheduleResult:
    """Run the batch scheduler over pending event requests.

    With ``commit`` set, every assignment becomes a Booking and its request
    is removed from the pending list.
    """
    if body.request_ids is None:
        requests = request_repo.list_all()
    else:
        requests = []
        for rid in body.request_ids:
            request = request_repo.get(rid)
            if request is None:
                raise HTTPException(
                    status_code=404, detail=f"Event request not found: {rid}"
                )
            requests.append(request)

    venues = snapshot_venues(venue_repo.list_all(), booking_repo)
    result = create_schedule(requests, venues, body.default_start or _default_start())

    if body.commit:
        for assignment in result.scheduled:
            request = request_repo.get(assignment.event_id)
            if request is None:
                continue
            booking_repo.add(
                Booking(
                    title=request.title,
                    venue_id=assignment.venue_id,
                    start=assignment.start,
                    end=assignment.end,
                    max_participants=request.required_capacity,
                    request_id=request.id,
                )
            )
            request_repo.remove(request.id)

    return result
