"""Greedy batch scheduler assigning event requests to venues."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from planner.domain.errors import InvalidRequest, OverlapError
from planner.domain.models import (
    EventRequest,
    RejectReason,
    ScheduledAssignment,
    ScheduleResult,
    VenueInfo,
    as_utc,
)
from planner.services.availability import VenueAvailability
from planner.services.intervals import make_interval
from planner.services.slots import find_first_available_slot

logger = logging.getLogger(__name__)


def create_schedule(
    requests: list[EventRequest],
    venues: list[VenueInfo],
    default_start: datetime,
) -> ScheduleResult:
    """Place each request at the earliest free slot across *venues*.

    Requests are processed in the given order and never re-sorted. Every
    successful placement is booked into the venue object itself so later
    requests in the same run see it as occupied; pass fresh venue copies
    for repeatable runs. Repeated request ids raise InvalidRequest.
    """
    seen: set[str] = set()
    for request in requests:
        if request.id in seen:
            raise InvalidRequest(f"event request {request.id} appears more than once")
        seen.add(request.id)

    default_start = as_utc(default_start)
    result = ScheduleResult()

    for request in requests:
        floor = request.preferred_start or default_start
        found = find_first_available_slot(
            venues, request.required_capacity, floor, request.duration_hours
        )
        if found is None:
            logger.debug(
                "No venue can host %s (capacity %d)",
                request.id,
                request.required_capacity,
            )
            _mark_unscheduled(result, request, RejectReason.CAPACITY_EXCEEDED)
            continue

        venue, start = found
        interval = make_interval(start, start + timedelta(hours=request.duration_hours))
        try:
            VenueAvailability(venue).book(interval)
        except OverlapError:
            logger.warning(
                "Slot for %s at %s was not free when booking; leaving unscheduled",
                request.id,
                venue.name,
            )
            _mark_unscheduled(result, request, RejectReason.TIME_CONFLICT)
            continue

        result.scheduled.append(
            ScheduledAssignment(
                event_id=request.id,
                venue_id=venue.id,
                venue_name=venue.name,
                start=interval.start,
                end=interval.end,
            )
        )

    logger.info(
        "Schedule run: %d requests, %d scheduled, %d unscheduled",
        len(requests),
        len(result.scheduled),
        len(result.unscheduled),
    )
    return result


def _mark_unscheduled(
    result: ScheduleResult, request: EventRequest, reason: RejectReason
) -> None:
    result.unscheduled.append(request.id)
    result.reasons[request.id] = reason
