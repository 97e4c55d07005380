"""Domain models for the venue event planner."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import StrEnum
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


class RejectReason(StrEnum):
    CAPACITY_EXCEEDED = "capacity_exceeded"
    TIME_CONFLICT = "time_conflict"


def _new_id() -> str:
    return str(uuid.uuid4())


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so every instant is comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Instant = Annotated[datetime, AfterValidator(as_utc)]


# ---------------------------------------------------------------------------
# Scheduling engine models
# ---------------------------------------------------------------------------


class TimeInterval(BaseModel):
    """Half-open time range ``[start, end)``."""

    model_config = ConfigDict(frozen=True)

    start: Instant
    end: Instant

    @model_validator(mode="after")
    def _end_after_start(self) -> TimeInterval:
        if self.end <= self.start:
            raise ValueError("end must be after start")
        return self

    def sort_key(self) -> tuple[datetime, datetime]:
        return (self.start, self.end)


class EventRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    title: str
    duration_hours: int = Field(gt=0)
    preferred_start: Instant | None = None
    required_capacity: int = Field(ge=1)


class VenueInfo(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str
    capacity: int = Field(ge=0)
    location: str = ""
    facilities: list[str] = Field(default_factory=list)
    booked_intervals: list[TimeInterval] = Field(default_factory=list)

    @field_validator("booked_intervals")
    @classmethod
    def _sorted(cls, value: list[TimeInterval]) -> list[TimeInterval]:
        return sorted(value, key=TimeInterval.sort_key)


class ScheduledAssignment(BaseModel):
    model_config = ConfigDict(frozen=True)

    event_id: str
    venue_id: str
    venue_name: str
    start: Instant
    end: Instant


class ScheduleResult(BaseModel):
    scheduled: list[ScheduledAssignment] = Field(default_factory=list)
    unscheduled: list[str] = Field(default_factory=list)
    reasons: dict[str, RejectReason] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Record-layer models
# ---------------------------------------------------------------------------


class Booking(BaseModel):
    """An event committed to a venue for a fixed time range."""

    id: str = Field(default_factory=_new_id)
    title: str
    venue_id: str
    start: Instant
    end: Instant
    max_participants: int = Field(ge=1)
    request_id: str | None = None
    participant_ids: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _end_after_start(self) -> Booking:
        if self.end <= self.start:
            raise ValueError("end must be after start")
        return self

    @property
    def interval(self) -> TimeInterval:
        return TimeInterval(start=self.start, end=self.end)


class Participant(BaseModel):
    id: str = Field(default_factory=_new_id)
    first_name: str
    last_name: str
    email: str = Field(pattern=r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
    phone_number: str = ""
    organization: str = ""
    dietary_restrictions: list[str] = Field(default_factory=list)
    accessibility_needs: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


# ---------------------------------------------------------------------------
# Request / Response DTOs
# ---------------------------------------------------------------------------


class BookingRequest(BaseModel):
    title: str
    venue_id: str
    start: Instant
    end: Instant
    required_capacity: int = Field(ge=1)
    max_participants: int | None = Field(default=None, ge=1)


class SlotQuery(BaseModel):
    required_capacity: int = Field(ge=1)
    duration_hours: int = Field(gt=0)
    earliest_start: Instant
    venue_ids: list[str] | None = None


class SlotResponse(BaseModel):
    venue_id: str
    venue_name: str
    start: Instant
    end: Instant


class ScheduleRequest(BaseModel):
    default_start: Instant | None = None
    request_ids: list[str] | None = None
    commit: bool = False
