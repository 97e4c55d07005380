"""Tests for single-booking validation."""

from datetime import datetime, timezone

import pytest

from planner.domain.errors import BookingRejected
from planner.domain.models import RejectReason, VenueInfo
from planner.services.capacity import fits
from planner.services.conflicts import book_event, validate
from planner.services.intervals import make_interval


def _at(hour: int) -> datetime:
    return datetime(2025, 1, 1, hour, 0, tzinfo=timezone.utc)


def _venue(capacity: int = 10) -> VenueInfo:
    return VenueInfo(
        name="Hall",
        capacity=capacity,
        booked_intervals=[make_interval(_at(9), _at(10))],
    )


def test_fits_is_inclusive():
    assert fits(10, 10)
    assert fits(1, 10)
    assert not fits(11, 10)
    assert not fits(1, 0)


def test_free_slot_with_capacity_is_accepted():
    assert validate(_venue(), make_interval(_at(10), _at(11)), 5) is None


def test_overlap_is_time_conflict():
    reason = validate(_venue(), make_interval(_at(9), _at(11)), 5)
    assert reason == RejectReason.TIME_CONFLICT


def test_capacity_checked_before_time():
    """A venue that is both too small and busy reports the capacity problem."""
    reason = validate(_venue(capacity=3), make_interval(_at(9), _at(11)), 5)
    assert reason == RejectReason.CAPACITY_EXCEEDED


def test_validate_does_not_book():
    venue = _venue()
    validate(venue, make_interval(_at(12), _at(13)), 5)
    assert len(venue.booked_intervals) == 1


def test_book_event_books_valid_interval():
    venue = _venue()
    book_event(venue, make_interval(_at(10), _at(12)), 5)
    assert [i.start for i in venue.booked_intervals] == [_at(9), _at(10)]


def test_book_event_rejects_with_reason():
    venue = _venue()
    with pytest.raises(BookingRejected) as excinfo:
        book_event(venue, make_interval(_at(9), _at(10)), 5)
    assert excinfo.value.reason == RejectReason.TIME_CONFLICT
    assert excinfo.value.venue_id == venue.id
    assert len(venue.booked_intervals) == 1


def test_validate_leaves_booked_order_alone():
    venue = _venue()
    venue.booked_intervals.insert(0, make_interval(_at(14), _at(15)))
    before = list(venue.booked_intervals)

    assert validate(venue, make_interval(_at(11), _at(12)), 5) is None
    assert venue.booked_intervals == before
