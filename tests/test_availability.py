"""Tests for per-venue availability tracking."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from planner.domain.errors import OverlapError
from planner.domain.models import VenueInfo
from planner.services.availability import VenueAvailability
from planner.services.intervals import make_interval

_DAY = datetime(2026, 6, 1, tzinfo=timezone.utc)


def _at(hour: int) -> datetime:
    return _DAY + timedelta(hours=hour)


def _venue(*booked: tuple[int, int]) -> VenueInfo:
    return VenueInfo(
        name="Hall",
        capacity=10,
        booked_intervals=[make_interval(_at(s), _at(e)) for s, e in booked],
    )


# ---------------------------------------------------------------------------
# is_free
# ---------------------------------------------------------------------------


def test_empty_venue_is_free():
    assert VenueAvailability(_venue()).is_free(make_interval(_at(9), _at(17)))


def test_overlapping_candidate_is_not_free():
    availability = VenueAvailability(_venue((10, 12)))
    assert not availability.is_free(make_interval(_at(11), _at(13)))


def test_back_to_back_candidate_is_free():
    availability = VenueAvailability(_venue((10, 12)))
    assert availability.is_free(make_interval(_at(12), _at(14)))
    assert availability.is_free(make_interval(_at(8), _at(10)))


# ---------------------------------------------------------------------------
# earliest_free_slot
# ---------------------------------------------------------------------------


def test_no_bookings_returns_not_before():
    availability = VenueAvailability(_venue())
    assert availability.earliest_free_slot(_at(9), timedelta(hours=3)) == _at(9)


def test_gap_before_first_booking_is_used():
    availability = VenueAvailability(_venue((12, 14)))
    assert availability.earliest_free_slot(_at(9), timedelta(hours=3)) == _at(9)


def test_too_small_gap_is_skipped():
    availability = VenueAvailability(_venue((10, 12), (13, 15)))
    # 9-10 and 12-13 are one hour each; the first two-hour window opens at 15.
    assert availability.earliest_free_slot(_at(9), timedelta(hours=2)) == _at(15)


def test_exact_fit_gap_is_used():
    availability = VenueAvailability(_venue((10, 12), (14, 16)))
    assert availability.earliest_free_slot(_at(10), timedelta(hours=2)) == _at(12)


def test_not_before_inside_booking_moves_to_its_end():
    availability = VenueAvailability(_venue((10, 12)))
    assert availability.earliest_free_slot(_at(11), timedelta(hours=1)) == _at(12)


def test_bookings_before_not_before_are_ignored():
    availability = VenueAvailability(_venue((1, 3), (4, 6)))
    assert availability.earliest_free_slot(_at(9), timedelta(hours=1)) == _at(9)


def test_nested_bookings_do_not_shorten_the_walk():
    """A short booking inside a long one must not open a false gap."""
    availability = VenueAvailability(_venue((10, 18), (11, 12)))
    assert availability.earliest_free_slot(_at(10), timedelta(hours=2)) == _at(18)


def test_unsorted_bookings_are_walked_in_order_without_reordering():
    venue = VenueInfo(name="Hall", capacity=5)
    venue.booked_intervals.extend(
        [make_interval(_at(14), _at(16)), make_interval(_at(9), _at(11))]
    )
    availability = VenueAvailability(venue)
    assert availability.earliest_free_slot(_at(9), timedelta(hours=3)) == _at(11)
    assert [i.start for i in venue.booked_intervals] == [_at(14), _at(9)]


def test_fully_booked_day_continues_past_last_booking():
    availability = VenueAvailability(_venue((0, 24)))
    assert availability.earliest_free_slot(_at(9), timedelta(hours=5)) == _at(24)


# ---------------------------------------------------------------------------
# book
# ---------------------------------------------------------------------------


def test_book_inserts_in_order():
    venue = _venue((8, 9), (14, 15))
    VenueAvailability(venue).book(make_interval(_at(10), _at(12)))
    assert [i.start for i in venue.booked_intervals] == [_at(8), _at(10), _at(14)]


def test_book_overlap_raises_and_leaves_venue_untouched():
    venue = _venue((10, 12))
    with pytest.raises(OverlapError):
        VenueAvailability(venue).book(make_interval(_at(11), _at(13)))
    assert len(venue.booked_intervals) == 1


def test_booked_slot_is_never_returned_again():
    venue = _venue()
    availability = VenueAvailability(venue)
    first = availability.earliest_free_slot(_at(9), timedelta(hours=2))
    availability.book(make_interval(first, first + timedelta(hours=2)))

    again = availability.earliest_free_slot(_at(9), timedelta(hours=1))
    assert not (first <= again < first + timedelta(hours=2))
    assert again == _at(11)


def test_naive_booked_intervals_are_read_as_utc():
    venue = VenueInfo(
        name="Hall",
        capacity=5,
        booked_intervals=[
            {"start": "2026-06-01T10:00:00", "end": "2026-06-01T12:00:00"}
        ],
    )
    assert venue.booked_intervals[0].start == _at(10)

    availability = VenueAvailability(venue)
    assert availability.earliest_free_slot(_at(11), timedelta(hours=1)) == _at(12)
    assert not availability.is_free(make_interval(_at(11), _at(13)))
