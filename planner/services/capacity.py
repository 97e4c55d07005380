"""Time-independent venue capacity rule."""

from __future__ import annotations


def fits(required_capacity: int, venue_capacity: int) -> bool:
    return required_capacity <= venue_capacity
