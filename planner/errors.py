"""Mapping of scheduling-engine errors onto HTTP responses.

Register in main.py:
    from planner.errors import register_exception_handlers
    register_exception_handlers(app)
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from planner.domain.errors import (
    BookingRejected,
    InvalidInterval,
    InvalidRequest,
    RegistrationError,
)

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    detail: str | None = None


def _respond(status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, detail=detail).model_dump(exclude_none=True),
    )


async def invalid_input_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Invalid input: %s (path=%s)", exc, request.url.path)
    return _respond(422, "invalid_input", str(exc))


async def booking_rejected_handler(
    request: Request, exc: BookingRejected
) -> JSONResponse:
    logger.warning(
        "Booking rejected: %s (venue=%s, path=%s)",
        exc.reason,
        exc.venue_id,
        request.url.path,
    )
    return _respond(409, exc.reason.value, str(exc))


async def registration_error_handler(
    request: Request, exc: RegistrationError
) -> JSONResponse:
    logger.warning("Registration refused: %s (path=%s)", exc, request.url.path)
    return _respond(409, "registration_refused", str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(InvalidInterval, invalid_input_handler)
    app.add_exception_handler(InvalidRequest, invalid_input_handler)
    app.add_exception_handler(BookingRejected, booking_rejected_handler)
    app.add_exception_handler(RegistrationError, registration_error_handler)
