"""Pydantic schemas for API request/response."""

from train_booking.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingResult,
    ResetResponse,
)
from train_booking.schemas.common import ErrorResponse, SuccessResponse
from train_booking.schemas.seat import SeatResponse, SeatSummaryResponse

__all__ = [
    "SeatResponse",
    "SeatSummaryResponse",
    "BookingCreate",
    "BookingResult",
    "BookingResponse",
    "ResetResponse",
    "ErrorResponse",
    "SuccessResponse",
]
