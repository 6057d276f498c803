"""Booking schemas."""

from datetime import datetime

from pydantic import Field

from train_booking.schemas.common import BaseSchema, SuccessResponse


class BookingCreate(BaseSchema):
    """Schema for a group booking request."""

    # Range is enforced by the booking service so the error text is uniform
    seats_count: int = Field(..., description="Number of seats to book (1-7)")


class BookingResult(SuccessResponse):
    """Schema for a confirmed booking."""

    booking_id: str
    seat_numbers: list[int]


class BookingResponse(BaseSchema):
    """Schema for a booking history entry."""

    id: int
    booking_id: str
    seats_count: int
    seat_numbers: list[int]
    created_at: datetime


class ResetResponse(SuccessResponse):
    """Schema for reset confirmation."""

    seeded_seats: list[int]
