"""Seat schemas."""

from datetime import datetime

from train_booking.schemas.common import BaseSchema


class SeatResponse(BaseSchema):
    """Schema for seat response."""

    seat_number: int
    row_number: int
    is_booked: bool
    booking_id: str | None = None
    booked_at: datetime | None = None


class SeatSummaryResponse(BaseSchema):
    """Schema for coach availability counts."""

    total: int
    booked: int
    available: int
