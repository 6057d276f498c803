"""SQLAlchemy models."""

from train_booking.models.base import Base
from train_booking.models.booking import Booking
from train_booking.models.seat import Seat

__all__ = [
    "Base",
    "Seat",
    "Booking",
]
