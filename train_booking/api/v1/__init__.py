"""API v1 routers package."""

from train_booking.api.v1.bookings import router as bookings_router
from train_booking.api.v1.seats import router as seats_router

__all__ = [
    "seats_router",
    "bookings_router",
]
