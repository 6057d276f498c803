"""API v1 main router."""

from fastapi import APIRouter

from train_booking.api.v1.bookings import router as bookings_router
from train_booking.api.v1.seats import router as seats_router

router = APIRouter(prefix="/v1")

router.include_router(seats_router, prefix="/seats", tags=["Seats"])
router.include_router(bookings_router, prefix="/bookings", tags=["Bookings"])
