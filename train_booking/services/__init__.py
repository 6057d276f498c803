"""Services package."""

from train_booking.services.allocation import allocate_seats
from train_booking.services.booking_service import BookingResult, BookingService
from train_booking.services.ledger_service import BookingLedger
from train_booking.services.seat_service import SeatService

__all__ = [
    "allocate_seats",
    "SeatService",
    "BookingLedger",
    "BookingService",
    "BookingResult",
]
