"""Booking service: the only writer of seats and the booking ledger."""

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from ulid import ULID

from train_booking.coach import SEED_BOOKED_SEATS, seed_booking_id
from train_booking.distributed_lock import CoachLock
from train_booking.models.booking import Booking
from train_booking.models.seat import Seat
from train_booking.services.allocation import allocate_seats, validate_seat_count
from train_booking.services.errors import InvalidSeat
from train_booking.services.ledger_service import BookingLedger
from train_booking.services.seat_service import SeatService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingResult:
    """Outcome of a successful booking."""

    booking_id: str
    seat_numbers: list[int]


class BookingService:
    """
    Service coordinating seat allocation and booking records.

    Every mutation runs under the coach lock, so a read-allocate-write
    sequence never interleaves with another booking or a reset.
    """

    def __init__(self, db: AsyncSession, lock: CoachLock):
        self.db = db
        self.lock = lock
        self.seats = SeatService(db)
        self.ledger = BookingLedger(db)

    def _generate_booking_id(self) -> str:
        """Generate unique booking id using ULID."""
        return f"BK-{str(ULID())}"

    async def book(self, requested_count: int) -> BookingResult:
        """
        Allocate and book seats for a group.

        Args:
            requested_count: Number of seats, 1 to 7

        Returns:
            Booking id and the assigned seat numbers

        Raises:
            InvalidRequest: If requested_count is out of range
            InsufficientCapacity: If not enough seats are free
            InvalidSeat, DuplicateBookingId: On an internal consistency failure
        """
        validate_seat_count(requested_count)

        async with self.lock.hold():
            try:
                free_seats = await self.seats.list_free_ordered(for_update=True)
                selected = allocate_seats(free_seats, requested_count)

                booking_id = self._generate_booking_id()
                seat_numbers = [seat.seat_number for seat in selected]
                now = datetime.now()

                await self.seats.mark_booked(seat_numbers, booking_id, now)
                await self.ledger.append(booking_id, seat_numbers, now)
                await self.db.commit()
            except Exception:
                await self.db.rollback()
                raise

        logger.info(f"Booked seats {seat_numbers} under {booking_id}")
        return BookingResult(booking_id=booking_id, seat_numbers=seat_numbers)

    async def reset(self) -> list[int]:
        """
        Free every seat, clear the ledger and re-apply the seed bookings.

        Returns:
            Seat numbers that were seeded
        """
        async with self.lock.hold():
            try:
                await self.seats.reset()
                await self.ledger.clear_all()
                await self.db.commit()
            except Exception:
                await self.db.rollback()
                raise

            logger.info("Cleared all seat bookings and booking history")
            return await self._seed()

    async def apply_seed(self) -> list[int]:
        """Book the seed seats without clearing anything first."""
        async with self.lock.hold():
            return await self._seed()

    async def _seed(self) -> list[int]:
        """
        Book each seed seat in its own transaction.

        A seat that cannot be seeded is logged and skipped.
        """
        seeded = []
        now = datetime.now()
        for seat_number in SEED_BOOKED_SEATS:
            try:
                await self.seats.mark_booked(
                    [seat_number], seed_booking_id(seat_number), now
                )
                await self.db.commit()
            except (InvalidSeat, SQLAlchemyError) as e:
                await self.db.rollback()
                logger.warning(f"Skipped seed booking for seat {seat_number}: {e}")
                continue
            seeded.append(seat_number)

        logger.info(f"Seeded seats {seeded}")
        return seeded

    async def get_seats(self) -> list[Seat]:
        """Get all seats with their status."""
        return await self.seats.list_all_ordered()

    async def get_bookings(self, limit: int = 10) -> list[Booking]:
        """Get most recent bookings, newest first."""
        return await self.ledger.list_recent(limit)

    async def get_summary(self) -> dict[str, int]:
        """Get seat availability counts."""
        return await self.seats.get_summary()
