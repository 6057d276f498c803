"""Seat service."""

import logging
from datetime import datetime

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from train_booking.coach import TOTAL_SEATS, row_for_seat
from train_booking.models.seat import Seat
from train_booking.services.errors import InvalidSeat

logger = logging.getLogger(__name__)


class SeatService:
    """Service for the coach seat map."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def initialize(self) -> bool:
        """
        Create the coach seats if the seat table is empty.

        A populated table is left untouched, including one filled by a
        concurrent initializer between the count and the insert.

        Returns:
            True if seats were created
        """
        count = await self.db.scalar(select(func.count()).select_from(Seat))
        if count:
            return False

        for seat_number in range(1, TOTAL_SEATS + 1):
            self.db.add(
                Seat(
                    seat_number=seat_number,
                    row_number=row_for_seat(seat_number),
                    is_booked=False,
                )
            )

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info("Seats were created concurrently; leaving them untouched")
            return False

        logger.info(f"Initialized {TOTAL_SEATS} seats")
        return True

    async def list_all_ordered(self) -> list[Seat]:
        """Get all seats ordered by seat number."""
        result = await self.db.execute(
            select(Seat)
            .order_by(Seat.seat_number)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def list_free_ordered(self, for_update: bool = False) -> list[Seat]:
        """
        Get all unbooked seats ordered by seat number.

        With for_update the rows are locked (SELECT ... FOR UPDATE) on
        backends that support it.
        """
        query = (
            select(Seat)
            .where(Seat.is_booked.is_(False))
            .order_by(Seat.seat_number)
            .execution_options(populate_existing=True)
        )
        if for_update:
            query = query.with_for_update()

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def mark_booked(
        self,
        seat_numbers: list[int],
        booking_id: str,
        booked_at: datetime | None,
    ) -> list[Seat]:
        """
        Mark exactly the given seats as booked.

        Changes are flushed but not committed; the caller owns the transaction.

        Raises:
            InvalidSeat: If a seat does not exist, is repeated or is already booked
        """
        if len(set(seat_numbers)) != len(seat_numbers):
            raise InvalidSeat(f"Duplicate seat numbers: {seat_numbers}")

        result = await self.db.execute(
            select(Seat)
            .where(Seat.seat_number.in_(seat_numbers))
            .order_by(Seat.seat_number)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        seats = list(result.scalars().all())

        if len(seats) != len(seat_numbers):
            found = {seat.seat_number for seat in seats}
            missing = sorted(set(seat_numbers) - found)
            raise InvalidSeat(f"Seats not found: {missing}")

        booked = [seat.seat_number for seat in seats if seat.is_booked]
        if booked:
            raise InvalidSeat(f"Seats already booked: {booked}")

        for seat in seats:
            seat.is_booked = True
            seat.booking_id = booking_id
            seat.booked_at = booked_at

        await self.db.flush()
        return seats

    async def reset(self) -> None:
        """Mark every seat as free. Not committed."""
        await self.db.execute(
            update(Seat).values(is_booked=False, booking_id=None, booked_at=None)
        )

    async def get_summary(self) -> dict[str, int]:
        """Get total, booked and available seat counts."""
        total = await self.db.scalar(select(func.count()).select_from(Seat))
        booked = await self.db.scalar(
            select(func.count()).select_from(Seat).where(Seat.is_booked.is_(True))
        )
        return {
            "total": total or 0,
            "booked": booked or 0,
            "available": (total or 0) - (booked or 0),
        }
