"""Booking ledger service."""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from train_booking.models.booking import Booking
from train_booking.services.errors import DuplicateBookingId


class BookingLedger:
    """Append-only history of confirmed bookings."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def append(
        self,
        booking_id: str,
        seat_numbers: list[int],
        created_at: datetime,
    ) -> Booking:
        """
        Record a confirmed booking. Flushed, not committed.

        Raises:
            DuplicateBookingId: If booking_id is already recorded
        """
        if await self.get(booking_id) is not None:
            raise DuplicateBookingId(f"Booking id already exists: {booking_id}")

        booking = Booking(
            booking_id=booking_id,
            seats_count=len(seat_numbers),
            seat_numbers=list(seat_numbers),
            created_at=created_at,
        )
        self.db.add(booking)
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise DuplicateBookingId(
                f"Booking id already exists: {booking_id}"
            ) from e
        return booking

    async def get(self, booking_id: str) -> Booking | None:
        """Get booking by its booking id."""
        result = await self.db.execute(
            select(Booking).where(Booking.booking_id == booking_id)
        )
        return result.scalar_one_or_none()

    async def list_recent(self, limit: int) -> list[Booking]:
        """Get bookings, newest first."""
        result = await self.db.execute(
            select(Booking)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def clear_all(self) -> None:
        """Delete every booking. Not committed."""
        await self.db.execute(delete(Booking))
