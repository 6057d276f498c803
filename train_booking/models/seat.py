"""Seat model."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from train_booking.models.base import Base


class Seat(Base):
    """Seat model representing one seat of the coach."""

    __tablename__ = "seats"

    seat_number: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    row_number: Mapped[int] = mapped_column(Integer, nullable=False)
    is_booked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    booking_id: Mapped[str | None] = mapped_column(String(50))
    booked_at: Mapped[datetime | None] = mapped_column(DateTime)

    __table_args__ = (
        Index("idx_seats_is_booked", "is_booked"),
        Index("idx_seats_row_number", "row_number"),
    )

    def __repr__(self) -> str:
        return f"<Seat {self.seat_number} row={self.row_number} booked={self.is_booked}>"
