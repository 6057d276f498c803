"""Booking model."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from train_booking.models.base import Base


class Booking(Base):
    """Booking model representing a confirmed group booking."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    booking_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    seats_count: Mapped[int] = mapped_column(Integer, nullable=False)
    # Stored as a JSON array, in selection order
    seat_numbers: Mapped[list[int]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp()
    )

    __table_args__ = (Index("idx_bookings_created_at", "created_at"),)
