"""API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from train_booking.database import get_db
from train_booking.distributed_lock import CoachLock, get_coach_lock
from train_booking.services.booking_service import BookingService

# Type aliases
DBSession = Annotated[AsyncSession, Depends(get_db)]
CoachLockDep = Annotated[CoachLock, Depends(get_coach_lock)]


def get_booking_service(
    db: DBSession,
    lock: CoachLockDep,
) -> BookingService:
    """Get booking service."""
    return BookingService(db, lock)


# Annotated dependencies
BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]
