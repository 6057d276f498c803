"""Bookings API endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from train_booking.api.v1.dependencies import BookingServiceDep
from train_booking.config import get_settings
from train_booking.distributed_lock import DistributedLockError
from train_booking.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingResult,
    ResetResponse,
)
from train_booking.services.errors import InsufficientCapacity, InvalidRequest

settings = get_settings()

router = APIRouter()


@router.post(
    "",
    response_model=BookingResult,
    status_code=status.HTTP_201_CREATED,
    summary="Book seats",
)
async def create_booking(
    booking_data: BookingCreate,
    booking_service: BookingServiceDep,
) -> BookingResult:
    """
    Book a group of 1 to 7 seats.

    Seats are kept together in one row where possible.
    """
    try:
        result = await booking_service.book(booking_data.seats_count)
    except InvalidRequest as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except InsufficientCapacity as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except DistributedLockError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Coach is busy. Please try again.",
        )

    count = len(result.seat_numbers)
    return BookingResult(
        booking_id=result.booking_id,
        seat_numbers=result.seat_numbers,
        message=f"Successfully booked {count} seat(s)",
    )


@router.get(
    "",
    response_model=list[BookingResponse],
    summary="Get booking history",
)
async def get_bookings(
    booking_service: BookingServiceDep,
    limit: int = Query(settings.BOOKINGS_DEFAULT_LIMIT, ge=1, le=100),
) -> list[BookingResponse]:
    """Get the most recent bookings, newest first."""
    bookings = await booking_service.get_bookings(limit=limit)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.post(
    "/reset",
    response_model=ResetResponse,
    summary="Reset all bookings",
)
async def reset_bookings(
    booking_service: BookingServiceDep,
) -> ResetResponse:
    """Free every seat, clear the history and restore the initial occupancy."""
    try:
        seeded = await booking_service.reset()
    except DistributedLockError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Coach is busy. Please try again.",
        )

    return ResetResponse(
        message="Bookings reset successfully",
        seeded_seats=seeded,
    )
