"""Seats API endpoints."""

from fastapi import APIRouter

from train_booking.api.v1.dependencies import BookingServiceDep
from train_booking.schemas.seat import SeatResponse, SeatSummaryResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[SeatResponse],
    summary="Get all seats",
)
async def get_seats(
    booking_service: BookingServiceDep,
) -> list[SeatResponse]:
    """Get every seat of the coach with its booking status."""
    seats = await booking_service.get_seats()
    return [SeatResponse.model_validate(s) for s in seats]


@router.get(
    "/summary",
    response_model=SeatSummaryResponse,
    summary="Get seat availability",
)
async def get_summary(
    booking_service: BookingServiceDep,
) -> SeatSummaryResponse:
    """Get total, booked and available seat counts."""
    summary = await booking_service.get_summary()
    return SeatSummaryResponse(**summary)
