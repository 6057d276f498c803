"""Fixed layout of the coach."""

import math

TOTAL_SEATS = 80
SEATS_PER_ROW = 7
FULL_ROWS = 11
LAST_ROW = 12

# No single booking may exceed this, regardless of row width.
MAX_SEATS_PER_BOOKING = 7

# Pre-existing occupancy restored by a reset.
SEED_BOOKED_SEATS = (5, 12, 23, 45, 67, 78)


def row_for_seat(seat_number: int) -> int:
    """Return the row a seat belongs to."""
    if not 1 <= seat_number <= TOTAL_SEATS:
        raise ValueError(f"Seat number out of range: {seat_number}")
    if seat_number <= FULL_ROWS * SEATS_PER_ROW:
        return math.ceil(seat_number / SEATS_PER_ROW)
    return LAST_ROW


def seed_booking_id(seat_number: int) -> str:
    """Synthetic booking id for a seeded seat."""
    return f"INITIAL_{seat_number}"
