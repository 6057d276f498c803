"""Seat allocation for group bookings.

Strategies are tried in order of how well they keep a group together:

1. consecutive seats within one row
2. any seats within one row
3. the lowest-numbered free seats in the coach

Rows are always visited in ascending row number and seats within a row in
ascending seat number. Nothing here touches the database.
"""

from collections import defaultdict
from typing import Sequence

from train_booking.coach import MAX_SEATS_PER_BOOKING
from train_booking.models.seat import Seat
from train_booking.services.errors import InsufficientCapacity, InvalidRequest


def validate_seat_count(requested_count: int) -> None:
    """Raise InvalidRequest unless 1 <= requested_count <= 7."""
    if not 1 <= requested_count <= MAX_SEATS_PER_BOOKING:
        raise InvalidRequest(
            f"Seats count must be between 1 and {MAX_SEATS_PER_BOOKING}"
        )


def group_by_row(seats: Sequence[Seat]) -> dict[int, list[Seat]]:
    """Group seats by row, sorted by seat number within each row."""
    rows: dict[int, list[Seat]] = defaultdict(list)
    for seat in sorted(seats, key=lambda s: s.seat_number):
        rows[seat.row_number].append(seat)
    return {row_number: rows[row_number] for row_number in sorted(rows)}


def find_consecutive_run(row_seats: Sequence[Seat], count: int) -> list[Seat] | None:
    """Return the first run of count seats with consecutive numbers."""
    run: list[Seat] = []
    for seat in row_seats:
        if run and seat.seat_number == run[-1].seat_number + 1:
            run.append(seat)
        else:
            run = [seat]
        if len(run) == count:
            return run
    return None


def allocate_seats(free_seats: Sequence[Seat], requested_count: int) -> list[Seat]:
    """
    Choose which free seats to assign to a booking.

    Args:
        free_seats: Currently unbooked seats
        requested_count: Number of seats requested

    Returns:
        Exactly requested_count seats, in selection order

    Raises:
        InvalidRequest: If requested_count is outside 1..7
        InsufficientCapacity: If fewer seats are free than requested
    """
    validate_seat_count(requested_count)

    if len(free_seats) < requested_count:
        raise InsufficientCapacity("Not enough seats available")

    rows = group_by_row(free_seats)

    for row_seats in rows.values():
        if len(row_seats) >= requested_count:
            run = find_consecutive_run(row_seats, requested_count)
            if run:
                return run

    for row_seats in rows.values():
        if len(row_seats) >= requested_count:
            return row_seats[:requested_count]

    return sorted(free_seats, key=lambda s: s.seat_number)[:requested_count]
