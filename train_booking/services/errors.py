"""Booking errors."""


class BookingError(Exception):
    """Booking operation error."""

    pass


class InvalidRequest(BookingError):
    """Requested seat count is outside the allowed range."""

    pass


class InsufficientCapacity(BookingError):
    """Not enough free seats left for the request."""

    pass


class InvalidSeat(BookingError):
    """A seat to be booked does not exist or is already booked."""

    pass


class DuplicateBookingId(BookingError):
    """A booking with the same id is already recorded."""

    pass
