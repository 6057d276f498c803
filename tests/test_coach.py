import pytest

from train_booking.coach import SEED_BOOKED_SEATS, TOTAL_SEATS, row_for_seat, seed_booking_id


@pytest.mark.unit
class TestCoachLayout:
    @pytest.mark.parametrize(
        "seat_number,row",
        [(1, 1), (7, 1), (8, 2), (14, 2), (70, 10), (77, 11), (78, 12), (80, 12)],
    )
    def test_row_for_seat(self, seat_number, row):
        assert row_for_seat(seat_number) == row

    @pytest.mark.parametrize("seat_number", [0, -1, 81])
    def test_row_for_seat_out_of_range(self, seat_number):
        with pytest.raises(ValueError):
            row_for_seat(seat_number)

    def test_rows_hold_seven_seats_except_last(self):
        rows = [row_for_seat(n) for n in range(1, TOTAL_SEATS + 1)]
        for row in range(1, 12):
            assert rows.count(row) == 7
        assert rows.count(12) == 3

    def test_seed_booking_id(self):
        assert seed_booking_id(45) == "INITIAL_45"
        assert all(1 <= n <= TOTAL_SEATS for n in SEED_BOOKED_SEATS)
