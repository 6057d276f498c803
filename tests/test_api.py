import pytest

from train_booking.coach import SEED_BOOKED_SEATS
from train_booking.services.booking_service import BookingService


@pytest.mark.asyncio
class TestSeatsApi:
    async def test_get_seats(self, async_client):
        response = await async_client.get("/api/v1/seats")

        assert response.status_code == 200
        seats = response.json()
        assert len(seats) == 80
        assert seats[0] == {
            "seat_number": 1,
            "row_number": 1,
            "is_booked": False,
            "booking_id": None,
            "booked_at": None,
        }
        assert seats[79]["row_number"] == 12

    async def test_get_summary(self, async_client):
        response = await async_client.get("/api/v1/seats/summary")

        assert response.status_code == 200
        assert response.json() == {"total": 80, "booked": 0, "available": 80}


@pytest.mark.asyncio
class TestBookingsApi:
    async def test_create_booking(self, async_client):
        response = await async_client.post("/api/v1/bookings", json={"seats_count": 3})

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["seat_numbers"] == [1, 2, 3]
        assert data["booking_id"].startswith("BK-")
        assert data["message"] == "Successfully booked 3 seat(s)"

        seats = (await async_client.get("/api/v1/seats")).json()
        assert [s["seat_number"] for s in seats if s["is_booked"]] == [1, 2, 3]

    @pytest.mark.parametrize("seats_count", [0, 8])
    async def test_create_booking_invalid_count(self, async_client, seats_count):
        response = await async_client.post(
            "/api/v1/bookings", json={"seats_count": seats_count}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Seats count must be between 1 and 7"

    async def test_create_booking_missing_count(self, async_client):
        response = await async_client.post("/api/v1/bookings", json={})

        assert response.status_code == 422

    async def test_create_booking_insufficient_capacity(self, async_client):
        for _ in range(11):
            response = await async_client.post("/api/v1/bookings", json={"seats_count": 7})
            assert response.status_code == 201

        response = await async_client.post("/api/v1/bookings", json={"seats_count": 4})

        assert response.status_code == 409
        assert response.json()["detail"] == "Not enough seats available"

    async def test_get_bookings(self, async_client):
        first = (await async_client.post("/api/v1/bookings", json={"seats_count": 2})).json()
        second = (await async_client.post("/api/v1/bookings", json={"seats_count": 1})).json()

        response = await async_client.get("/api/v1/bookings")

        assert response.status_code == 200
        bookings = response.json()
        assert [b["booking_id"] for b in bookings] == [
            second["booking_id"],
            first["booking_id"],
        ]
        assert bookings[1]["seat_numbers"] == [1, 2]
        assert bookings[1]["seats_count"] == 2

    async def test_get_bookings_limit(self, async_client):
        for _ in range(3):
            await async_client.post("/api/v1/bookings", json={"seats_count": 1})

        response = await async_client.get("/api/v1/bookings", params={"limit": 2})

        assert len(response.json()) == 2

    async def test_reset(self, async_client):
        await async_client.post("/api/v1/bookings", json={"seats_count": 7})

        response = await async_client.post("/api/v1/bookings/reset")

        assert response.status_code == 200
        assert response.json()["seeded_seats"] == list(SEED_BOOKED_SEATS)
        assert (await async_client.get("/api/v1/bookings")).json() == []
        summary = (await async_client.get("/api/v1/seats/summary")).json()
        assert summary == {"total": 80, "booked": 6, "available": 74}


@pytest.mark.asyncio
async def test_health(async_client):
    response = await async_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_health_reports_redis_unused_with_local_lock(async_client):
    response = await async_client.get("/health")

    assert response.json()["redis"] == "unused"
    assert response.json()["lock_backend"] == "local"


@pytest.mark.asyncio
async def test_internal_booking_failure_is_generic_500(async_client, monkeypatch):
    monkeypatch.setattr(BookingService, "_generate_booking_id", lambda self: "BK-SAME")
    await async_client.post("/api/v1/bookings", json={"seats_count": 2})

    response = await async_client.post("/api/v1/bookings", json={"seats_count": 2})

    assert response.status_code == 500
    assert response.json()["error"] == "Internal Server Error"
    assert response.json()["detail"] is None

    seats = (await async_client.get("/api/v1/seats")).json()
    assert [s["seat_number"] for s in seats if s["is_booked"]] == [1, 2]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,path",
    [("post", "/api/book"), ("post", "/api/reset"), ("get", "/api/seats"), ("get", "/api/bookings")],
)
async def test_unversioned_paths_not_served(async_client, method, path):
    response = await async_client.request(method.upper(), path)

    assert response.status_code == 404
