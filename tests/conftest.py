import os

# Must be set before the application modules build their engine and settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_train_booking.db"
os.environ["LOCK_BACKEND"] = "local"

from httpx import ASGITransport, AsyncClient  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from train_booking.coach import row_for_seat  # noqa: E402
from train_booking.database import get_db  # noqa: E402
from train_booking.distributed_lock import LocalCoachLock, get_coach_lock  # noqa: E402
from train_booking.main import app  # noqa: E402
from train_booking.models import Base, Seat  # noqa: E402
from train_booking.services.booking_service import BookingService  # noqa: E402
from train_booking.services.seat_service import SeatService  # noqa: E402


def make_free_seats(seat_numbers):
    """Unattached free Seat rows for allocation tests."""
    return [
        Seat(seat_number=n, row_number=row_for_seat(n), is_booked=False)
        for n in seat_numbers
    ]


@pytest.fixture
def free_seats():
    return make_free_seats


@pytest_asyncio.fixture(scope="function")
async def async_engine(tmp_path):
    """Create async engine on a throwaway SQLite file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'coach.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db(session_maker):
    """Session on a database holding an initialized, empty coach."""
    async with session_maker() as session:
        await SeatService(session).initialize()
        yield session


@pytest.fixture
def coach_lock():
    return LocalCoachLock()


@pytest.fixture
def booking_service(db, coach_lock):
    return BookingService(db, coach_lock)


@pytest_asyncio.fixture(scope="function")
async def async_client(db, session_maker, coach_lock):
    """Create async test client bound to the test database."""

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_coach_lock] = lambda: coach_lock

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
