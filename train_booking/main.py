"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from train_booking.api.v1.router import router as v1_router
from train_booking.config import get_settings
from train_booking.database import close_db, create_tables, get_db_context
from train_booking.distributed_lock import get_coach_lock
from train_booking.redis_client import close_redis, redis_status
from train_booking.schemas.common import ErrorResponse
from train_booking.services.booking_service import BookingService
from train_booking.services.errors import BookingError
from train_booking.services.seat_service import SeatService

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def initialize_coach() -> None:
    """Create tables and seats; seed a freshly created coach."""
    await create_tables()

    lock = await get_coach_lock()
    async with get_db_context() as db:
        # Several workers may start against the same empty database
        async with lock.hold():
            created = await SeatService(db).initialize()
        if created and settings.SEED_ON_STARTUP:
            await BookingService(db, lock).apply_seed()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Starting Train Coach Booking API...")

    await initialize_coach()
    logger.info("Coach seat map ready")

    yield

    # Shutdown
    logger.info("Shutting down Train Coach Booking API...")

    await close_redis()
    await close_db()
    logger.info("Connections closed")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""
## Train Coach Booking API

Books groups of 1 to 7 seats in an 80-seat coach (11 rows of 7, one row of 3).

### Seat allocation
1. Consecutive seats in a single row
2. Any seats in a single row
3. Lowest-numbered free seats across rows

### Consistency
- Bookings and resets are serialized by a coach-wide lock
  (in-process, or Redis when `LOCK_BACKEND=redis`)
- Seat updates and the booking record are committed in one transaction
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(v1_router, prefix="/api")

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "lock_backend": settings.LOCK_BACKEND,
            "redis": await redis_status(),
        }

    @app.exception_handler(BookingError)
    async def booking_error_handler(request: Request, exc: BookingError):
        """Handle booking consistency failures not mapped by a route."""
        logger.error(f"Booking failed: {exc!r}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal Server Error",
                detail=str(exc) if settings.DEBUG else None,
                timestamp=datetime.now(),
            ).model_dump(mode="json"),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc) if settings.DEBUG else None,
            },
        )

    return app


# Create application instance
app = create_app()


def run():
    """Run the application with uvicorn."""
    uvicorn.run(
        "train_booking.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
