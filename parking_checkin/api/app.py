"""
FastAPI application factories.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings, get_settings
from ..services.booking import CheckinService
from ..services.external import BookingAPIService
from ..utils.logging import configure_logging
from .middleware import SecurityHeaders, LoggingMiddleware
from .handlers import BookedSlotsHandler, CheckinHandler, HealthHandler


def create_app(
    settings: Optional[Settings] = None,
    checkin_service: Optional[CheckinService] = None,
) -> FastAPI:
    """Create and configure the check-in UI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if checkin_service is None:
        checkin_service = CheckinService(BookingAPIService(settings.booking_api()), settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Fetch booked slots on mount
        await checkin_service.ensure_loaded()
        yield

    app = FastAPI(
        title=settings.app_name,
        description="Parking slot grid and check-in form",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.checkin_service = checkin_service

    app.add_middleware(SecurityHeaders)
    app.add_middleware(LoggingMiddleware)

    health_handler = HealthHandler(settings, checkin_service)
    checkin_handler = CheckinHandler(checkin_service)

    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    if settings.serve_booking_api:
        app.include_router(BookedSlotsHandler().router, tags=["bookedSlots"])
    app.include_router(checkin_handler.router, tags=["checkin"])

    return app


def create_booking_api_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the standalone in-memory ``bookedSlots`` API."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=f"{settings.app_name} booking API", version=settings.app_version)

    # The UI may be served from another origin during development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    app.include_router(BookedSlotsHandler().router, tags=["bookedSlots"])
    return app
