"""
Health check handler.
"""

from datetime import datetime
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from ...config import Settings
from ...services.booking import CheckinService


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str
    uptime: float
    booking_api: str
    allocated_slots: int


class HealthHandler:
    """Liveness and readiness probes for the check-in UI."""

    def __init__(self, settings: Settings, checkin_service: CheckinService):
        self.settings = settings
        self.checkin_service = checkin_service
        self.start_time = datetime.now()
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):

        @self.router.get("/", response_model=HealthResponse)
        async def health_check():
            uptime = (datetime.now() - self.start_time).total_seconds()
            return HealthResponse(
                status="healthy",
                timestamp=datetime.now().isoformat(),
                version=self.settings.app_version,
                uptime=uptime,
                booking_api=self.settings.booking_api().get_collection_url(),
                allocated_slots=len(self.checkin_service.store),
            )

        @self.router.get("/ready")
        async def readiness_check(response: Response):
            """Ready once the booking list has been fetched (or the fetch failed)."""
            if not self.checkin_service.loaded:
                response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
                return {"status": "loading"}
            return {"status": "ready"}

        @self.router.get("/live")
        async def liveness_check():
            return {"status": "alive"}
