"""
Main application entry point for the parking check-in app.
"""

import uvicorn
from .api.app import create_app, create_booking_api_app
from .config import get_settings

# Check-in UI
app = create_app()

# In-memory bookedSlots API, run on the port the UI points at
booking_api_app = create_booking_api_app()


def run() -> None:
    """Serve the check-in UI; auto-reload only in debug mode."""
    settings = get_settings()
    uvicorn.run(
        "parking_checkin.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
