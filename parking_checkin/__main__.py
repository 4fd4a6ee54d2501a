"""
Entry point for running the application as a module.

    python -m parking_checkin              # check-in UI
    python -m parking_checkin booking-api  # in-memory bookedSlots API
"""

import sys

import httpx
import uvicorn

from .config import get_settings
from .main import run

if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "booking-api":
        settings = get_settings()
        port = httpx.URL(settings.booking_api_base).port or 3001
        uvicorn.run("parking_checkin.main:booking_api_app", host=settings.host, port=port)
    else:
        run()
