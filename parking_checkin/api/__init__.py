"""
API layer for the parking check-in app.
"""

from .app import create_app, create_booking_api_app
from .middleware import SecurityHeaders, LoggingMiddleware

__all__ = [
    "create_app",
    "create_booking_api_app",
    "SecurityHeaders",
    "LoggingMiddleware",
]
