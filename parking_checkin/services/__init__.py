"""
Service layer for the parking check-in app.
"""

from .booking import CheckinService, BookingStore
from .external import BookingAPIService

__all__ = [
    "CheckinService",
    "BookingStore",
    "BookingAPIService",
]
