"""
API handlers.
"""

from .health import HealthHandler
from .checkin import CheckinHandler
from .booked_slots import BookedSlotsHandler

__all__ = [
    "HealthHandler",
    "CheckinHandler",
    "BookedSlotsHandler",
]
