"""
Booking service module.
"""

from .service import CheckinService
from .store import BookingStore
from .pricing import calculate_total, MS_PER_HOUR

__all__ = [
    "CheckinService",
    "BookingStore",
    "calculate_total",
    "MS_PER_HOUR",
]
