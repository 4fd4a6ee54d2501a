"""
External API services.
"""

from .service import BookingAPIService

__all__ = ["BookingAPIService"]
