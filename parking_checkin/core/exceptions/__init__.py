"""
Custom exceptions for the parking check-in app.
"""

from .booking import BookingFlowError, BookingValidationError, CapacityExceededError
from .external import ExternalAPIError, BookingAPIError

__all__ = [
    "BookingFlowError",
    "BookingValidationError",
    "CapacityExceededError",
    "ExternalAPIError",
    "BookingAPIError",
]
