"""
Booking-related exceptions.
"""


class BookingFlowError(Exception):
    """Base exception for booking flow errors."""
    pass


class BookingValidationError(BookingFlowError):
    """Exception raised when a form field or slot index is invalid."""
    pass


class CapacityExceededError(BookingFlowError):
    """Exception raised when every parking slot is already allocated."""

    def __init__(self, message: str = "No parking slots available!"):
        super().__init__(message)
