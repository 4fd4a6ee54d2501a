"""
Core data models for the parking check-in app.
"""

from .booking import Booking, CheckinForm, SlotView, SlotSummary, new_booking_id

__all__ = [
    "Booking",
    "CheckinForm",
    "SlotView",
    "SlotSummary",
    "new_booking_id",
]
