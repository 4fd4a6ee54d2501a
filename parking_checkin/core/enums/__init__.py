"""
Enumerations for the parking check-in app.
"""

from .slot import SlotStatus, SlotClickOutcome, FormField

__all__ = [
    "SlotStatus",
    "SlotClickOutcome",
    "FormField",
]
