"""
Slot and form enums.
"""

from enum import Enum


class SlotStatus(str, Enum):
    """Display state of a grid cell."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"

    @property
    def label(self) -> str:
        return "Booked" if self is SlotStatus.OCCUPIED else "Empty"


class SlotClickOutcome(str, Enum):
    """What a click on a grid cell ended up doing."""

    FORM_OPENED = "form_opened"
    CLEARED = "cleared"
    CLEAR_FAILED = "clear_failed"


class FormField(str, Enum):
    """Editable check-in form fields, keyed by their wire names."""

    USER_NAME = "userName"
    CAR_NUMBER = "carNumber"
    CHECK_IN_TIME = "checkInTime"
    CHECK_OUT_TIME = "checkOutTime"

    @classmethod
    def from_string(cls, value: str) -> "FormField":
        """Resolve a wire name, raising ValueError for anything else."""
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown form field: {value!r}")

    @property
    def attribute(self) -> str:
        return {
            FormField.USER_NAME: "user_name",
            FormField.CAR_NUMBER: "car_number",
            FormField.CHECK_IN_TIME: "check_in_time",
            FormField.CHECK_OUT_TIME: "check_out_time",
        }[self]
