"""
Booking-related data models.
"""

import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..enums import SlotStatus, FormField


def new_booking_id() -> str:
    """Time-based booking id: epoch milliseconds as text."""
    return str(int(time.time() * 1000))


class Booking(BaseModel):
    """A parking check-in record as stored in the remote collection."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    id: str
    user_name: str = ""
    car_number: str = ""
    check_in_time: str = ""
    check_out_time: str = ""
    total_hours: int = 0
    total_amount: int = 0
    slot_index: Optional[int] = None

    @field_validator("user_name", "car_number", "check_in_time", "check_out_time", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("total_hours", "total_amount", mode="before")
    @classmethod
    def _null_number(cls, value: Any) -> Any:
        return 0 if value is None else value

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys the booking API expects."""
        return self.model_dump(by_alias=True)


@dataclass
class CheckinForm:
    """In-progress check-in form state."""

    user_name: str = ""
    car_number: str = ""
    check_in_time: str = ""
    check_out_time: str = ""
    total_hours: int = 0
    total_amount: int = 0

    def set_field(self, field: FormField, value: str) -> None:
        setattr(self, field.attribute, value)

    def has_both_times(self) -> bool:
        return bool(self.check_in_time and self.check_out_time)

    def to_booking(self, booking_id: str, slot_index: Optional[int]) -> Booking:
        """Build the booking submitted for this form."""
        return Booking(id=booking_id, slot_index=slot_index, **asdict(self))

    def totals(self) -> Dict[str, int]:
        return {"totalHours": self.total_hours, "totalAmount": self.total_amount}


class SlotView(BaseModel):
    """One rendered cell of the slot grid."""

    model_config = ConfigDict(extra="forbid")

    index: int
    status: SlotStatus
    booking: Optional[Booking] = None

    @property
    def label(self) -> str:
        return self.status.label

    @property
    def title(self) -> str:
        if self.booking is None:
            return "Available"
        return f"Booked by: {self.booking.user_name}"


class SlotSummary(BaseModel):
    """Counts shown above the grid."""

    model_config = ConfigDict(extra="forbid")

    total: int
    allocated: int
    empty: int = Field(ge=0)
