"""
In-memory booking state.
"""

from typing import Iterable, Iterator, List, Optional

from ...core.models import Booking


class BookingStore:
    """Ordered list of bookings with linear lookups by slot index or id."""

    def __init__(self, bookings: Optional[Iterable[Booking]] = None):
        self._bookings: List[Booking] = list(bookings or [])

    def __len__(self) -> int:
        return len(self._bookings)

    def __iter__(self) -> Iterator[Booking]:
        return iter(self._bookings)

    def replace_all(self, bookings: Iterable[Booking]) -> None:
        self._bookings = list(bookings)

    def append(self, booking: Booking) -> None:
        self._bookings.append(booking)

    def remove(self, booking_id: str) -> bool:
        """Drop the booking with ``booking_id``; False if none matched."""
        kept = [b for b in self._bookings if b.id != booking_id]
        removed = len(kept) != len(self._bookings)
        self._bookings = kept
        return removed

    def find_by_slot(self, slot_index: int) -> Optional[Booking]:
        for booking in self._bookings:
            if booking.slot_index == slot_index:
                return booking
        return None

    def find_by_id(self, booking_id: str) -> Optional[Booking]:
        for booking in self._bookings:
            if booking.id == booking_id:
                return booking
        return None

    def free_slots(self, total_slots: int) -> List[int]:
        """Indexes in ``range(total_slots)`` no booking claims."""
        taken = {b.slot_index for b in self._bookings}
        return [i for i in range(total_slots) if i not in taken]
