"""
Check-in service: slot grid state, the check-in form and remote sync.
"""

import asyncio
from typing import List, Optional

from ...core.enums import FormField, SlotClickOutcome, SlotStatus
from ...core.exceptions import BookingAPIError, BookingValidationError, CapacityExceededError
from ...core.models import Booking, CheckinForm, SlotSummary, SlotView, new_booking_id
from ...config import Settings, get_settings
from ...utils.logging import get_logger
from ..external import BookingAPIService
from .pricing import calculate_total
from .store import BookingStore

logger = get_logger("parking.checkin")


class CheckinService:
    """Holds booked slots and the in-progress form, mirrored to the booking API."""

    def __init__(
        self,
        external_api: BookingAPIService,
        store: Optional[BookingStore] = None,
        settings: Optional[Settings] = None,
    ):
        self.external_api = external_api
        self.store = store if store is not None else BookingStore()
        self.settings = settings or get_settings()

        self.form = CheckinForm()
        self.form_open = False
        self.pending_slot: Optional[int] = None
        self.loaded = False

        # Serializes check-in and slot clearing across concurrent requests
        self._lock = asyncio.Lock()

    @property
    def total_slots(self) -> int:
        return self.settings.total_slots

    @property
    def rate_per_hour(self) -> int:
        return self.settings.rate_per_hour

    async def load(self) -> None:
        """Fetch the full booking list into the store."""
        try:
            bookings = await self.external_api.list_bookings()
        except BookingAPIError as e:
            logger.error(f"Error fetching booked slots: {e}")
            return
        finally:
            self.loaded = True
        self.store.replace_all(bookings)
        logger.info(f"loaded {len(bookings)} booked slots")

    async def ensure_loaded(self) -> None:
        if not self.loaded:
            await self.load()

    def open_form(self, slot_index: Optional[int] = None) -> None:
        """Open a blank form, optionally for a specific slot."""
        if slot_index is not None:
            self._check_index(slot_index)
        self.form = CheckinForm()
        self.form_open = True
        self.pending_slot = slot_index

    def close_form(self) -> None:
        self.form_open = False
        self.pending_slot = None

    def update_field(self, name: str, value: str) -> CheckinForm:
        """
        Set one form field and recompute the totals.

        Totals are recomputed only when both timestamps are present and
        check-out is after check-in; otherwise the previous totals stay.
        """
        try:
            field = FormField.from_string(name)
        except ValueError as e:
            raise BookingValidationError(str(e))

        self.form.set_field(field, value)
        if self.form.has_both_times():
            result = calculate_total(
                self.form.check_in_time, self.form.check_out_time, self.rate_per_hour
            )
            if result is not None:
                self.form.total_hours, self.form.total_amount = result
        return self.form

    async def check_in(self) -> Optional[Booking]:
        """
        Submit the form as a new booking.

        Raises:
            CapacityExceededError: every slot is allocated; nothing is sent.

        Returns:
            The stored booking, or None when the booking API call failed
        """
        async with self._lock:
            if len(self.store) >= self.total_slots:
                logger.warning(f"check-in rejected: {len(self.store)}/{self.total_slots} slots allocated")
                raise CapacityExceededError()

            booking = self.form.to_booking(self._next_id(), self._assign_slot())
            try:
                stored = await self.external_api.create_booking(booking)
            except BookingAPIError as e:
                logger.error(f"Error during check-in: {e}")
                return None

            self.store.append(stored)
            self.close_form()
            return stored

    async def click_slot(self, slot_index: int) -> SlotClickOutcome:
        """Clear an occupied slot, or open the form for an empty one."""
        self._check_index(slot_index)
        async with self._lock:
            booking = self.store.find_by_slot(slot_index)
            if booking is None:
                self.open_form(slot_index)
                return SlotClickOutcome.FORM_OPENED

            try:
                await self.external_api.delete_booking(booking.id)
            except BookingAPIError as e:
                logger.error(f"Error clearing slot {slot_index}: {e}")
                return SlotClickOutcome.CLEAR_FAILED

            self.store.remove(booking.id)
            return SlotClickOutcome.CLEARED

    def slot_views(self) -> List[SlotView]:
        views = []
        for index in range(self.total_slots):
            booking = self.store.find_by_slot(index)
            status = SlotStatus.OCCUPIED if booking is not None else SlotStatus.AVAILABLE
            views.append(SlotView(index=index, status=status, booking=booking))
        return views

    def summary(self) -> SlotSummary:
        allocated = len(self.store)
        return SlotSummary(
            total=self.total_slots,
            allocated=allocated,
            empty=max(self.total_slots - allocated, 0),
        )

    def _next_id(self) -> str:
        """Time-based id, bumped past any id already in the store."""
        booking_id = new_booking_id()
        while self.store.find_by_id(booking_id) is not None:
            booking_id = str(int(booking_id) + 1)
        return booking_id

    def _assign_slot(self) -> int:
        # Non-empty: fewer bookings than slots means some cell is unclaimed
        free = self.store.free_slots(self.total_slots)
        if self.pending_slot in free:
            return self.pending_slot
        return free[0]

    def _check_index(self, slot_index: int) -> None:
        if not 0 <= slot_index < self.total_slots:
            raise BookingValidationError(
                f"Slot index {slot_index} outside 0..{self.total_slots - 1}"
            )
