"""
Tests for the check-in service.
"""

import asyncio
import logging

import pytest

from parking_checkin.core.enums import SlotClickOutcome, SlotStatus
from parking_checkin.core.exceptions import (
    BookingAPIError,
    BookingValidationError,
    CapacityExceededError,
)
from parking_checkin.core.models import Booking


def _fill_form(service):
    service.update_field("userName", "Asha")
    service.update_field("carNumber", "KA-01-1234")
    service.update_field("checkInTime", "2025-01-15T10:00")
    service.update_field("checkOutTime", "2025-01-15T12:30")


class TestLoad:
    """Fetching booked slots on mount."""

    @pytest.mark.asyncio
    async def test_load_fills_store(self, checkin_service, mock_booking_api, make_booking):
        mock_booking_api.list_bookings.return_value = [make_booking(0), make_booking(3)]

        await checkin_service.load()

        assert len(checkin_service.store) == 2
        assert checkin_service.loaded is True

    @pytest.mark.asyncio
    async def test_load_failure_is_logged(self, checkin_service, mock_booking_api, caplog):
        mock_booking_api.list_bookings.side_effect = BookingAPIError("GET failed")

        with caplog.at_level(logging.ERROR, logger="parking.checkin"):
            await checkin_service.load()

        assert len(checkin_service.store) == 0
        assert checkin_service.loaded is True
        assert "Error fetching booked slots" in caplog.text

    @pytest.mark.asyncio
    async def test_ensure_loaded_fetches_once(self, checkin_service, mock_booking_api):
        await checkin_service.ensure_loaded()
        await checkin_service.ensure_loaded()
        mock_booking_api.list_bookings.assert_awaited_once()


class TestForm:
    """Field changes and total recomputation."""

    def test_totals_recomputed_when_both_times_present(self, checkin_service):
        checkin_service.update_field("checkInTime", "2025-01-15T10:00")
        assert checkin_service.form.total_hours == 0

        form = checkin_service.update_field("checkOutTime", "2025-01-15T12:30")
        assert form.total_hours == 3
        assert form.total_amount == 30

    def test_totals_kept_when_checkout_not_after_checkin(self, checkin_service):
        _fill_form(checkin_service)
        form = checkin_service.update_field("checkOutTime", "2025-01-15T09:00")

        assert form.check_out_time == "2025-01-15T09:00"
        assert (form.total_hours, form.total_amount) == (3, 30)

    def test_unknown_field_rejected(self, checkin_service):
        with pytest.raises(BookingValidationError):
            checkin_service.update_field("totalAmount", "1000")

    def test_open_form_starts_blank(self, checkin_service):
        _fill_form(checkin_service)
        checkin_service.open_form(2)

        assert checkin_service.form_open is True
        assert checkin_service.pending_slot == 2
        assert checkin_service.form.user_name == ""
        assert checkin_service.form.total_hours == 0

    def test_open_form_rejects_bad_index(self, checkin_service):
        with pytest.raises(BookingValidationError):
            checkin_service.open_form(10)


class TestCheckin:
    """Submitting the check-in form."""

    @pytest.mark.asyncio
    async def test_check_in_posts_and_appends(self, checkin_service, mock_booking_api):
        checkin_service.open_form(4)
        _fill_form(checkin_service)

        booking = await checkin_service.check_in()

        mock_booking_api.create_booking.assert_awaited_once()
        assert booking.slot_index == 4
        assert booking.total_hours == 3
        assert booking.total_amount == 30
        assert booking.id.isdigit()
        assert list(checkin_service.store) == [booking]
        assert checkin_service.form_open is False

    @pytest.mark.asyncio
    async def test_general_check_in_takes_lowest_free_slot(self, checkin_service, make_booking):
        checkin_service.store.append(make_booking(0))
        checkin_service.store.append(make_booking(2))
        checkin_service.open_form()
        _fill_form(checkin_service)

        booking = await checkin_service.check_in()
        assert booking.slot_index == 1

    @pytest.mark.asyncio
    async def test_pending_slot_taken_meanwhile(self, checkin_service, make_booking):
        checkin_service.open_form(0)
        checkin_service.store.append(make_booking(0))
        _fill_form(checkin_service)

        booking = await checkin_service.check_in()
        assert booking.slot_index == 1

    @pytest.mark.asyncio
    async def test_eleventh_check_in_rejected_without_network_call(
        self, full_service, mock_booking_api, caplog
    ):
        full_service.open_form()
        _fill_form(full_service)

        with caplog.at_level(logging.WARNING, logger="parking.checkin"):
            with pytest.raises(CapacityExceededError) as exc:
                await full_service.check_in()

        assert str(exc.value) == "No parking slots available!"
        mock_booking_api.create_booking.assert_not_awaited()
        assert len(full_service.store) == 10
        assert full_service.form_open is True
        assert "check-in rejected" in caplog.text

    @pytest.mark.asyncio
    async def test_count_never_exceeds_total(self, checkin_service):
        for _ in range(10):
            checkin_service.open_form()
            _fill_form(checkin_service)
            await checkin_service.check_in()

        assert len(checkin_service.store) == 10
        assert sorted(b.slot_index for b in checkin_service.store) == list(range(10))
        with pytest.raises(CapacityExceededError):
            await checkin_service.check_in()
        assert len(checkin_service.store) == 10

    @pytest.mark.asyncio
    async def test_post_failure_logged_and_state_unchanged(
        self, checkin_service, mock_booking_api, caplog
    ):
        mock_booking_api.create_booking.side_effect = BookingAPIError("POST failed")
        checkin_service.open_form(1)
        _fill_form(checkin_service)

        with caplog.at_level(logging.ERROR, logger="parking.checkin"):
            result = await checkin_service.check_in()

        assert result is None
        assert len(checkin_service.store) == 0
        assert checkin_service.form_open is True
        assert "Error during check-in" in caplog.text


class TestSlotClick:
    """Clicking grid cells."""

    @pytest.mark.asyncio
    async def test_empty_slot_opens_form(self, checkin_service, mock_booking_api):
        outcome = await checkin_service.click_slot(5)

        assert outcome is SlotClickOutcome.FORM_OPENED
        assert checkin_service.form_open is True
        assert checkin_service.pending_slot == 5
        mock_booking_api.delete_booking.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_occupied_slot_is_cleared(self, checkin_service, mock_booking_api, make_booking):
        checkin_service.store.append(make_booking(5, booking_id="abc"))

        outcome = await checkin_service.click_slot(5)

        assert outcome is SlotClickOutcome.CLEARED
        mock_booking_api.delete_booking.assert_awaited_once_with("abc")
        assert checkin_service.store.find_by_id("abc") is None
        assert checkin_service.form_open is False

    @pytest.mark.asyncio
    async def test_failed_delete_keeps_local_booking(
        self, checkin_service, mock_booking_api, make_booking
    ):
        checkin_service.store.append(make_booking(5, booking_id="abc"))
        mock_booking_api.delete_booking.side_effect = BookingAPIError("DELETE failed")

        outcome = await checkin_service.click_slot(5)

        assert outcome is SlotClickOutcome.CLEAR_FAILED
        assert checkin_service.store.find_by_id("abc") is not None

    @pytest.mark.asyncio
    async def test_out_of_range_slot(self, checkin_service):
        with pytest.raises(BookingValidationError):
            await checkin_service.click_slot(-1)


class TestGrid:
    """Grid and summary views."""

    def test_slot_views(self, checkin_service, make_booking):
        checkin_service.store.append(make_booking(3, user_name="Ravi"))
        views = checkin_service.slot_views()

        assert len(views) == 10
        assert views[3].status is SlotStatus.OCCUPIED
        assert views[3].title == "Booked by: Ravi"
        assert all(v.status is SlotStatus.AVAILABLE for i, v in enumerate(views) if i != 3)

    def test_summary(self, checkin_service, make_booking):
        checkin_service.store.append(make_booking(0))
        checkin_service.store.append(make_booking(1))
        summary = checkin_service.summary()

        assert (summary.total, summary.allocated, summary.empty) == (10, 2, 8)


class TestConcurrentRequests:
    """Overlapping check-in and clear requests against one service."""

    @staticmethod
    def _slow_create(mock_booking_api):
        async def create(booking):
            await asyncio.sleep(0.01)
            return booking

        mock_booking_api.create_booking.side_effect = create

    @pytest.mark.asyncio
    async def test_overlapping_check_ins_respect_capacity(
        self, checkin_service, mock_booking_api, make_booking
    ):
        for i in range(9):
            checkin_service.store.append(make_booking(i))
        self._slow_create(mock_booking_api)
        _fill_form(checkin_service)

        results = await asyncio.gather(
            checkin_service.check_in(), checkin_service.check_in(), return_exceptions=True
        )

        assert len(checkin_service.store) == 10
        assert sum(isinstance(r, CapacityExceededError) for r in results) == 1
        assert mock_booking_api.create_booking.await_count == 1
        assert sorted(b.slot_index for b in checkin_service.store) == list(range(10))

    @pytest.mark.asyncio
    async def test_overlapping_check_ins_get_distinct_slots_and_ids(
        self, checkin_service, mock_booking_api, monkeypatch
    ):
        monkeypatch.setattr(
            "parking_checkin.services.booking.service.new_booking_id", lambda: "1000"
        )
        self._slow_create(mock_booking_api)
        _fill_form(checkin_service)

        first, second = await asyncio.gather(checkin_service.check_in(), checkin_service.check_in())

        assert {first.slot_index, second.slot_index} == {0, 1}
        assert {first.id, second.id} == {"1000", "1001"}

        await checkin_service.click_slot(first.slot_index)
        assert [b.id for b in checkin_service.store] == [second.id]

    @pytest.mark.asyncio
    async def test_overlapping_clears_delete_once(
        self, checkin_service, mock_booking_api, make_booking
    ):
        checkin_service.store.append(make_booking(3, booking_id="abc"))

        async def slow_delete(booking_id):
            await asyncio.sleep(0.01)

        mock_booking_api.delete_booking.side_effect = slow_delete

        outcomes = await asyncio.gather(
            checkin_service.click_slot(3), checkin_service.click_slot(3)
        )

        assert outcomes == [SlotClickOutcome.CLEARED, SlotClickOutcome.FORM_OPENED]
        mock_booking_api.delete_booking.assert_awaited_once_with("abc")


@pytest.mark.asyncio
async def test_loaded_legacy_records_count_toward_capacity(checkin_service, mock_booking_api):
    mock_booking_api.list_bookings.return_value = [
        Booking.model_validate({"id": i, "userName": None}) for i in range(10)
    ]
    await checkin_service.load()

    assert checkin_service.summary().allocated == 10
    with pytest.raises(CapacityExceededError):
        await checkin_service.check_in()
    mock_booking_api.create_booking.assert_not_awaited()
