"""
Pytest configuration and fixtures.
"""

import pytest
from unittest.mock import Mock, AsyncMock

from parking_checkin.config import Settings
from parking_checkin.core.models import Booking
from parking_checkin.services.booking import BookingStore, CheckinService
from parking_checkin.services.external import BookingAPIService


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        booking_api_base="http://bookings.test",
        total_slots=10,
        rate_per_hour=10,
        log_level="INFO",
    )


@pytest.fixture
def make_booking():
    """Factory for bookings occupying a given slot."""

    def _make(slot_index, booking_id=None, user_name="Test User"):
        return Booking(
            id=booking_id or f"b{slot_index}",
            user_name=user_name,
            car_number=f"KA-01-{slot_index:04d}",
            check_in_time="2025-01-15T10:00",
            check_out_time="2025-01-15T12:30",
            total_hours=3,
            total_amount=30,
            slot_index=slot_index,
        )

    return _make


@pytest.fixture
def mock_booking_api():
    """Mock booking API service that echoes created bookings."""
    api = Mock(spec=BookingAPIService)
    api.list_bookings = AsyncMock(return_value=[])
    api.create_booking = AsyncMock(side_effect=lambda booking: booking)
    api.delete_booking = AsyncMock(return_value=None)
    return api


@pytest.fixture
def checkin_service(mock_booking_api, settings):
    """Check-in service with a mocked booking API and an empty store."""
    return CheckinService(mock_booking_api, BookingStore(), settings)


@pytest.fixture
def full_service(mock_booking_api, settings, make_booking):
    """Check-in service whose ten slots are all taken."""
    store = BookingStore(make_booking(i) for i in range(settings.total_slots))
    service = CheckinService(mock_booking_api, store, settings)
    service.loaded = True
    return service
