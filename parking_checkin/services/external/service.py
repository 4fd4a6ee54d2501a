"""
Client for the remote ``bookedSlots`` collection.
"""

from typing import Any, Dict, List, Optional
import httpx
from pydantic import ValidationError

from ...core.exceptions import BookingAPIError
from ...core.models import Booking
from ...config import BookingAPIConfig, get_settings
from ...utils.logging import get_logger

logger = get_logger("parking.http")


class BookingAPIService:
    """List, create and delete bookings against the remote collection."""

    def __init__(self, config: Optional[BookingAPIConfig] = None):
        self.config = config or get_settings().booking_api()
        self.timeout = self.config.timeout

    async def _make_request(
        self,
        method: str,
        url: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make HTTP request with error handling."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(method=method, url=url, json=json)
                response.raise_for_status()
        except httpx.TimeoutException:
            raise BookingAPIError(f"{method} {url} timed out")
        except httpx.HTTPStatusError as e:
            raise BookingAPIError(
                f"{method} {url} returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            )
        except httpx.HTTPError as e:
            raise BookingAPIError(f"{method} {url} failed: {e}")

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise BookingAPIError(f"{method} {url} returned invalid JSON: {e}")

    async def list_bookings(self) -> List[Booking]:
        """GET the full booking collection."""
        url = self.config.get_collection_url()
        payload = await self._make_request("GET", url)
        if not isinstance(payload, list):
            raise BookingAPIError(f"GET {url} did not return a list")
        try:
            return [Booking.model_validate(item) for item in payload]
        except ValidationError as e:
            raise BookingAPIError(f"GET {url} returned malformed bookings: {e}")

    async def create_booking(self, booking: Booking) -> Booking:
        """POST a new booking; returns the stored record."""
        url = self.config.get_collection_url()
        payload = await self._make_request("POST", url, json=booking.to_wire())
        logger.info(f"created booking {booking.id} in slot {booking.slot_index}")
        if not isinstance(payload, dict):
            return booking
        try:
            return Booking.model_validate(payload)
        except ValidationError:
            # Partial echo from the store; keep what was sent.
            return booking

    async def delete_booking(self, booking_id: str) -> None:
        """DELETE one booking by id."""
        url = self.config.get_item_url(booking_id)
        await self._make_request("DELETE", url)
        logger.info(f"deleted booking {booking_id}")
