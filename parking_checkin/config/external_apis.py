"""
External API configuration.
"""

from pydantic import BaseModel


class BookingAPIConfig(BaseModel):
    """Remote booking collection settings."""

    base_url: str = "http://localhost:3001"
    resource: str = "bookedSlots"
    timeout: float = 10.0

    def get_collection_url(self) -> str:
        """Get the URL of the booking collection."""
        return f"{self.base_url.rstrip('/')}/{self.resource.strip('/')}"

    def get_item_url(self, booking_id: str) -> str:
        """Get the URL of a single booking."""
        return f"{self.get_collection_url()}/{booking_id}"
