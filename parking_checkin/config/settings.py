"""
Application settings and configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .external_apis import BookingAPIConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "Parking Check-in"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    # Remote booking API
    booking_api_base: str = "http://localhost:3001"
    booking_api_resource: str = "bookedSlots"
    booking_api_timeout: float = 10.0

    # Serve the in-memory bookedSlots resource from the UI app as well
    serve_booking_api: bool = False

    # Parking lot
    total_slots: int = 10
    rate_per_hour: int = 10
    currency: str = "Rupees"

    # Logging
    log_level: str = "INFO"

    def booking_api(self) -> BookingAPIConfig:
        """Get the remote booking API configuration."""
        return BookingAPIConfig(
            base_url=self.booking_api_base,
            resource=self.booking_api_resource,
            timeout=self.booking_api_timeout,
        )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
