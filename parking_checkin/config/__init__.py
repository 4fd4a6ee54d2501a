"""
Configuration management for the parking check-in app.
"""

from .settings import Settings, get_settings
from .external_apis import BookingAPIConfig

__all__ = [
    "Settings",
    "get_settings",
    "BookingAPIConfig",
]
