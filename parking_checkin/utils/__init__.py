"""
Utility modules for the parking check-in app.
"""

from .date import parse_datetime_local
from .logging import configure_logging, get_logger

__all__ = [
    "parse_datetime_local",
    "configure_logging",
    "get_logger",
]
