"""
Date and time parsing utilities.
"""

from datetime import datetime, timezone
from typing import Optional


def parse_datetime_local(value: Optional[str]) -> Optional[datetime]:
    """
    Parse the value of an HTML ``datetime-local`` input.

    Accepts ``YYYY-MM-DDTHH:MM`` plus the seconds and fraction variants.
    Values carrying an offset are normalized to naive UTC.

    Returns:
        Naive datetime, or None for empty or unparseable input
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
