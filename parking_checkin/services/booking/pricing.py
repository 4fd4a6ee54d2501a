"""
Duration and cost calculation.
"""

from datetime import timedelta
from typing import Optional, Tuple

from ...utils.date import parse_datetime_local

MS_PER_HOUR = 60 * 60 * 1000


def calculate_total(
    check_in_time: str,
    check_out_time: str,
    rate_per_hour: int,
) -> Optional[Tuple[int, int]]:
    """
    Billable hours and amount for a stay.

    Hours are the ceiling of the elapsed milliseconds over one hour, so any
    started hour is charged in full.

    Returns:
        ``(hours, amount)``, or None unless check-out is strictly after check-in
    """
    check_in = parse_datetime_local(check_in_time)
    check_out = parse_datetime_local(check_out_time)
    if check_in is None or check_out is None or check_out <= check_in:
        return None

    elapsed_ms = (check_out - check_in) // timedelta(milliseconds=1)
    hours = -(-elapsed_ms // MS_PER_HOUR)
    return hours, hours * rate_per_hour
