from __future__ import annotations

STANDARD_WORKDAY_HOURS = 8
STANDARD_WORKDAY_MINUTES = STANDARD_WORKDAY_HOURS * 60


def calculate_overtime_minutes(daily_minutes: int) -> int:
    """Minutes worked beyond the standard eight hour day."""
    if daily_minutes <= STANDARD_WORKDAY_MINUTES:
        return 0
    return daily_minutes - STANDARD_WORKDAY_MINUTES
