from __future__ import annotations
import re
from calendar import monthrange
from datetime import MINYEAR, date, datetime, time, timedelta, timezone
from typing import List, Optional, Tuple, Union

from .errors import ValidationError
from .models import MonthBounds

MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")
END_OF_DAY = time(23, 59, 59, 999000)
ONE_DAY = timedelta(days=1)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC instant; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def start_of_day(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        value = as_utc(value).date()
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def end_of_day(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        value = as_utc(value).date()
    return datetime.combine(value, END_OF_DAY, tzinfo=timezone.utc)


def parse_month(month: str) -> Tuple[int, int]:
    if not isinstance(month, str) or not MONTH_PATTERN.fullmatch(month):
        raise ValidationError("Invalid month format. Expected YYYY-MM", {"provided": month})
    year, month_num = (int(part) for part in month.split("-"))
    if year < MINYEAR or not 1 <= month_num <= 12:
        raise ValidationError("Invalid month format. Expected YYYY-MM", {"provided": month})
    return year, month_num


def current_month(now: Optional[datetime] = None) -> str:
    now = as_utc(now) if now else datetime.now(timezone.utc)
    return f"{now.year}-{now.month:02d}"


def get_days_in_month(month: str, tz: str = "UTC") -> List[datetime]:
    # Days are UTC midnights; tz is carried for callers, not applied.
    year, month_num = parse_month(month)
    _, last_day = monthrange(year, month_num)
    return [datetime(year, month_num, day, tzinfo=timezone.utc) for day in range(1, last_day + 1)]


def get_month_bounds(month: str, tz: str = "UTC") -> MonthBounds:
    days = get_days_in_month(month, tz)
    return MonthBounds(
        month=month,
        timezone=tz,
        start=days[0],
        end=end_of_day(days[-1]),
        days=tuple(days),
    )


def week_bounds(anchor: Union[date, datetime]) -> Tuple[datetime, datetime]:
    """Monday 00:00 through Sunday 23:59:59.999 of the week containing ``anchor``."""
    day = start_of_day(anchor)
    start = day - timedelta(days=day.weekday())
    end = end_of_day(start + timedelta(days=6))
    return start, end
