from __future__ import annotations
from datetime import datetime
from typing import Iterable, Optional

from .models import TimeSession, TimeSessionStatus
from .periods import ONE_DAY, as_utc, start_of_day


def calculate_duration(start: datetime, end: datetime) -> int:
    """Whole minutes elapsed between two instants, floored."""
    return int((as_utc(end) - as_utc(start)).total_seconds() // 60)


def calculate_duration_in_seconds(start: datetime, end: datetime) -> int:
    return int((as_utc(end) - as_utc(start)).total_seconds() // 1)


def session_gross_minutes(session: TimeSession) -> Optional[int]:
    if session.duration is not None:
        return session.duration
    if session.end_time is not None:
        return calculate_duration(session.start_time, session.end_time)
    return None


def break_minutes(session: TimeSession) -> int:
    total = 0
    for pause in session.break_sessions:
        if pause.duration is not None:
            total += pause.duration
        elif pause.end_time is not None:
            total += calculate_duration(pause.start_time, pause.end_time)
    return total


def session_net_minutes(session: TimeSession) -> int:
    gross = session_gross_minutes(session)
    if gross is None:
        return 0
    return max(0, gross - break_minutes(session))


def calculate_daily_worked_minutes(sessions: Iterable[TimeSession], day: datetime) -> int:
    """Net worked minutes for sessions that started on ``day``.

    Only completed sessions count. A session crossing midnight belongs wholly
    to the day it started on.
    """
    day_start = start_of_day(day)
    next_day = day_start + ONE_DAY
    total = 0
    for session in sessions:
        if session.status != TimeSessionStatus.COMPLETED:
            continue
        if not (day_start <= as_utc(session.start_time) < next_day):
            continue
        total += session_net_minutes(session)
    return total
