from datetime import datetime, timedelta, timezone

from payroll_preview.models import BreakSession, TimeSession, TimeSessionStatus
from payroll_preview.worked_time import calculate_daily_worked_minutes, calculate_duration


def at(day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(2024, 3, day, hour, minute, tzinfo=timezone.utc)


def test_break_time_is_subtracted():
    session = TimeSession(
        start_time=at(4, 9),
        end_time=at(4, 17),
        break_sessions=(BreakSession(start_time=at(4, 12), end_time=at(4, 12, 30)),),
    )

    assert calculate_daily_worked_minutes([session], at(4)) == 450


def test_stored_durations_take_precedence():
    session = TimeSession(
        start_time=at(4, 9),
        end_time=at(4, 17),
        duration=300,
        break_sessions=(BreakSession(start_time=at(4, 12), end_time=at(4, 13), duration=15),),
    )

    assert calculate_daily_worked_minutes([session], at(4)) == 285


def test_active_sessions_never_count():
    started_long_ago = TimeSession(start_time=at(1, 8), status=TimeSessionStatus.ACTIVE)
    paused = TimeSession(start_time=at(1, 8), end_time=at(1, 10), status=TimeSessionStatus.PAUSED)
    open_completed = TimeSession(start_time=at(1, 9))

    assert calculate_daily_worked_minutes([started_long_ago, paused, open_completed], at(1)) == 0


def test_sessions_are_attributed_to_their_start_day():
    overnight = TimeSession(start_time=at(4, 22), end_time=at(5, 2))
    next_day = TimeSession(start_time=at(5, 9), end_time=at(5, 10))

    assert calculate_daily_worked_minutes([overnight, next_day], at(4)) == 240
    assert calculate_daily_worked_minutes([overnight, next_day], at(5)) == 60


def test_multiple_sessions_accumulate_and_negative_is_clamped():
    morning = TimeSession(start_time=at(6, 8), end_time=at(6, 12))
    broken = TimeSession(
        start_time=at(6, 13),
        duration=10,
        break_sessions=(BreakSession(start_time=at(6, 13), duration=30),),
    )

    assert calculate_daily_worked_minutes([morning, broken], at(6)) == 240


def test_unfinished_break_contributes_nothing():
    session = TimeSession(
        start_time=at(7, 9),
        end_time=at(7, 11),
        break_sessions=(BreakSession(start_time=at(7, 10)),),
    )

    assert calculate_daily_worked_minutes([session], at(7)) == 120


def test_naive_datetimes_are_read_as_utc():
    session = TimeSession(start_time=datetime(2024, 3, 8, 9), end_time=datetime(2024, 3, 8, 10))

    assert calculate_daily_worked_minutes([session], datetime(2024, 3, 8)) == 60


def test_duration_floors_partial_minutes():
    start = at(1, 9)

    assert calculate_duration(start, start + timedelta(seconds=119)) == 1
    assert calculate_duration(start, start - timedelta(minutes=5)) == -5
