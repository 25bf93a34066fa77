import pytest

from payroll_preview.overtime import STANDARD_WORKDAY_MINUTES, calculate_overtime_minutes


@pytest.mark.parametrize("worked,expected", [(0, 0), (479, 0), (480, 0), (481, 1), (600, 120)])
def test_overtime_starts_after_eight_hours(worked, expected):
    assert calculate_overtime_minutes(worked) == expected


def test_standard_workday_is_eight_hours():
    assert STANDARD_WORKDAY_MINUTES == 480
