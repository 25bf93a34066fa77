from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .models import LeaveClass, LeaveRequest, LeaveStatus, LeaveType
from .periods import end_of_day, start_of_day

LEAVE_PAY_CLASS: Dict[LeaveType, LeaveClass] = {
    LeaveType.VACATION: LeaveClass.PAID,
    LeaveType.SICK: LeaveClass.PAID,
    LeaveType.PERSONAL: LeaveClass.UNPAID,
    LeaveType.UNPAID: LeaveClass.UNPAID,
    LeaveType.MATERNITY: LeaveClass.UNPAID,
    LeaveType.PATERNITY: LeaveClass.UNPAID,
    LeaveType.OTHER: LeaveClass.UNPAID,
}


@dataclass(frozen=True)
class LeaveDayCount:
    paid: int = 0
    unpaid: int = 0


def classify_leave(leave_type: LeaveType) -> LeaveClass:
    return LEAVE_PAY_CLASS[LeaveType(leave_type)]


def date_ranges_overlap(start1: datetime, end1: datetime, start2: datetime, end2: datetime) -> bool:
    return start1 <= end2 and end1 >= start2


def leave_span(leave: LeaveRequest) -> Tuple[datetime, datetime]:
    return start_of_day(leave.start_date), end_of_day(leave.end_date)


def count_leave_days(leaves: Iterable[LeaveRequest], period_start: datetime, period_end: datetime) -> LeaveDayCount:
    """Count approved leave days falling inside ``[period_start, period_end]``.

    Each request is clipped to the period first, so a leave that straddles a
    month boundary only contributes the days inside the queried month.
    """
    period_start = start_of_day(period_start)
    period_end = end_of_day(period_end)
    paid = 0
    unpaid = 0
    for leave in leaves:
        if leave.status != LeaveStatus.APPROVED:
            continue
        leave_start, leave_end = leave_span(leave)
        if leave_start > leave_end:
            continue
        if not date_ranges_overlap(leave_start, leave_end, period_start, period_end):
            continue
        overlap_start = max(leave_start, period_start)
        overlap_end = min(leave_end, period_end)
        days = (overlap_end.date() - overlap_start.date()).days + 1
        if classify_leave(leave.type) is LeaveClass.PAID:
            paid += days
        else:
            unpaid += days
    return LeaveDayCount(paid=paid, unpaid=unpaid)


def leave_flags_for_day(leaves: Iterable[LeaveRequest], day: datetime) -> Tuple[bool, bool]:
    """Return ``(has_paid_leave, has_unpaid_leave)`` for a single calendar day."""
    day_start = start_of_day(day)
    day_end = end_of_day(day)
    has_paid = False
    has_unpaid = False
    for leave in leaves:
        if leave.status != LeaveStatus.APPROVED:
            continue
        leave_start, leave_end = leave_span(leave)
        if leave_start > leave_end:
            continue
        if not date_ranges_overlap(day_start, day_end, leave_start, leave_end):
            continue
        if classify_leave(leave.type) is LeaveClass.PAID:
            has_paid = True
        else:
            has_unpaid = True
    return has_paid, has_unpaid


def _parse_input_date(value: str, label: str) -> date:
    try:
        return datetime.fromisoformat(value.strip()).date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid {label} date", {"provided": value}) from None


def parse_leave_dates(start_date: str, end_date: str) -> Tuple[date, date]:
    return _parse_input_date(start_date, "start"), _parse_input_date(end_date, "end")


class LeaveRequestInput(BaseModel):
    """A leave request as submitted by an employee."""

    model_config = ConfigDict(populate_by_name=True)

    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    type: LeaveType
    reason: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def parse_dates(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        for alias, name, label in (("startDate", "start_date", "start"), ("endDate", "end_date", "end")):
            key = alias if alias in data else name
            if isinstance(data.get(key), str):
                data[key] = _parse_input_date(data[key], label)
        return data

    @model_validator(mode="after")
    def check_order(self) -> "LeaveRequestInput":
        if self.start_date > self.end_date:
            raise ValueError("Start date must be before or equal to end date")
        return self

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1


def find_overlapping_leaves(
    start_date: date, end_date: date, existing: Iterable[LeaveRequest]
) -> List[LeaveRequest]:
    """Approved leaves that share at least one calendar day with the given range."""
    start, end = start_of_day(start_date), end_of_day(end_date)
    return [
        leave
        for leave in existing
        if leave.status == LeaveStatus.APPROVED
        and date_ranges_overlap(start, end, *leave_span(leave))
    ]


def validate_leave_request(
    payload: Mapping[str, Any], existing: Iterable[LeaveRequest] = ()
) -> LeaveRequestInput:
    """Validate a submitted request against the employee's approved leaves."""
    try:
        request = LeaveRequestInput.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc

    overlapping = find_overlapping_leaves(request.start_date, request.end_date, existing)
    if overlapping:
        raise ValidationError(
            "You have an approved leave request that overlaps with this date range",
            {
                "overlappingLeaves": [
                    {"id": leave.id, "startDate": leave.start_date.isoformat(), "endDate": leave.end_date.isoformat()}
                    for leave in overlapping
                ]
            },
        )
    return request
