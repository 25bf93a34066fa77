"""JSON shapes for roster input and payroll preview output.

Field names are camelCase on the wire and snake_case in Python.
"""

from __future__ import annotations
import datetime as dt
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .models import (
    BreakSession,
    DailyBreakdown,
    Employee,
    EmployeePayrollSummary,
    EmployeeRecords,
    LeaveRequest,
    LeaveStatus,
    LeaveType,
    PayrollPreview,
    TimeSession,
    TimeSessionStatus,
)
from .periods import as_utc


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BreakSessionIn(CamelModel):
    id: Optional[str] = None
    start_time: dt.datetime
    end_time: Optional[dt.datetime] = None
    duration: Optional[int] = None

    def to_domain(self) -> BreakSession:
        return BreakSession(
            id=self.id,
            start_time=as_utc(self.start_time),
            end_time=as_utc(self.end_time) if self.end_time else None,
            duration=self.duration,
        )


class TimeSessionIn(CamelModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    start_time: dt.datetime
    end_time: Optional[dt.datetime] = None
    duration: Optional[int] = None
    status: TimeSessionStatus = TimeSessionStatus.COMPLETED
    break_sessions: List[BreakSessionIn] = Field(default_factory=list)

    def to_domain(self) -> TimeSession:
        return TimeSession(
            id=self.id,
            user_id=self.user_id,
            start_time=as_utc(self.start_time),
            end_time=as_utc(self.end_time) if self.end_time else None,
            duration=self.duration,
            status=self.status,
            break_sessions=tuple(b.to_domain() for b in self.break_sessions),
        )


class LeaveRequestIn(CamelModel):
    start_date: dt.date
    end_date: dt.date
    type: LeaveType
    status: LeaveStatus = LeaveStatus.APPROVED
    id: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def calendar_day(cls, value: Any) -> Any:
        # Stored leave dates may carry a midnight timestamp, keep the UTC calendar day.
        if isinstance(value, str) and "T" in value:
            return as_utc(dt.datetime.fromisoformat(value)).date()
        if isinstance(value, dt.datetime):
            return as_utc(value).date()
        return value

    def to_domain(self) -> LeaveRequest:
        return LeaveRequest(start_date=self.start_date, end_date=self.end_date, type=self.type, status=self.status, id=self.id)


class EmployeeIn(CamelModel):
    user_id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    sessions: List[TimeSessionIn] = Field(default_factory=list)
    leaves: List[LeaveRequestIn] = Field(default_factory=list)

    def to_domain(self) -> EmployeeRecords:
        return EmployeeRecords(
            employee=Employee(
                user_id=self.user_id,
                email=self.email,
                first_name=self.first_name,
                last_name=self.last_name,
            ),
            sessions=tuple(s.to_domain() for s in self.sessions),
            leaves=tuple(leave.to_domain() for leave in self.leaves),
        )


class RosterIn(CamelModel):
    month: Optional[str] = None
    timezone: Optional[str] = None
    employees: List[EmployeeIn] = Field(default_factory=list)

    def to_domain(self) -> List[EmployeeRecords]:
        return [employee.to_domain() for employee in self.employees]


class DailyBreakdownOut(CamelModel):
    date: str
    worked_minutes: int
    overtime_minutes: int
    has_paid_leave: bool
    has_unpaid_leave: bool

    @classmethod
    def from_domain(cls, day: DailyBreakdown) -> "DailyBreakdownOut":
        return cls(
            date=day.date.isoformat(),
            worked_minutes=day.worked_minutes,
            overtime_minutes=day.overtime_minutes,
            has_paid_leave=day.has_paid_leave,
            has_unpaid_leave=day.has_unpaid_leave,
        )


class EmployeePayrollSummaryOut(CamelModel):
    user_id: str
    email: str
    name: Optional[str] = None
    total_worked_minutes: int
    overtime_minutes: int
    paid_leave_days: int
    unpaid_leave_days: int
    daily_breakdown: List[DailyBreakdownOut]

    @classmethod
    def from_domain(cls, summary: EmployeePayrollSummary) -> "EmployeePayrollSummaryOut":
        return cls(
            user_id=summary.user_id,
            email=summary.email,
            name=summary.name,
            total_worked_minutes=summary.total_worked_minutes,
            overtime_minutes=summary.overtime_minutes,
            paid_leave_days=summary.paid_leave_days,
            unpaid_leave_days=summary.unpaid_leave_days,
            daily_breakdown=[DailyBreakdownOut.from_domain(day) for day in summary.daily_breakdown],
        )


class PayrollPreviewOut(CamelModel):
    month: str
    employees: List[EmployeePayrollSummaryOut]

    @classmethod
    def from_domain(cls, preview: PayrollPreview) -> "PayrollPreviewOut":
        return cls(
            month=preview.month,
            employees=[EmployeePayrollSummaryOut.from_domain(s) for s in preview.employees],
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
