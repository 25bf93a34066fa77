from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional, Tuple


class TimeSessionStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class LeaveType(str, Enum):
    VACATION = "VACATION"
    SICK = "SICK"
    PERSONAL = "PERSONAL"
    UNPAID = "UNPAID"
    MATERNITY = "MATERNITY"
    PATERNITY = "PATERNITY"
    OTHER = "OTHER"


class LeaveStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class LeaveClass(str, Enum):
    PAID = "PAID"
    UNPAID = "UNPAID"


@dataclass(frozen=True)
class BreakSession:
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: Optional[int] = None  # minutes
    id: Optional[str] = None


@dataclass(frozen=True)
class TimeSession:
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: Optional[int] = None  # minutes, breaks not yet subtracted
    status: TimeSessionStatus = TimeSessionStatus.COMPLETED
    break_sessions: Tuple[BreakSession, ...] = ()
    id: Optional[str] = None
    user_id: Optional[str] = None


@dataclass(frozen=True)
class LeaveRequest:
    start_date: date
    end_date: date
    type: LeaveType
    status: LeaveStatus = LeaveStatus.APPROVED
    id: Optional[str] = None


@dataclass(frozen=True)
class Employee:
    user_id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def display_name(self) -> Optional[str]:
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return None


@dataclass(frozen=True)
class EmployeeRecords:
    """One employee together with the records fetched for the month."""

    employee: Employee
    sessions: Tuple[TimeSession, ...] = ()
    leaves: Tuple[LeaveRequest, ...] = ()


@dataclass(frozen=True)
class MonthBounds:
    month: str
    timezone: str
    start: datetime
    end: datetime
    days: Tuple[datetime, ...] = ()


@dataclass(frozen=True)
class DailyBreakdown:
    date: date
    worked_minutes: int
    overtime_minutes: int
    has_paid_leave: bool = False
    has_unpaid_leave: bool = False


@dataclass(frozen=True)
class EmployeePayrollSummary:
    user_id: str
    email: str
    name: Optional[str]
    total_worked_minutes: int
    overtime_minutes: int
    paid_leave_days: int
    unpaid_leave_days: int
    daily_breakdown: Tuple[DailyBreakdown, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PayrollPreview:
    month: str
    employees: Tuple[EmployeePayrollSummary, ...] = ()

    def find(self, user_id: str) -> Optional[EmployeePayrollSummary]:
        for summary in self.employees:
            if summary.user_id == user_id:
                return summary
        return None
