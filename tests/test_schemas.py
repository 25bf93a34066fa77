import json
from datetime import date, datetime, timezone

from payroll_preview.models import LeaveStatus, LeaveType, TimeSessionStatus
from payroll_preview.schemas import PayrollPreviewOut, RosterIn
from payroll_preview.summary import build_payroll_preview

ROSTER = {
    "month": "2024-03",
    "employees": [
        {
            "userId": "u1",
            "email": "ada@example.com",
            "firstName": "Ada",
            "lastName": "Lovelace",
            "sessions": [
                {
                    "id": "s1",
                    "startTime": "2024-03-04T09:00:00Z",
                    "endTime": "2024-03-04T17:00:00Z",
                    "status": "COMPLETED",
                    "breakSessions": [
                        {"startTime": "2024-03-04T12:00:00Z", "endTime": "2024-03-04T12:30:00Z", "duration": None}
                    ],
                },
                {"startTime": "2024-03-05T09:00:00", "status": "ACTIVE"},
            ],
            "leaves": [
                {"startDate": "2024-03-10T00:00:00.000Z", "endDate": "2024-03-12", "type": "VACATION", "status": "APPROVED"}
            ],
        },
        {"userId": "u2", "email": "bob@example.com"},
    ],
}


def test_roster_parses_camel_case_records():
    roster = RosterIn.model_validate(ROSTER)

    records = roster.to_domain()
    session = records[0].sessions[0]
    assert roster.month == "2024-03"
    assert session.start_time == datetime(2024, 3, 4, 9, tzinfo=timezone.utc)
    assert session.status is TimeSessionStatus.COMPLETED
    assert session.break_sessions[0].duration is None
    assert records[0].sessions[1].start_time.tzinfo is timezone.utc
    assert records[0].leaves[0].start_date == date(2024, 3, 10)
    assert records[0].leaves[0].type is LeaveType.VACATION
    assert records[0].leaves[0].status is LeaveStatus.APPROVED
    assert records[1].sessions == ()


def test_preview_serialises_to_camel_case_json():
    preview = build_payroll_preview("2024-03", RosterIn.model_validate(ROSTER).to_domain())

    payload = json.loads(PayrollPreviewOut.from_domain(preview).to_json())

    first, second = payload["employees"]
    assert payload["month"] == "2024-03"
    assert first["name"] == "Ada Lovelace"
    assert first["totalWorkedMinutes"] == 450
    assert first["paidLeaveDays"] == 3
    assert first["dailyBreakdown"][3] == {
        "date": "2024-03-04",
        "workedMinutes": 450,
        "overtimeMinutes": 0,
        "hasPaidLeave": False,
        "hasUnpaidLeave": False,
    }
    assert "name" not in second
    assert len(second["dailyBreakdown"]) == 31
