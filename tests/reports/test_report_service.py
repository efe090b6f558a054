from __future__ import annotations

from datetime import date, datetime

import pytest

from src.smart_leave.smart_leave.core.enums import ExportFormat
from src.smart_leave.smart_leave.core.exceptions import ExportError
from src.smart_leave.smart_leave.feedback.repository import InMemoryFeedbackRepository
from src.smart_leave.smart_leave.feedback.service import FeedbackService
from src.smart_leave.smart_leave.reports.export_service import ExportService
from src.smart_leave.smart_leave.reports.service import ReportService


@pytest.fixture
def feedback_repo():
    return InMemoryFeedbackRepository()


@pytest.fixture
def reports(directory, requests_repo, feedback_repo):
    return ReportService(directory, requests_repo, feedback_repo)


def test_org_stats_and_analytics(reports, ledger):
    a = ledger.apply(101, date(2025, 11, 10), date(2025, 11, 11), "WFH", "")
    b = ledger.apply(102, date(2025, 11, 10), date(2025, 11, 10), "Sick", "")
    ledger.apply(101, date(2025, 11, 20), date(2025, 11, 20), "Sick", "")
    ledger.approve(a.request_id)
    ledger.reject(b.request_id)

    assert reports.org_stats() == {
        "employees": 2,
        "leaves_taken": 9 + 27,
        "total_requests": 3,
        "approved": 1,
        "rejected": 1,
        "pending": 1,
    }
    analytics = reports.team_analytics()
    assert analytics["top_absentee"] == {"name": "Ravi Kumar", "days": 27}
    assert analytics["pending"] == 1
    assert reports.team_leaves_used() == 36


def test_tables(reports, ledger, directory, feedback_repo, clock):
    req = ledger.apply(101, date(2025, 11, 10), date(2025, 11, 11), "WFH", "Remote work")
    FeedbackService(feedback_repo, directory, clock=clock).submit(employee_id=102, message="Thanks")

    assert reports.requests_table(user_id=101).rows == [
        {
            "request_id": req.request_id,
            "user_id": 101,
            "start": "2025-11-10",
            "end": "2025-11-11",
            "days": 2,
            "type": "WFH",
            "status": "PENDING",
            "comments": "Remote work",
        }
    ]
    assert reports.requests_table(user_id=102).rows == []
    assert reports.team_table().rows[0] == {"user_id": 101, "name": "Shubhangi Tyagi", "leaves_used": 8, "leave_balance": 22}
    assert reports.profile_table(101).rows[0]["last_login"] == "Never"
    assert reports.feedback_table().rows == [{"from": "Ravi Kumar", "message": "Thanks"}]
    assert reports.award_board() == {"user_id": 102, "name": "Ravi Kumar", "badges": 1}
    assert reports.audit_table().rows[0]["request_id"] == req.request_id


def test_export_writes_timestamped_file(reports, tmp_path):
    svc = ExportService(tmp_path / "out", clock=lambda: datetime(2025, 11, 10, 8, 5, 9))

    first = svc.export([reports.team_table()], ExportFormat.CSV, prefix="team_stats")
    second = svc.export([reports.team_table()], ExportFormat.CSV, prefix="team_stats")

    assert first.name == "team_stats_20251110_080509.csv"
    assert second.name == "team_stats_20251110_080509_1.csv"
    assert first.read_text(encoding="utf-8").startswith("EmpID,Name,LeavesUsed,LeaveBalance\n101,Shubhangi Tyagi,6,24\n")


def test_export_failure_raises_export_error(reports, tmp_path, directory):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    svc = ExportService(blocker / "sub")

    with pytest.raises(ExportError):
        svc.export([reports.team_table()], ExportFormat.TXT, prefix="team_stats")
    assert directory.find_by_id(101).leave_balance == 24


def test_team_analytics_counts_employees_only(reports, directory):
    directory.set_balance(201, 0)

    analytics = reports.team_analytics()

    assert analytics["total_leaves"] == reports.team_leaves_used() == 6 + 27
    assert analytics["top_absentee"] == {"name": "Ravi Kumar", "days": 27}


def test_export_never_overwrites_an_existing_file(reports, tmp_path):
    taken = tmp_path / "team_stats_20251110_080509.csv"
    taken.write_text("keep me", encoding="utf-8")
    svc = ExportService(tmp_path, clock=lambda: datetime(2025, 11, 10, 8, 5, 9))

    path = svc.export([reports.team_table()], ExportFormat.CSV, prefix="team_stats")

    assert path.name == "team_stats_20251110_080509_1.csv"
    assert taken.read_text(encoding="utf-8") == "keep me"
