from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

from conftest import make_user
from src.smart_leave.smart_leave.core.enums import RequestStatus, Role
from src.smart_leave.smart_leave.reports import aggregates
from src.smart_leave.smart_leave.reports.audit import audit_trail, hash_leave, verify
from src.smart_leave.smart_leave.reports.insights import predict_next_leave, stress_analysis
from src.smart_leave.smart_leave.requests.model import LeaveRequest


def leave(rid, user_id=101, leave_type="Sick", status=RequestStatus.PENDING):
    return LeaveRequest(
        request_id=rid,
        user_id=user_id,
        start_date=date(2025, 11, 10),
        end_date=date(2025, 11, 11),
        requested_days=2,
        leave_type=leave_type,
        reason="",
        status=status,
        created_at=datetime(2025, 11, 1),
    )


def test_team_leaves_used_sums_allowance_minus_balance():
    users = [make_user(101, balance=24), make_user(102, balance=30), make_user(103, balance=0)]
    assert aggregates.team_leaves_used(users) == 6 + 0 + 30


def test_approval_counts_include_every_status():
    counts = aggregates.approval_counts(
        [leave(1, status=RequestStatus.APPROVED), leave(2), leave(3), leave(4, status=RequestStatus.APPROVED)]
    )
    assert counts == {RequestStatus.PENDING: 2, RequestStatus.APPROVED: 2, RequestStatus.REJECTED: 0}
    assert aggregates.pending_count([leave(1), leave(2, status=RequestStatus.REJECTED)]) == 1


def test_top_badge_holder_prefers_first_on_tie():
    a, b, c = make_user(1), make_user(2), make_user(3)
    a, b = replace(a, badges=2), replace(b, badges=2)
    assert aggregates.top_badge_holder([c, a, b]) is a
    assert aggregates.top_badge_holder([]) is None
    assert aggregates.top_badge_holder([c]) is c


def test_top_absentee_ignores_unused_allowances():
    assert aggregates.top_absentee([make_user(1, balance=30)]) is None
    top_user, days = aggregates.top_absentee([make_user(1, balance=28), make_user(2, balance=20), make_user(3, balance=20)])
    assert (top_user.user_id, days) == (2, 10)


def test_attendance_days():
    assert aggregates.attendance_days(make_user(1, balance=24)) == 359


def test_stress_levels():
    assert stress_analysis(make_user(1, balance=29)).level == "good"
    assert stress_analysis(make_user(1, balance=20)).level == "moderate"
    high = stress_analysis(make_user(1, balance=5, role=Role.EMPLOYEE))
    assert (high.level, high.leaves_taken) == ("high", 25)


def test_prediction_counts_by_substring():
    history = [leave(1, leave_type="WFH"), leave(2, leave_type="wfh-home"), leave(3, leave_type="Sick leave"), leave(4, user_id=7, leave_type="Sick")]
    p = predict_next_leave(101, history)
    assert (p.total, p.sick, p.wfh, p.vacation, p.predicted) == (3, 1, 2, 0, "WFH")


def test_prediction_defaults_to_vacation():
    assert predict_next_leave(101, []).predicted == "Vacation"
    assert predict_next_leave(101, [leave(1, leave_type="Sick")]).predicted == "Sick"


def test_hash_changes_with_status():
    pending, approved = leave(1000), leave(1000, status=RequestStatus.APPROVED)
    assert len(hash_leave(pending)) == 8
    assert hash_leave(pending) == hash_leave(leave(1000))
    assert hash_leave(pending) != hash_leave(approved)

    recorded = {row["request_id"]: row["hash"] for row in audit_trail([pending, leave(1001)])}
    assert verify([approved, leave(1001), leave(1002)], recorded) == [1000]
