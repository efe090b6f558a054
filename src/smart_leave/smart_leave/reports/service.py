from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import format_login
from ..core.enums import RequestStatus, Role
from ..core.exceptions import NotFoundError
from ..feedback.repository import FeedbackRepository
from ..requests.model import LeaveRequest
from ..requests.repository import LeaveRepository
from ..users.model import User
from ..users.repository import UserDirectory
from . import aggregates
from .audit import audit_trail
from .exporters.base import Column, Table
from .insights import LeavePattern, StressReport, predict_next_leave, stress_analysis

REQUEST_COLUMNS = [
    Column("request_id", "ReqID", "Request ID"),
    Column("user_id", "EmpID", "Employee"),
    Column("start", "Start", "From"),
    Column("end", "End", "To"),
    Column("days", "Days", "Days"),
    Column("type", "Type", "Type"),
    Column("status", "Status", "Status"),
    Column("comments", "Comments", "Reason"),
]

TEAM_COLUMNS = [
    Column("user_id", "EmpID", "EmpID"),
    Column("name", "Name", "Name"),
    Column("leaves_used", "LeavesUsed", "Leaves Used"),
    Column("leave_balance", "LeaveBalance", "Leave Balance"),
]

PROFILE_COLUMNS = [
    Column("user_id", "EmpID", "EmpID"),
    Column("name", "Name", "Name"),
    Column("email", "Email", "Email"),
    Column("total_allowed", "TotalAllowed", "Total Allowed"),
    Column("leave_balance", "LeaveBalance", "Leave Balance"),
    Column("badges", "Badges", "Badges"),
    Column("last_login", "LastLogin", "Last Login"),
]

FEEDBACK_COLUMNS = [
    Column("from", "From", "From"),
    Column("message", "Message", "Message"),
]

AUDIT_COLUMNS = [
    Column("request_id", "ReqID", "ReqID"),
    Column("user_id", "EmpID", "EmpID"),
    Column("status", "Status", "Status"),
    Column("hash", "Hash", "Hash"),
]


def request_row(r: LeaveRequest) -> dict:
    return {
        "request_id": r.request_id,
        "user_id": r.user_id,
        "start": r.start_date.isoformat(),
        "end": r.end_date.isoformat(),
        "days": r.requested_days,
        "type": r.leave_type,
        "status": r.status.value,
        "comments": r.reason,
    }


def team_row(u: User) -> dict:
    return {
        "user_id": u.user_id,
        "name": u.full_name,
        "leaves_used": u.leaves_used,
        "leave_balance": u.leave_balance,
    }


class ReportService:
    """Read-only views over users, requests and feedback.

    Row dicts are what the console tables, CSV/TXT exporters and JSON
    endpoints render. Nothing here mutates state.
    """

    def __init__(self, users: UserDirectory, requests: LeaveRepository, feedback: FeedbackRepository):
        self._users = users
        self._requests = requests
        self._feedback = feedback

    def _require_user(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user

    # Tables

    def requests_table(self, *, user_id: Optional[int] = None) -> Table:
        if user_id is None:
            items = self._requests.list_all()
        else:
            items = self._requests.list_for_user(user_id)
        return Table("Leave Requests Report", REQUEST_COLUMNS, [request_row(r) for r in items])

    def team_table(self) -> Table:
        return Table("Team Leave Summary", TEAM_COLUMNS, [team_row(u) for u in self._users.all_employees()])

    def profile_table(self, user_id: int) -> Table:
        u = self._require_user(user_id)
        row = {
            "user_id": u.user_id,
            "name": u.full_name,
            "email": u.email,
            "total_allowed": u.total_leaves_allowed,
            "leave_balance": u.leave_balance,
            "badges": u.badges,
            "last_login": format_login(u.last_login),
        }
        return Table("Employee Profile", PROFILE_COLUMNS, [row])

    def feedback_table(self) -> Table:
        rows = [{"from": f.employee_name, "message": f.message} for f in self._feedback.list_all()]
        return Table("HR Feedback", FEEDBACK_COLUMNS, rows)

    def audit_table(self) -> Table:
        return Table("Audit Trail", AUDIT_COLUMNS, audit_trail(self._requests.list_all()))

    # Stats

    def team_leaves_used(self) -> int:
        return aggregates.team_leaves_used(self._users.all_employees())

    def org_stats(self) -> dict:
        requests = self._requests.list_all()
        counts = aggregates.approval_counts(requests)
        return {
            "employees": self._users.count_by_role(Role.EMPLOYEE),
            "leaves_taken": aggregates.team_leaves_used(self._users.all_employees()),
            "total_requests": len(requests),
            "approved": counts[RequestStatus.APPROVED],
            "rejected": counts[RequestStatus.REJECTED],
            "pending": counts[RequestStatus.PENDING],
        }

    def team_analytics(self) -> dict:
        employees = self._users.all_employees()
        top = aggregates.top_absentee(employees)
        return {
            "total_leaves": aggregates.team_leaves_used(employees),
            "top_absentee": {"name": top[0].full_name, "days": top[1]} if top else None,
            "pending": aggregates.pending_count(self._requests.list_all()),
        }

    def attendance_summary(self) -> list[dict]:
        return [
            {"name": u.full_name, "days_attended": aggregates.attendance_days(u)}
            for u in self._users.all_employees()
        ]

    def award_board(self) -> Optional[dict]:
        top = aggregates.top_badge_holder(self._users.all_users())
        if not top:
            return None
        return {"user_id": top.user_id, "name": top.full_name, "badges": top.badges}

    # Insights

    def stress(self, user_id: int) -> StressReport:
        return stress_analysis(self._require_user(user_id))

    def leave_pattern(self, user_id: int) -> LeavePattern:
        return predict_next_leave(user_id, self._requests.list_for_user(user_id))
