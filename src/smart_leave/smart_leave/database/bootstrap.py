"""Demo data loaded at startup (nothing is persisted between runs)."""
from __future__ import annotations

from datetime import date, datetime

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import days_inclusive
from ..core.constants import DEFAULT_LEAVES_PER_YEAR
from ..core.enums import RequestStatus, Role
from ..requests.model import LeaveRequest
from ..requests.repository import LeaveRepository
from ..users.model import User
from ..users.repository import UserDirectory

DEMO_USERS = [
    # (id, name, email, password, role, balance)
    (101, "Shubhangi Tyagi", "shubhangi@email.com", "pass123", Role.EMPLOYEE, 24),
    (201, "Parul Rana", "parul@email.com", "manager1", Role.MANAGER, 30),
    (301, "Dr. Swati Gupta", "admin@email.com", "admin2050", Role.ADMIN, 50),
]


def ensure_demo_users(users: UserDirectory, *, leaves_per_year: int = DEFAULT_LEAVES_PER_YEAR) -> list[User]:
    added = []
    for user_id, name, email, password, role, balance in DEMO_USERS:
        if users.find_by_id(user_id) or users.find_by_email(email):
            continue
        added.append(
            users.add(
                User(
                    user_id=user_id,
                    full_name=name,
                    email=email,
                    password_hash=generate_password_hash(password),
                    role=role,
                    # balances above the yearly allowance are not representable
                    leave_balance=min(balance, leaves_per_year),
                    total_leaves_allowed=leaves_per_year,
                )
            )
        )
    return added


def ensure_demo_requests(requests: LeaveRepository, *, request_id_base: int) -> None:
    if requests.get(request_id_base):
        return

    start, end = date(2025, 11, 10), date(2025, 11, 11)
    requests.add_existing(
        LeaveRequest(
            request_id=request_id_base,
            user_id=101,
            start_date=start,
            end_date=end,
            requested_days=days_inclusive(start, end),
            leave_type="WFH",
            reason="Remote work",
            status=RequestStatus.APPROVED,
            created_at=datetime(2025, 11, 1, 9, 0, 0),
            decided_at=datetime(2025, 11, 2, 9, 0, 0),
        )
    )
