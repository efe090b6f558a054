"""Read-only folds over directory and ledger snapshots.

Nothing here is stored; callers pass in the sequences they want summarized.
"""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.constants import DAYS_IN_YEAR
from ..core.enums import RequestStatus
from ..requests.model import LeaveRequest
from ..users.model import User


def team_leaves_used(employees: Iterable[User]) -> int:
    return sum(u.leaves_used for u in employees)


def approval_counts(requests: Iterable[LeaveRequest]) -> dict[RequestStatus, int]:
    counts = {status: 0 for status in RequestStatus}
    for r in requests:
        counts[r.status] += 1
    return counts


def pending_count(requests: Iterable[LeaveRequest]) -> int:
    return sum(1 for r in requests if r.status == RequestStatus.PENDING)


def top_badge_holder(users: Sequence[User]) -> Optional[User]:
    """User with the most badges; the first one wins a tie."""
    top: Optional[User] = None
    for u in users:
        if top is None or u.badges > top.badges:
            top = u
    return top


def top_absentee(users: Iterable[User]) -> Optional[tuple[User, int]]:
    top: Optional[tuple[User, int]] = None
    for u in users:
        used = u.leaves_used
        if used > 0 and (top is None or used > top[1]):
            top = (u, used)
    return top


def attendance_days(user: User, *, days_in_year: int = DAYS_IN_YEAR) -> int:
    return days_in_year - user.leaves_used
