from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.constants import HIGH_STRESS_LEAVES, LOW_STRESS_LEAVES
from ..requests.model import LeaveRequest
from ..users.model import User


@dataclass(frozen=True)
class StressReport:
    leaves_taken: int
    level: str
    suggestion: str


@dataclass(frozen=True)
class LeavePattern:
    total: int
    sick: int
    wfh: int
    vacation: int
    predicted: str


def stress_analysis(user: User) -> StressReport:
    taken = user.leaves_used
    if taken > HIGH_STRESS_LEAVES:
        return StressReport(taken, "high", "High leaves: you might be stressed. Take wellness leave or consult HR.")
    if taken < LOW_STRESS_LEAVES:
        return StressReport(taken, "good", "Good leave pattern. Keep balancing work and rest.")
    return StressReport(taken, "moderate", "Moderate leave. Prioritize self-care.")


def predict_next_leave(user_id: int, requests: Iterable[LeaveRequest]) -> LeavePattern:
    """Guess the next leave category from the user's past leave types.

    Matching is by substring so "Sick leave" or "vacation-abroad" still count.
    """
    total = sick = wfh = vacation = 0
    for r in requests:
        if r.user_id != int(user_id):
            continue
        total += 1
        t = r.leave_type.lower()
        if "sick" in t:
            sick += 1
        if "wfh" in t:
            wfh += 1
        if "vac" in t:
            vacation += 1

    if wfh > sick and wfh > vacation:
        predicted = "WFH"
    elif sick > vacation:
        predicted = "Sick"
    else:
        predicted = "Vacation"
    return LeavePattern(total=total, sick=sick, wfh=wfh, vacation=vacation, predicted=predicted)
