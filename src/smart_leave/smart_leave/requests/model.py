from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    user_id: int
    start_date: date
    end_date: date
    requested_days: int
    leave_type: str
    reason: str
    status: RequestStatus
    created_at: datetime
    decided_at: Optional[datetime] = None

    @property
    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING


@dataclass(frozen=True)
class RejectOutcome:
    """Result of a rejection.

    balance_restored is False when the owner could not be credited; warning
    then explains why. The status change applies either way.
    """

    request: LeaveRequest
    balance_restored: bool
    warning: Optional[str] = None
