from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    """Storage for leave requests. Owns the id counter; holds no business rules."""

    def create(
        self,
        *,
        user_id: int,
        start_date: date,
        end_date: date,
        requested_days: int,
        leave_type: str,
        reason: str,
        created_at: datetime,
    ) -> LeaveRequest:
        raise NotImplementedError

    def add_existing(self, request: LeaveRequest) -> LeaveRequest:
        raise NotImplementedError

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def remove(self, request_id: int) -> bool:
        raise NotImplementedError

    def set_status(self, request_id: int, *, status: RequestStatus, decided_at: datetime) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def list_all(self, *, status: Optional[RequestStatus] = None) -> Sequence[LeaveRequest]:
        raise NotImplementedError
