from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.constants import REQUEST_ID_BASE
from ..core.enums import RequestStatus
from ..core.exceptions import ValidationError
from .model import LeaveRequest
from .repository import LeaveRepository


class InMemoryLeaveRepository(LeaveRepository):
    def __init__(self, *, id_base: int = REQUEST_ID_BASE):
        self._next_id = int(id_base)
        self._requests: dict[int, LeaveRequest] = {}

    def _allocate_id(self) -> int:
        rid = self._next_id
        self._next_id += 1
        return rid

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
        req = LeaveRequest(
            request_id=self._allocate_id(),
            user_id=int(user_id),
            start_date=start_date,
            end_date=end_date,
            requested_days=int(requested_days),
            leave_type=leave_type,
            reason=reason,
            status=RequestStatus.PENDING,
            created_at=created_at,
        )
        self._requests[req.request_id] = req
        return req

    def add_existing(self, request: LeaveRequest) -> LeaveRequest:
        if request.request_id in self._requests:
            raise ValidationError(f"Request {request.request_id} already exists")
        self._requests[request.request_id] = request
        # ids stay unique even when seeded records sit above the counter
        self._next_id = max(self._next_id, request.request_id + 1)
        return request

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        return self._requests.get(int(request_id))

    def remove(self, request_id: int) -> bool:
        return self._requests.pop(int(request_id), None) is not None

    def set_status(self, request_id: int, *, status: RequestStatus, decided_at: datetime) -> Optional[LeaveRequest]:
        req = self._requests.get(int(request_id))
        if not req:
            return None
        updated = replace(req, status=status, decided_at=decided_at)
        self._requests[req.request_id] = updated
        return updated

    def list_for_user(self, user_id: int) -> Sequence[LeaveRequest]:
        return [r for r in self._requests.values() if r.user_id == int(user_id)]

    def list_all(self, *, status: Optional[RequestStatus] = None) -> Sequence[LeaveRequest]:
        if status is None:
            return list(self._requests.values())
        return [r for r in self._requests.values() if r.status == status]
