from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import days_inclusive, now_local
from ..core.enums import RequestStatus, Role
from ..core.exceptions import (
    AuthorizationError,
    InsufficientBalanceError,
    InvalidRangeError,
    NotFoundError,
    NotPendingError,
    WrongOwnerError,
)
from ..users.model import User
from ..users.repository import UserDirectory
from .model import LeaveRequest, RejectOutcome
from .repository import LeaveRepository


class LeaveLedger:
    """Leave request state machine and balance bookkeeping.

    PENDING -> APPROVED | REJECTED are terminal. PENDING -> cancelled removes
    the request. Days are debited once at apply and credited once on cancel or
    reject; approve never touches the balance.

    Every check runs before the first mutation, so a raised error leaves both
    the ledger and the directory unchanged. Mutations hold the directory lock,
    so neither the threaded Flask server nor a concurrent login or badge award
    can interleave with a balance change.
    """

    def __init__(self, requests: LeaveRepository, users: UserDirectory, *, clock: Callable = now_local):
        self._requests = requests
        self._users = users
        self._clock = clock
        self._lock = users.lock

    def _require_user(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def _require_employee(self, user_id: int) -> User:
        user = self._require_user(user_id)
        if user.role != Role.EMPLOYEE:
            raise AuthorizationError(f"User {user.user_id} is a {user.role.label}; only employees take leave")
        return user

    def _require_request(self, request_id: int) -> LeaveRequest:
        req = self._requests.get(int(request_id))
        if not req:
            raise NotFoundError(f"Request {request_id} not found")
        return req

    @staticmethod
    def _require_pending(req: LeaveRequest) -> None:
        if req.status != RequestStatus.PENDING:
            raise NotPendingError(f"Request {req.request_id} is already {req.status.value}")

    def _require_owned_pending(self, employee_id: int, request_id: int) -> LeaveRequest:
        req = self._require_request(request_id)
        if req.user_id != int(employee_id):
            raise WrongOwnerError(f"Request {req.request_id} belongs to another employee")
        self._require_pending(req)
        return req

    @staticmethod
    def _requested_days(start: date, end: date) -> int:
        if end < start:
            raise InvalidRangeError("End date is before start date")
        return days_inclusive(start, end)

    def apply(self, employee_id: int, start: date, end: date, leave_type: str, reason: str) -> LeaveRequest:
        days = self._requested_days(start, end)
        with self._lock:
            user = self._require_employee(employee_id)
            if user.leave_balance < days:
                raise InsufficientBalanceError(
                    f"Leave balance too low: {days} day(s) requested, {user.leave_balance} available"
                )
            return self._debit_and_create(user, start, end, days, leave_type, reason)

    def _debit_and_create(
        self, user: User, start: date, end: date, days: int, leave_type: str, reason: str
    ) -> LeaveRequest:
        self._users.set_balance(user.user_id, user.leave_balance - days)
        return self._requests.create(
            user_id=user.user_id,
            start_date=start,
            end_date=end,
            requested_days=days,
            leave_type=(leave_type or "").strip() or "Other",
            reason=reason or "",
            created_at=self._clock(),
        )

    def cancel(self, employee_id: int, request_id: int) -> LeaveRequest:
        with self._lock:
            req = self._require_owned_pending(employee_id, request_id)
            user = self._require_user(employee_id)
            self._users.set_balance(user.user_id, user.leave_balance + req.requested_days)
            self._requests.remove(req.request_id)
            return req

    def edit(
        self,
        employee_id: int,
        request_id: int,
        start: date,
        end: date,
        leave_type: str,
        reason: str,
    ) -> LeaveRequest:
        """Replace a pending request: cancel the old one, apply a new one.

        The replacement always gets a fresh id. The new request is validated
        against the balance as it will be once the old hold is released.
        """
        days = self._requested_days(start, end)
        with self._lock:
            old = self._require_owned_pending(employee_id, request_id)
            user = self._require_employee(employee_id)
            if user.leave_balance + old.requested_days < days:
                raise InsufficientBalanceError(
                    f"Leave balance too low: {days} day(s) requested, "
                    f"{user.leave_balance + old.requested_days} available"
                )
            self.cancel(employee_id, old.request_id)
            return self.apply(employee_id, start, end, leave_type, reason)

    def approve(self, request_id: int) -> LeaveRequest:
        with self._lock:
            req = self._require_request(request_id)
            self._require_pending(req)
            return self._requests.set_status(req.request_id, status=RequestStatus.APPROVED, decided_at=self._clock())

    def reject(self, request_id: int) -> RejectOutcome:
        with self._lock:
            req = self._require_request(request_id)
            self._require_pending(req)

            owner = self._users.find_by_id(req.user_id)
            updated = self._requests.set_status(req.request_id, status=RequestStatus.REJECTED, decided_at=self._clock())
            if not owner:
                return RejectOutcome(
                    request=updated,
                    balance_restored=False,
                    warning=f"Owner {req.user_id} of request {req.request_id} not found; days not restored",
                )

            restored = owner.leave_balance + req.requested_days
            warning: Optional[str] = None
            if restored > owner.total_leaves_allowed:
                warning = (
                    f"Restoring {req.requested_days} day(s) would exceed the allowance of user "
                    f"{owner.user_id}; balance capped at {owner.total_leaves_allowed}"
                )
                restored = owner.total_leaves_allowed
            self._users.set_balance(owner.user_id, restored)
            return RejectOutcome(request=updated, balance_restored=True, warning=warning)

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        return self._requests.get(request_id)

    def requests_for(self, employee_id: int) -> Sequence[LeaveRequest]:
        return self._requests.list_for_user(employee_id)

    def pending_for(self, employee_id: int) -> Sequence[LeaveRequest]:
        return [r for r in self._requests.list_for_user(employee_id) if r.is_pending]

    def pending(self) -> Sequence[LeaveRequest]:
        return self._requests.list_all(status=RequestStatus.PENDING)

    def all(self) -> Sequence[LeaveRequest]:
        return self._requests.list_all()
