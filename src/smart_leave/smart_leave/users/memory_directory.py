from __future__ import annotations

import threading
from dataclasses import replace
from typing import Callable, Optional, Sequence

from werkzeug.security import check_password_hash

from ..common.datetime_utils import now_local
from ..core.constants import FIRST_USER_ID
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from .model import User
from .repository import UserDirectory


class InMemoryDirectory(UserDirectory):
    """Holds every registered user for the lifetime of the process.

    Users are kept in a dict keyed by id; dict order doubles as insertion order
    for the listing methods. Every read-modify-write of a record runs under
    `lock`, which the leave ledger shares for its own check-then-mutate steps.
    """

    def __init__(self, clock: Callable = now_local):
        self._users: dict[int, User] = {}
        self._clock = clock
        self.lock = threading.RLock()

    def find_by_credentials(self, email: str, password: str, required_role: Role) -> Optional[User]:
        user = self.find_by_email(email)
        if not user or user.role != required_role:
            return None

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # unknown hash method on a hand-made record
            ok = False
        if not ok:
            return None

        with self.lock:
            current = self._users.get(user.user_id)
            if current is None:
                return None
            updated = replace(current, last_login=self._clock())
            self._users[current.user_id] = updated
            return updated

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(int(user_id))

    def find_by_email(self, email: str) -> Optional[User]:
        needle = (email or "").strip().lower()
        with self.lock:
            for user in self._users.values():
                if user.email.lower() == needle:
                    return user
        return None

    def count_by_role(self, role: Role) -> int:
        with self.lock:
            return sum(1 for u in self._users.values() if u.role == role)

    def all_employees(self) -> Sequence[User]:
        with self.lock:
            return [u for u in self._users.values() if u.role == Role.EMPLOYEE]

    def all_users(self) -> Sequence[User]:
        with self.lock:
            return list(self._users.values())

    def add(self, user: User) -> User:
        if not 0 <= user.leave_balance <= user.total_leaves_allowed:
            raise ValidationError("Leave balance out of range")

        with self.lock:
            if user.user_id in self._users:
                raise ValidationError(f"User id {user.user_id} already exists")
            if self.find_by_email(user.email):
                raise ValidationError("Email already registered")
            self._users[user.user_id] = user
            return user

    def next_user_id(self) -> int:
        with self.lock:
            if not self._users:
                return FIRST_USER_ID
            return max(self._users) + 1

    def set_balance(self, user_id: int, new_balance: int) -> User:
        with self.lock:
            user = self._require(user_id)
            if not 0 <= new_balance <= user.total_leaves_allowed:
                raise ValidationError(
                    f"Balance {new_balance} outside 0..{user.total_leaves_allowed} for user {user.user_id}"
                )
            updated = replace(user, leave_balance=int(new_balance))
            self._users[user.user_id] = updated
            return updated

    def add_badges(self, user_id: int, count: int = 1) -> User:
        with self.lock:
            user = self._require(user_id)
            if user.badges + count < 0:
                raise ValidationError("Badge count cannot go negative")
            updated = replace(user, badges=user.badges + count)
            self._users[user.user_id] = updated
            return updated

    def _require(self, user_id: int) -> User:
        user = self._users.get(int(user_id))
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user
