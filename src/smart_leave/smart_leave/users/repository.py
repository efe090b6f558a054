from __future__ import annotations

from typing import ContextManager, Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserDirectory(Protocol):
    """Directory interface for users.

    Services depend on this protocol, not on a concrete storage.
    Lookups return None instead of raising when nothing matches. `lock` is
    re-entrant and guards every read-modify-write of a user record.
    """

    lock: ContextManager

    def find_by_credentials(self, email: str, password: str, required_role: Role) -> Optional[User]:
        raise NotImplementedError

    def find_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def find_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def count_by_role(self, role: Role) -> int:
        raise NotImplementedError

    def all_employees(self) -> Sequence[User]:
        raise NotImplementedError

    def all_users(self) -> Sequence[User]:
        raise NotImplementedError

    def add(self, user: User) -> User:
        raise NotImplementedError

    def next_user_id(self) -> int:
        raise NotImplementedError

    def set_balance(self, user_id: int, new_balance: int) -> User:
        raise NotImplementedError

    def add_badges(self, user_id: int, count: int = 1) -> User:
        raise NotImplementedError
