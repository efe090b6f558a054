from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_LEAVES_PER_YEAR
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object. Balance, badges and last login change only through the
    directory, which swaps in a replaced copy.
    """

    user_id: int
    full_name: str
    email: str
    password_hash: str
    role: Role
    leave_balance: int
    total_leaves_allowed: int = DEFAULT_LEAVES_PER_YEAR
    badges: int = 0
    last_login: Optional[datetime] = None

    @property
    def leaves_used(self) -> int:
        return self.total_leaves_allowed - self.leave_balance

    @property
    def is_employee(self) -> bool:
        return self.role == Role.EMPLOYEE
