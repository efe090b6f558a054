from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import generate_password_hash

from ..common.validators import require_min_length, require_non_empty, require_valid_email
from ..core.constants import DEFAULT_LEAVES_PER_YEAR
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import User
from .repository import UserDirectory


@dataclass(frozen=True)
class SessionUser:
    """What the console/Flask session keeps after login."""

    user_id: int
    full_name: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserDirectory):
        self._users = users

    def authenticate(self, email: str, password: str, role: Role) -> SessionUser:
        user = self._users.find_by_credentials(email, password, role)
        if not user:
            raise AuthenticationError(f"No such {role.label} or wrong credentials.")

        return SessionUser(user_id=user.user_id, full_name=user.full_name, role=user.role)


class UserService:
    """Use case: register users and read profiles."""

    def __init__(self, users: UserDirectory, *, leaves_per_year: int = DEFAULT_LEAVES_PER_YEAR):
        self._users = users
        self._leaves_per_year = int(leaves_per_year)

    def register(
        self,
        *,
        full_name: str,
        email: str,
        password: str,
        role: Role,
        leave_balance: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> User:
        full_name = require_non_empty(full_name, "Name")
        email = require_valid_email(email)
        require_min_length(password, "Password", 6)

        if self._users.find_by_email(email):
            raise ValidationError("Email already registered")

        balance = self._leaves_per_year if leave_balance is None else int(leave_balance)
        if not 0 <= balance <= self._leaves_per_year:
            raise ValidationError(f"Leave balance must be between 0 and {self._leaves_per_year}")

        return self._users.add(
            User(
                user_id=int(user_id) if user_id is not None else self._users.next_user_id(),
                full_name=full_name,
                email=email,
                password_hash=generate_password_hash(password),
                role=role,
                leave_balance=balance,
                total_leaves_allowed=self._leaves_per_year,
            )
        )

    def get(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def count_by_role(self, role: Role) -> int:
        return self._users.count_by_role(role)
