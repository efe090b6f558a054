from __future__ import annotations

from datetime import datetime

import pytest
from werkzeug.security import generate_password_hash

from src.smart_leave.smart_leave.core.enums import Role
from src.smart_leave.smart_leave.requests.memory_request_repository import InMemoryLeaveRepository
from src.smart_leave.smart_leave.requests.service import LeaveLedger
from src.smart_leave.smart_leave.users.memory_directory import InMemoryDirectory
from src.smart_leave.smart_leave.users.model import User

FIXED_NOW = datetime(2025, 11, 1, 9, 30, 0)

# cheap hash so the suite does not spend its time in key stretching
FAST_HASH = "pbkdf2:sha256:1000"


def make_user(user_id, role=Role.EMPLOYEE, *, balance=24, email=None, password="pass123", name=None, allowed=30):
    return User(
        user_id=user_id,
        full_name=name or f"User {user_id}",
        email=email or f"user{user_id}@email.com",
        password_hash=generate_password_hash(password, method=FAST_HASH),
        role=role,
        leave_balance=balance,
        total_leaves_allowed=allowed,
    )


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def directory(clock):
    d = InMemoryDirectory(clock=clock)
    d.add(make_user(101, Role.EMPLOYEE, balance=24, email="shubhangi@email.com", name="Shubhangi Tyagi"))
    d.add(make_user(102, Role.EMPLOYEE, balance=3, email="ravi@email.com", name="Ravi Kumar"))
    d.add(make_user(201, Role.MANAGER, balance=30, email="parul@email.com", password="manager1", name="Parul Rana"))
    d.add(make_user(301, Role.ADMIN, balance=30, email="admin@email.com", password="admin2050", name="Dr. Swati Gupta"))
    return d


@pytest.fixture
def requests_repo():
    return InMemoryLeaveRepository(id_base=1000)


@pytest.fixture
def ledger(requests_repo, directory, clock):
    return LeaveLedger(requests_repo, directory, clock=clock)
