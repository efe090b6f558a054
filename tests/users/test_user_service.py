from __future__ import annotations

import pytest

from src.smart_leave.smart_leave.core.enums import Role
from src.smart_leave.smart_leave.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from src.smart_leave.smart_leave.users.service import AuthService, UserService


def test_authenticate_returns_session_user(directory):
    s_user = AuthService(directory).authenticate("parul@email.com", "manager1", Role.MANAGER)

    assert s_user.user_id == 201
    assert s_user.full_name == "Parul Rana"
    assert s_user.role == Role.MANAGER


def test_authenticate_failure_names_the_role(directory):
    with pytest.raises(AuthenticationError) as exc:
        AuthService(directory).authenticate("parul@email.com", "manager1", Role.ADMIN)
    assert "No such Admin" in str(exc.value)


def test_register_assigns_next_id_and_full_allowance(directory):
    svc = UserService(directory, leaves_per_year=30)

    user = svc.register(full_name="  Asha Rao ", email="asha@email.com", password="secret1", role=Role.EMPLOYEE)

    assert user.user_id == 302
    assert user.full_name == "Asha Rao"
    assert user.leave_balance == 30
    assert user.password_hash != "secret1"
    assert directory.find_by_credentials("asha@email.com", "secret1", Role.EMPLOYEE) is not None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"full_name": "", "email": "a@email.com", "password": "secret1"},
        {"full_name": "A", "email": "not-an-email", "password": "secret1"},
        {"full_name": "A", "email": "a@email.com", "password": "123"},
        {"full_name": "A", "email": "ravi@email.com", "password": "secret1"},
        {"full_name": "A", "email": "a@email.com", "password": "secret1", "leave_balance": 40},
    ],
)
def test_register_validation(directory, kwargs):
    with pytest.raises(ValidationError):
        UserService(directory).register(role=Role.EMPLOYEE, **kwargs)


def test_get_unknown_user(directory):
    with pytest.raises(NotFoundError):
        UserService(directory).get(999)
