from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.datetime_utils import format_login
from ..common.web import current_user_id, login_required, payload
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = payload()
        try:
            role = Role(str(data.get("role", Role.EMPLOYEE.value)).lower())
        except ValueError:
            raise ValidationError("Unknown role")

        s_user = container.auth_service.authenticate(
            str(data.get("email", "")), str(data.get("password", "")), role
        )
        session.clear()
        session["user_id"] = s_user.user_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value
        logger.info("user %s logged in via web as %s", s_user.user_id, s_user.role.value)
        return jsonify({"user_id": s_user.user_id, "name": s_user.full_name, "role": s_user.role.value})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        user = container.user_service.get(current_user_id())
        return jsonify(
            {
                "user_id": user.user_id,
                "name": user.full_name,
                "email": user.email,
                "role": user.role.value,
                "leave_balance": user.leave_balance,
                "total_leaves_allowed": user.total_leaves_allowed,
                "leaves_used": user.leaves_used,
                "badges": user.badges,
                "last_login": format_login(user.last_login),
            }
        )
