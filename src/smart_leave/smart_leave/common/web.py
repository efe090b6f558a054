from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError, ExportError, NotFoundError, ValidationError
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "AuthenticationError", "message": "Please log in first"}), 401
        return view(*args, **kwargs)

    return wrapper


def role_required(*roles: Role):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"error": "AuthenticationError", "message": "Please log in first"}), 401
            if session.get("role") not in allowed:
                return jsonify({"error": "AuthorizationError", "message": "Permission denied"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


def current_user_id() -> int:
    return int(session["user_id"])


def payload() -> dict:
    return request.get_json(silent=True) or request.form.to_dict()


def date_field(data: dict, name: str):
    try:
        return parse_iso_date(str(data.get(name) or ""))
    except ValueError:
        raise ValidationError(f"{name} must be a YYYY-MM-DD date")


def csv_response(app: Flask, content: str, filename: str):
    return app.response_class(
        content.encode("utf-8-sig"),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def register_error_handlers(app: Flask) -> None:
    def _body(e: Exception) -> dict:
        return {"error": type(e).__name__, "message": str(e)}

    @app.errorhandler(DomainError)
    def domain_error(e: DomainError):
        if isinstance(e, NotFoundError):
            status = 404
        elif isinstance(e, AuthenticationError):
            status = 401
        elif isinstance(e, AuthorizationError):
            status = 403
        else:
            status = 400
        return jsonify(_body(e)), status

    @app.errorhandler(ExportError)
    def export_error(e: ExportError):
        logger.exception("export failed")
        return jsonify(_body(e)), 500
