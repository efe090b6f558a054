from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value or ""))


def require_valid_email(value: str) -> str:
    value = (value or "").strip()
    if not is_valid_email(value):
        raise ValidationError("Invalid email")
    return value


def try_parse_date(value: str) -> Optional[date]:
    try:
        return parse_iso_date((value or "").strip())
    except ValueError:
        return None


def is_int(value: str) -> bool:
    try:
        int((value or "").strip())
    except ValueError:
        return False
    return True
