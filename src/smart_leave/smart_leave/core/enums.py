from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role, used for menu dispatch and authorization."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    ADMIN = "admin"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class RequestStatus(str, Enum):
    """Leave request approval state."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ExportFormat(str, Enum):
    CSV = "csv"
    TXT = "txt"
