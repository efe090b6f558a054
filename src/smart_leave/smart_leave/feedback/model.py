from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class HRFeedback:
    # name is a snapshot taken at submission time, not a user reference
    employee_name: str
    message: str
    created_at: datetime
