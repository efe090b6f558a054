from __future__ import annotations

from typing import Callable, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..users.repository import UserDirectory
from .model import HRFeedback
from .repository import FeedbackRepository


class FeedbackService:
    """Use case: employees leave feedback for HR and earn a badge for it."""

    def __init__(self, feedback: FeedbackRepository, users: UserDirectory, *, clock: Callable = now_local):
        self._feedback = feedback
        self._users = users
        self._clock = clock

    def submit(self, *, employee_id: int, message: str) -> HRFeedback:
        message = require_non_empty(message, "Feedback")
        user = self._users.find_by_id(employee_id)
        if not user:
            raise NotFoundError(f"User {employee_id} not found")

        item = self._feedback.append(
            HRFeedback(employee_name=user.full_name, message=message, created_at=self._clock())
        )
        self._users.add_badges(user.user_id, 1)
        return item

    def list_all(self) -> Sequence[HRFeedback]:
        return self._feedback.list_all()
