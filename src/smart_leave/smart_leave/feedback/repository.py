from __future__ import annotations

from typing import Protocol, Sequence

from .model import HRFeedback


class FeedbackRepository(Protocol):
    def append(self, feedback: HRFeedback) -> HRFeedback:
        raise NotImplementedError

    def list_all(self) -> Sequence[HRFeedback]:
        raise NotImplementedError


class InMemoryFeedbackRepository(FeedbackRepository):
    """Append-only feedback log."""

    def __init__(self):
        self._items: list[HRFeedback] = []

    def append(self, feedback: HRFeedback) -> HRFeedback:
        self._items.append(feedback)
        return feedback

    def list_all(self) -> Sequence[HRFeedback]:
        return list(self._items)
