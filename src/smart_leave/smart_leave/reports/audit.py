"""Hash-tagged view of the leave ledger.

Display aid only: the digest is recomputed from the current record, so it shows
what a request looks like now, it does not prove what it looked like before.
"""
from __future__ import annotations

import hashlib
from typing import Iterable, Mapping

from ..requests.model import LeaveRequest


def hash_leave(request: LeaveRequest) -> str:
    content = ":".join(
        [
            str(request.request_id),
            str(request.user_id),
            request.start_date.isoformat(),
            request.end_date.isoformat(),
            request.leave_type,
            request.status.value,
        ]
    )
    return hashlib.sha256(content.encode("utf-8")).hexdigest()[:8]


def audit_trail(requests: Iterable[LeaveRequest]) -> list[dict]:
    return [
        {
            "request_id": r.request_id,
            "user_id": r.user_id,
            "status": r.status.value,
            "hash": hash_leave(r),
        }
        for r in requests
    ]


def verify(requests: Iterable[LeaveRequest], expected: Mapping[int, str]) -> list[int]:
    """Return ids whose current hash differs from a previously recorded one.

    Requests missing from ``expected`` are not reported.
    """
    mismatched = []
    for r in requests:
        recorded = expected.get(r.request_id)
        if recorded is not None and recorded != hash_leave(r):
            mismatched.append(r.request_id)
    return mismatched
