from __future__ import annotations

from datetime import date, datetime

from ..core.constants import EXPORT_TIMESTAMP_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def days_inclusive(start: date, end: date) -> int:
    return (end - start).days + 1


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def timestamp_for_file(moment: datetime) -> str:
    return moment.strftime(EXPORT_TIMESTAMP_FORMAT)


def format_login(value) -> str:
    if value is None:
        return "Never"
    return value.replace(microsecond=0).strftime("%Y-%m-%d %H:%M:%S")
