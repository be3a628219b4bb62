from __future__ import annotations

import re
from datetime import date, datetime

from ..core.exceptions import ValidationError

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def parse_iso_date(value: str) -> date:
    """Parse an ISO-8601 date (YYYY-MM-DD, optionally followed by a time part)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise ValidationError("Ngày không hợp lệ")
    try:
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()
    except ValueError as e:
        raise ValidationError(f"Ngày không hợp lệ: {value}") from e


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    m = _MONTH_RE.match((value or "").strip())
    if not m:
        raise ValidationError(f"Tháng không hợp lệ: {value}")
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise ValidationError(f"Tháng không hợp lệ: {value}")
    return year, month


def format_month(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def current_month() -> str:
    now = now_local()
    return format_month(now.year, now.month)
