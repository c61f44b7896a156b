"""Year-month helpers ('YYYY-MM' strings) used for dues schedules."""

from __future__ import annotations

from datetime import date


def ym_now(today: date | None = None) -> str:
    """Current year-month as 'YYYY-MM'."""
    d = today or date.today()
    return f"{d.year}-{d.month:02d}"


def ym_to_index(ym: str | None) -> int:
    """Month index (year * 12 + month - 1); 0 when the value does not parse."""
    parts = str(ym or "").split("-")
    if len(parts) < 2:
        return 0
    try:
        year, month = int(parts[0]), int(parts[1])
    except ValueError:
        return 0
    return year * 12 + (month - 1)


def months_between_inclusive(start_ym: str | None, end_ym: str | None) -> int:
    return max(0, ym_to_index(end_ym) - ym_to_index(start_ym) + 1)
