from __future__ import annotations

from datetime import date, datetime


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now().date()


def parse_month_args(year_raw, month_raw, *, today: date) -> tuple[int, int]:
    """Parse ?year=&month= query values, falling back to today's month."""
    try:
        year = int(year_raw)
        month = int(month_raw)
    except (TypeError, ValueError):
        return today.year, today.month
    if not 1 <= month <= 12 or not 1900 <= year <= 9999:
        return today.year, today.month
    return year, month


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1
