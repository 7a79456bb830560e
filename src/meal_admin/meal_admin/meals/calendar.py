from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..core.constants import FIRST_CALENDAR_YEAR
from ..core.enums import MealStatus


@dataclass(frozen=True)
class MealStats:
    days_in_month: int
    meals_on: int
    meals_off: int
    meals_till_today: int
    is_current_month: bool


@dataclass(frozen=True)
class DayCell:
    day: int
    status: Optional[Any]
    is_today: bool
    is_past: bool

    @property
    def tone(self) -> str:
        if self.status == MealStatus.ON:
            return "on"
        if self.status == MealStatus.OFF:
            return "off"
        return "none"

    @property
    def label(self) -> str:
        if self.status is None:
            return ""
        return "ON" if self.status == MealStatus.ON else "OFF"


@dataclass(frozen=True)
class MonthCalendar:
    year: int
    month: int
    leading_blanks: int
    cells: list[DayCell]

    @property
    def weeks(self) -> list[list[Optional[DayCell]]]:
        """Rows of 7 slots, Sunday first; None for blanks before day 1 and after the last day."""
        slots: list[Optional[DayCell]] = [None] * self.leading_blanks + list(self.cells)
        if len(slots) % 7:
            slots += [None] * (7 - len(slots) % 7)
        return [slots[i : i + 7] for i in range(0, len(slots), 7)]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of day 1, 0 = Sunday."""
    return (date(year, month, 1).weekday() + 1) % 7


def is_current_month(year: int, month: int, today: date) -> bool:
    return year == today.year and month == today.month


def compute_stats(days: Mapping[str, Any], year: int, month: int, today: date) -> MealStats:
    """ON/OFF counts over the sparse map plus ON days up to today (whole month otherwise)."""
    total_days = days_in_month(year, month)
    values = list(days.values())
    meals_on = sum(1 for v in values if v == MealStatus.ON)
    meals_off = sum(1 for v in values if v == MealStatus.OFF)

    current = is_current_month(year, month, today)
    last_day = today.day if current else total_days
    meals_till_today = sum(1 for d in range(1, last_day + 1) if days.get(str(d)) == MealStatus.ON)

    return MealStats(
        days_in_month=total_days,
        meals_on=meals_on,
        meals_off=meals_off,
        meals_till_today=meals_till_today,
        is_current_month=current,
    )


def build_calendar(days: Mapping[str, Any], year: int, month: int, today: date) -> MonthCalendar:
    current = is_current_month(year, month, today)
    month_in_past = (year, month) < (today.year, today.month)

    cells = []
    for d in range(1, days_in_month(year, month) + 1):
        cells.append(
            DayCell(
                day=d,
                status=days.get(str(d)),
                is_today=current and d == today.day,
                is_past=month_in_past or (current and d < today.day),
            )
        )
    return MonthCalendar(year=year, month=month, leading_blanks=first_weekday(year, month), cells=cells)


def year_options(today: date, selected: Optional[int] = None) -> list[int]:
    years = list(range(FIRST_CALENDAR_YEAR, max(today.year, FIRST_CALENDAR_YEAR) + 1))
    if selected is not None and selected not in years:
        years.append(selected)
        years.sort()
    return years
