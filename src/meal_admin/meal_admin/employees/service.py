from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..api.base import MealAdminApi
from ..common.logger import get_logger
from ..core.constants import ALL_DEPARTMENTS
from ..core.exceptions import DomainError, ValidationError
from ..meals.calendar import MealStats, MonthCalendar, build_calendar, compute_stats
from ..meals.model import MealMonth
from .directory import department_counts, filter_employees
from .model import Employee

logger = get_logger(__name__)


@dataclass(frozen=True)
class DirectoryView:
    employees: list[Employee]
    total: int
    department_counts: dict[str, int]
    department: str
    query: str


@dataclass(frozen=True)
class EmployeeMealView:
    employee: Employee
    meal_month: MealMonth
    stats: MealStats
    calendar: MonthCalendar
    meal_error: Optional[str] = None


class EmployeeService:
    """Use case: employee directory and per-employee meal calendar."""

    def __init__(self, api: MealAdminApi):
        self._api = api

    def directory(self, *, department: Optional[str] = None, query: str = "") -> DirectoryView:
        department = department or ALL_DEPARTMENTS
        query = (query or "").strip()
        employees = list(self._api.get_employees())
        return DirectoryView(
            employees=filter_employees(employees, department, query),
            total=len(employees),
            department_counts=department_counts(employees),
            department=department,
            query=query,
        )

    def meal_calendar(self, *, uid: str, year: int, month: int, today: date) -> EmployeeMealView:
        if not uid:
            raise ValidationError("Employee not found")
        employee = self._api.get_employee_by_uid(uid)

        # A missing meal month still renders an empty calendar
        meal_error = None
        try:
            meal_month = self._api.get_employee_meal_month(uid, year, month)
        except DomainError as e:
            logger.warning("Failed to load meal data for %s %04d-%02d: %s", uid, year, month, e)
            meal_month = MealMonth.empty(employee_id=str(employee.id), year=year, month=month)
            meal_error = str(e)

        return EmployeeMealView(
            employee=employee,
            meal_month=meal_month,
            stats=compute_stats(meal_month.days, year, month, today),
            calendar=build_calendar(meal_month.days, year, month, today),
            meal_error=meal_error,
        )
