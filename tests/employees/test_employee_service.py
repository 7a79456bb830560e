from datetime import date

import pandas as pd
import pytest
from conftest import FakeMealAdminApi, make_employee

from src.meal_admin.meal_admin.core.exceptions import ApiError
from src.meal_admin.meal_admin.employees.export import directory_to_excel
from src.meal_admin.meal_admin.employees.service import EmployeeService
from src.meal_admin.meal_admin.meals.model import MealMonth


def _api():
    return FakeMealAdminApi(
        employees=[
            make_employee(1, name="Alice Nguyen", department="Finance"),
            make_employee(2, name="Bob Tran", department="Sales"),
            make_employee(3, name="Carol Le", department="Finance"),
        ],
        meal_months={("uid-1", 2026, 4): MealMonth(employee_id="1", year=2026, month=4, days={"1": 1, "2": 0})},
    )


def test_directory_filters_but_counts_everyone():
    view = EmployeeService(_api()).directory(department="Finance", query="carol")

    assert [e.id for e in view.employees] == [3]
    assert view.total == 3
    assert view.department_counts == {"Finance": 2, "Sales": 1}


def test_directory_defaults_to_all_departments():
    view = EmployeeService(_api()).directory()
    assert view.department == "All Departments"
    assert len(view.employees) == 3


def test_meal_calendar_scenario():
    view = EmployeeService(_api()).meal_calendar(uid="uid-1", year=2026, month=4, today=date(2026, 4, 15))

    assert view.employee.name == "Alice Nguyen"
    assert view.stats.days_in_month == 30
    assert (view.stats.meals_on, view.stats.meals_off, view.stats.meals_till_today) == (1, 1, 1)
    assert view.calendar.cells[0].tone == "on"
    assert view.meal_error is None


def test_meal_calendar_renders_empty_when_meal_data_fails():
    api = _api()
    api.meal_error = ApiError("Failed to fetch meal data")

    view = EmployeeService(api).meal_calendar(uid="uid-1", year=2026, month=4, today=date(2026, 4, 15))

    assert view.meal_month.days == {}
    assert view.stats.meals_on == 0
    assert view.meal_error == "Failed to fetch meal data"


def test_unknown_employee_raises():
    with pytest.raises(ApiError, match="Employee not found"):
        EmployeeService(_api()).meal_calendar(uid="nope", year=2026, month=4, today=date(2026, 4, 15))


def test_directory_export_writes_one_row_per_employee():
    view = EmployeeService(_api()).directory(department="Finance")
    output = directory_to_excel(view.employees)

    df = pd.read_excel(output, sheet_name="Employees")
    assert list(df["Name"]) == ["Alice Nguyen", "Carol Le"]
    assert list(df.columns) == ["ID", "UID", "Name", "Email", "Phone", "Department", "Role"]
