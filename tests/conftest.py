from __future__ import annotations

from typing import Optional

import pytest

from src.meal_admin.meal_admin.core.exceptions import ApiError, NotAuthenticatedError
from src.meal_admin.meal_admin.employees.model import Employee
from src.meal_admin.meal_admin.main import create_app
from src.meal_admin.meal_admin.meal_requests.model import MealRequest
from src.meal_admin.meal_admin.meals.model import MealMonth
from src.meal_admin.meal_admin.users.model import LoginResult


def make_employee(
    id: int = 1,
    *,
    uid: Optional[str] = None,
    name: str = "Alice Nguyen",
    email: Optional[str] = None,
    department: str = "Software Engineering",
    role: str = "EMPLOYEE",
    image_url: Optional[str] = None,
) -> Employee:
    return Employee(
        id=id,
        uid=uid or f"uid-{id}",
        name=name,
        email=email or f"{name.split()[0].lower()}@oel.test",
        phone="0900000000",
        pin=1234,
        department=department,
        role=role,
        image_url=image_url,
    )


def make_request(id: str = "r1", *, days=(1, 2, 3), mode: str = "ON", year: int = 2026, month: int = 3) -> MealRequest:
    return MealRequest(
        id=id,
        uid=f"uid-{id}",
        employee_id="1",
        year=year,
        month=month,
        days=tuple(days),
        mode=mode,
        status="PENDING",
        requested_at="2026-02-20T08:00:00Z",
        employee_name="Alice Nguyen",
        employee_department="Software Engineering",
    )


class FakeMealAdminApi:
    """In-memory backend. Set the *_error attributes to make a call fail."""

    def __init__(self, *, requests=None, employees=None, meal_months=None, admin=None):
        self.requests = list(requests or [])
        self.employees = list(employees or [])
        self.meal_months: dict[tuple[str, int, int], MealMonth] = dict(meal_months or {})
        self.admin = admin or make_employee(99, name="Root Admin", email="admin@oel.test", role="ADMIN")
        self.password = "secret123"
        self.token = "token-abc"
        self.authenticated = True

        self.requests_error: Optional[Exception] = None
        self.employees_error: Optional[Exception] = None
        self.action_error: Optional[Exception] = None
        self.meal_error: Optional[Exception] = None

        self.approved: list[str] = []
        self.rejected: list[tuple[str, str]] = []
        self.signups: list[dict] = []

    def _check_auth(self):
        if not self.authenticated:
            raise NotAuthenticatedError("Not authenticated")

    def login(self, email, password):
        if email == self.admin.email and password == self.password:
            return LoginResult(token=self.token, employee=self.admin)
        for e in self.employees:
            if e.email == email and password == self.password:
                return LoginResult(token="token-employee", employee=e)
        raise ApiError("Invalid credentials", status_code=401)

    def register_admin(self, *, name, email, password, phone, pin, department):
        self.signups.append(
            {"name": name, "email": email, "password": password, "phone": phone, "pin": pin, "department": department}
        )
        employee = make_employee(100, name=name, email=email, department=department, role="ADMIN")
        return LoginResult(token="token-new", employee=employee)

    def get_pending_requests(self):
        self._check_auth()
        if self.requests_error:
            raise self.requests_error
        return list(self.requests)

    def approve_request(self, request_id):
        self._check_auth()
        if self.action_error:
            raise self.action_error
        self.approved.append(request_id)
        self.requests = [r for r in self.requests if r.id != request_id]

    def reject_request(self, request_id, reason=""):
        self._check_auth()
        if self.action_error:
            raise self.action_error
        self.rejected.append((request_id, reason))
        self.requests = [r for r in self.requests if r.id != request_id]

    def get_employees(self):
        self._check_auth()
        if self.employees_error:
            raise self.employees_error
        return list(self.employees)

    def get_employee_by_uid(self, uid):
        self._check_auth()
        for e in self.employees:
            if e.uid == uid:
                return e
        raise ApiError("Employee not found", status_code=404)

    def get_employee_meal_month(self, uid, year, month):
        self._check_auth()
        if self.meal_error:
            raise self.meal_error
        return self.meal_months.get((uid, year, month)) or MealMonth(employee_id=uid, year=year, month=month)


@pytest.fixture
def fake_api():
    return FakeMealAdminApi(
        requests=[make_request("r1", days=(3, 1, 2)), make_request("r2", mode="OFF")],
        employees=[
            make_employee(1, name="Alice Nguyen"),
            make_employee(2, name="Bob Tran", department="Finance"),
            make_employee(3, name="Carol Le", department="Software Engineering"),
        ],
    )


@pytest.fixture
def app(fake_api):
    return create_app("config.testing", api=fake_api)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client, fake_api):
    resp = client.post("/login", data={"email": fake_api.admin.email, "password": fake_api.password})
    assert resp.status_code == 302
    return client
