"""
HTTP implementation of MealAdminApi on top of `requests`.
"""

from __future__ import annotations

from typing import Any, Callable, Optional
from urllib.parse import quote

import requests

from ..common.logger import get_logger
from ..core.constants import DEFAULT_REQUEST_TIMEOUT
from ..core.enums import Role
from ..core.exceptions import ApiError, NotAuthenticatedError
from ..employees.model import Employee
from ..meal_requests.model import MealRequest
from ..meals.model import MealMonth
from ..users.model import LoginResult
from .base import MealAdminApi

logger = get_logger(__name__)

TokenProvider = Callable[[], Optional[str]]


class HttpMealAdminApi(MealAdminApi):
    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider,
        *,
        http: Optional[requests.Session] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        self._base_url = base_url.rstrip("/")
        self._token_provider = token_provider
        self._http = http or requests.Session()
        self._timeout = timeout

    def _auth_headers(self) -> dict:
        token = self._token_provider()
        if not token:
            raise NotAuthenticatedError("Not authenticated")
        return {"Authorization": f"Bearer {token}"}

    def _call(
        self,
        method: str,
        path: str,
        *,
        default_error: str,
        authenticated: bool = True,
        payload: Optional[dict] = None,
        expect_body: bool = True,
    ) -> Any:
        headers = {"Accept": "application/json"}
        if authenticated:
            # Raises before any network I/O when there is no token
            headers.update(self._auth_headers())

        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, path)
        try:
            if payload is not None:
                resp = self._http.request(method, url, json=payload, headers=headers, timeout=self._timeout)
            else:
                resp = self._http.request(method, url, headers=headers, timeout=self._timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(default_error)

        if not resp.ok:
            message = default_error
            try:
                body = resp.json()
                if isinstance(body, dict) and body.get("error"):
                    message = str(body["error"])
            except ValueError:
                pass
            logger.warning("%s %s -> %s: %s", method, path, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code)

        if not expect_body:
            return None

        try:
            data = resp.json()
        except ValueError:
            logger.warning("%s %s returned a non-JSON body", method, path)
            raise ApiError(default_error, status_code=resp.status_code)
        if not isinstance(data, dict):
            raise ApiError(default_error, status_code=resp.status_code)
        return data

    def login(self, email: str, password: str) -> LoginResult:
        data = self._call(
            "POST",
            "/auth/login",
            default_error="Login failed",
            authenticated=False,
            payload={"email": email, "password": password},
        )
        return LoginResult.from_dict(data)

    def register_admin(
        self,
        *,
        name: str,
        email: str,
        password: str,
        phone: str,
        pin: int,
        department: str,
    ) -> LoginResult:
        data = self._call(
            "POST",
            "/auth/signup",
            default_error="Registration failed",
            authenticated=False,
            payload={
                "name": name,
                "email": email,
                "password": password,
                "phone": phone,
                "pin": int(pin),
                "department": department,
                "role": Role.ADMIN.value,
            },
        )
        return LoginResult.from_dict(data)

    def get_pending_requests(self) -> list[MealRequest]:
        data = self._call("GET", "/admin/meal-requests/pending", default_error="Failed to fetch requests")
        return [MealRequest.from_dict(r) for r in data.get("requests") or []]

    def approve_request(self, request_id: str) -> None:
        self._call(
            "POST",
            f"/admin/meal-requests/{quote(str(request_id), safe='')}/approve",
            default_error="Failed to approve request",
            expect_body=False,
        )

    def reject_request(self, request_id: str, reason: str = "") -> None:
        self._call(
            "POST",
            f"/admin/meal-requests/{quote(str(request_id), safe='')}/reject",
            default_error="Failed to reject request",
            payload={"reason": reason or ""},
            expect_body=False,
        )

    def get_employees(self) -> list[Employee]:
        data = self._call("GET", "/employees", default_error="Failed to fetch employees")
        return [Employee.from_dict(e) for e in data.get("employees") or []]

    def get_employee_by_uid(self, uid: str) -> Employee:
        data = self._call("GET", f"/employees/{quote(str(uid), safe='')}", default_error="Failed to fetch employee")
        employee = data.get("employee")
        if not isinstance(employee, dict):
            raise ApiError("Failed to fetch employee")
        return Employee.from_dict(employee)

    def get_employee_meal_month(self, uid: str, year: int, month: int) -> MealMonth:
        data = self._call(
            "GET",
            f"/admin/employees/{quote(str(uid), safe='')}/meals/{int(year)}/{int(month)}",
            default_error="Failed to fetch meal data",
        )
        meal_month = data.get("meal_month")
        if meal_month is None:
            return MealMonth.from_dict(None)
        if not isinstance(meal_month, dict) or not isinstance(meal_month.get("days") or {}, dict):
            logger.warning("Unexpected meal_month payload for %s %04d-%02d", uid, int(year), int(month))
            raise ApiError("Failed to fetch meal data")
        return MealMonth.from_dict(meal_month)
