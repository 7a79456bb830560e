from __future__ import annotations

from typing import Protocol, Sequence

from ..employees.model import Employee
from ..meal_requests.model import MealRequest
from ..meals.model import MealMonth
from ..users.model import LoginResult


class MealAdminApi(Protocol):
    """Everything the dashboard needs from the meal-management backend.

    Implementations raise NotAuthenticatedError (no token, no network call)
    or ApiError (backend rejection, transport or parse failure).
    """

    # Auth
    def login(self, email: str, password: str) -> LoginResult:
        raise NotImplementedError

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
        raise NotImplementedError

    # Meal requests
    def get_pending_requests(self) -> Sequence[MealRequest]:
        raise NotImplementedError

    def approve_request(self, request_id: str) -> None:
        raise NotImplementedError

    def reject_request(self, request_id: str, reason: str = "") -> None:
        raise NotImplementedError

    # Employees
    def get_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_employee_by_uid(self, uid: str) -> Employee:
        raise NotImplementedError

    def get_employee_meal_month(self, uid: str, year: int, month: int) -> MealMonth:
        raise NotImplementedError
