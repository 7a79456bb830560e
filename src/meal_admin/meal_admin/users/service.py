from __future__ import annotations

from typing import Optional

from ..api.base import MealAdminApi
from ..common.logger import get_logger
from ..common.validators import require_email, require_int, require_min_length, require_non_empty
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.model import Employee
from ..session.store import SessionStore
from .model import LoginResult

logger = get_logger(__name__)


class AuthService:
    """Use case: log an administrator in/out and keep the session."""

    def __init__(self, api: MealAdminApi, sessions: SessionStore):
        self._api = api
        self._sessions = sessions

    def _start_session(self, result: LoginResult) -> Employee:
        if not result.token:
            raise ValidationError("Login failed")
        if not result.employee.is_admin:
            logger.warning("Refused dashboard login for non-admin %s", result.employee.email)
            raise AuthorizationError("Access denied. Admin privileges required.")

        self._sessions.save(result.token)
        self._sessions.save_user(result.employee)
        logger.info("Admin %s logged in", result.employee.email)
        return result.employee

    def login(self, email: str, password: str) -> Employee:
        email = require_non_empty(email, "Email")
        password = require_non_empty(password, "Password")
        return self._start_session(self._api.login(email, password))

    def register_admin(
        self,
        *,
        name: str,
        email: str,
        password: str,
        confirm_password: Optional[str] = None,
        phone: str,
        pin,
        department: str,
    ) -> Employee:
        name = require_non_empty(name, "Name")
        email = require_email(email)
        require_min_length(password, "Password", 6)
        if confirm_password is not None and confirm_password != password:
            raise ValidationError("Passwords do not match")
        phone = require_non_empty(phone, "Phone")
        pin_value = require_int(pin, "PIN")
        department = require_non_empty(department, "Department")

        result = self._api.register_admin(
            name=name,
            email=email,
            password=password,
            phone=phone,
            pin=pin_value,
            department=department,
        )
        return self._start_session(result)

    def logout(self) -> None:
        user = self._sessions.read_user()
        self._sessions.clear()
        if user:
            logger.info("Admin %s logged out", user.email)

    def current_admin(self) -> Optional[Employee]:
        user = self._sessions.read_user()
        if not user or not user.is_admin:
            return None
        return user
