from __future__ import annotations

from dataclasses import dataclass

from ..employees.model import Employee


@dataclass(frozen=True)
class LoginResult:
    """Payload of /auth/login and /auth/signup."""

    token: str
    employee: Employee

    @classmethod
    def from_dict(cls, data: dict) -> "LoginResult":
        return cls(
            token=str(data.get("token") or ""),
            employee=Employee.from_dict(data.get("employee") or {}),
        )
