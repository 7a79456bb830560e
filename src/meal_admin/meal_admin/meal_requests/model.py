from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ActionState


@dataclass(frozen=True)
class MealRequest:
    """One pending change to an employee's meal subscription for a month."""

    id: str
    uid: str
    employee_id: str
    year: int
    month: int
    days: tuple[int, ...]
    mode: str
    status: str
    requested_at: str
    employee_name: Optional[str] = None
    employee_department: Optional[str] = None
    employee_image_url: Optional[str] = None

    @property
    def sorted_days(self) -> list[int]:
        return sorted(self.days)

    @classmethod
    def from_dict(cls, data: dict) -> "MealRequest":
        return cls(
            id=str(data.get("id") or ""),
            uid=str(data.get("uid") or ""),
            employee_id=str(data.get("employee_id") or ""),
            year=int(data.get("year") or 0),
            month=int(data.get("month") or 0),
            days=tuple(int(d) for d in (data.get("days") or [])),
            mode=str(data.get("mode") or ""),
            status=str(data.get("status") or ""),
            requested_at=str(data.get("requested_at") or ""),
            employee_name=data.get("employee_name") or None,
            employee_department=data.get("employee_department") or None,
            employee_image_url=data.get("employee_image_url") or None,
        )


@dataclass(frozen=True)
class ActionStatus:
    """Per-request action state: pending | approving | rejecting | failed(reason)."""

    state: ActionState = ActionState.PENDING
    reason: Optional[str] = None

    @property
    def in_flight(self) -> bool:
        return self.state in (ActionState.APPROVING, ActionState.REJECTING)

    @classmethod
    def pending(cls) -> "ActionStatus":
        return cls(ActionState.PENDING)

    @classmethod
    def approving(cls) -> "ActionStatus":
        return cls(ActionState.APPROVING)

    @classmethod
    def rejecting(cls) -> "ActionStatus":
        return cls(ActionState.REJECTING)

    @classmethod
    def failed(cls, reason: str) -> "ActionStatus":
        return cls(ActionState.FAILED, reason)
