from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class MealMonth:
    """Sparse day -> status record for one employee and month.

    Keys are day numbers as strings ("1".."31"); absent days mean "no data",
    which is not the same as OFF. Values are kept exactly as received.
    """

    employee_id: str
    year: int
    month: int
    days: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "MealMonth":
        data = data or {}
        days = data.get("days") or {}
        return cls(
            employee_id=str(data.get("employee_id") or ""),
            year=int(data.get("year") or 0),
            month=int(data.get("month") or 0),
            days={str(k): v for k, v in days.items()},
        )

    @classmethod
    def empty(cls, *, employee_id: str, year: int, month: int) -> "MealMonth":
        return cls(employee_id=employee_id, year=year, month=month, days={})
