from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.constants import ALL_DEPARTMENTS
from .model import Employee


def filter_employees(
    employees: Sequence[Employee],
    department: Optional[str] = ALL_DEPARTMENTS,
    query: str = "",
) -> list[Employee]:
    """Department equality AND case-insensitive name/email substring; input order kept."""
    needle = (query or "").lower()
    any_department = not department or department == ALL_DEPARTMENTS

    out = []
    for e in employees:
        if not any_department and e.department != department:
            continue
        if needle and needle not in e.name.lower() and needle not in e.email.lower():
            continue
        out.append(e)
    return out


def department_counts(employees: Iterable[Employee]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for e in employees:
        counts[e.department] = counts.get(e.department, 0) + 1
    return counts


def top_department(counts: dict[str, int]) -> Optional[tuple[str, int]]:
    if not counts:
        return None
    # First department wins on ties
    return max(counts.items(), key=lambda item: item[1])
