from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from .model import Employee


def directory_to_excel(employees: Sequence[Employee]) -> io.BytesIO:
    """Write the (already filtered) directory to an in-memory .xlsx workbook."""
    data = []
    for e in employees:
        data.append(
            {
                "ID": e.id,
                "UID": e.uid,
                "Name": e.name,
                "Email": e.email,
                "Phone": e.phone,
                "Department": e.department,
                "Role": e.role,
            }
        )

    df = pd.DataFrame(data, columns=["ID", "UID", "Name", "Email", "Phone", "Department", "Role"])

    # Ghi vào file Excel trong bộ nhớ (không lưu ra ổ cứng)
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Employees")

    output.seek(0)
    return output
