from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from ..core.enums import Role


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class Employee:
    """Thực thể nhân viên do backend trả về.

    Lưu ý: Đây là đối tượng dữ liệu thuần; client chỉ đọc, không sửa.
    """

    id: int
    uid: str
    name: str
    email: str
    phone: str
    pin: int
    department: str
    role: str
    image_url: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    @property
    def initial(self) -> str:
        return (self.name or "U")[:1].upper()

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        return cls(
            id=_to_int(data.get("id")),
            uid=str(data.get("uid") or ""),
            name=data.get("name") or "",
            email=data.get("email") or "",
            phone=data.get("phone") or "",
            pin=_to_int(data.get("pin")),
            department=data.get("department") or "",
            role=data.get("role") or "",
            image_url=data.get("image_url") or None,
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        if data["image_url"] is None:
            del data["image_url"]
        return data
