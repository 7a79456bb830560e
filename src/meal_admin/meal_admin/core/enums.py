from __future__ import annotations

from enum import Enum, IntEnum


class Role(str, Enum):
    """Vai trò nhân viên do backend trả về; chỉ ADMIN được vào dashboard."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class MealMode(str, Enum):
    """Chế độ suất ăn mà nhân viên yêu cầu cho các ngày trong tháng."""

    ON = "ON"
    OFF = "OFF"
    AUTO_ON = "AUTO_ON"
    AUTO_OFF = "AUTO_OFF"


class MealStatus(IntEnum):
    """Trạng thái suất ăn đã duyệt của một ngày (lưu trong meal-month)."""

    OFF = 0
    ON = 1


class ActionState(str, Enum):
    """Trạng thái thao tác duyệt/từ chối của từng yêu cầu trên dashboard."""

    PENDING = "pending"
    APPROVING = "approving"
    REJECTING = "rejecting"
    FAILED = "failed"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self == Theme.LIGHT else Theme.LIGHT
