import uuid
from datetime import datetime
from enum import Enum as PyEnum
from typing import Dict, Optional, Type, TypeVar

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from inventory.domains.common.exceptions import InvalidEnumValueError

NAME_MAX_LENGTH = 100
CREATED_AT_FORMAT = "%Y-%m-%d %H:%M"

E = TypeVar("E", bound=PyEnum)


def resolve_variant(enum_cls: Type[E], text: Optional[str], default: E) -> E:
    """依名稱或顯示名稱（不分大小寫）解析列舉值

    空白輸入回傳預設值；依宣告順序比對，第一個符合者勝出。
    """
    if text is None or not text.strip():
        return default

    candidate = text.strip().lower()
    for variant in enum_cls:
        if (
            variant.name.lower() == candidate
            or variant.display_name.lower() == candidate
        ):
            return variant
    raise InvalidEnumValueError(text, enum_cls.__name__)


# --- Enum Definitions ---
class DeviceType(str, PyEnum):
    LAPTOP = "LAPTOP"
    SERVER = "SERVER"
    PRINTER = "PRINTER"
    NETWORK_SWITCH = "NETWORK_SWITCH"
    ROUTER = "ROUTER"
    OTHER = "OTHER"

    @property
    def display_name(self) -> str:
        return _DEVICE_TYPE_LABELS[self]

    @classmethod
    def from_input(cls, text: Optional[str]) -> "DeviceType":
        """例如 "laptop"、"LAPTOP"、"Laptop" 皆解析為 LAPTOP"""
        return resolve_variant(cls, text, cls.OTHER)


class DeviceStatus(str, PyEnum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    MAINTENANCE = "MAINTENANCE"

    @property
    def display_name(self) -> str:
        return _DEVICE_STATUS_LABELS[self]

    @classmethod
    def from_input(cls, text: Optional[str]) -> "DeviceStatus":
        return resolve_variant(cls, text, cls.ACTIVE)


# 顯示名稱僅供呈現，不寫入資料庫
_DEVICE_TYPE_LABELS: Dict[DeviceType, str] = {
    DeviceType.LAPTOP: "Laptop",
    DeviceType.SERVER: "Server",
    DeviceType.PRINTER: "Printer",
    DeviceType.NETWORK_SWITCH: "Network Switch",
    DeviceType.ROUTER: "Router",
    DeviceType.OTHER: "Other",
}

_DEVICE_STATUS_LABELS: Dict[DeviceStatus, str] = {
    DeviceStatus.ACTIVE: "Active",
    DeviceStatus.INACTIVE: "Inactive",
    DeviceStatus.MAINTENANCE: "Maintenance",
}


# --- SQLModel Definitions ---
class DeviceBase(SQLModel):
    """設備基礎模型，定義設備的共同屬性"""

    name: str = Field(max_length=NAME_MAX_LENGTH, index=True)
    # 以列舉名稱 (例如 "NETWORK_SWITCH") 儲存為 VARCHAR
    type: DeviceType = Field(sa_type=sa.Enum(DeviceType, native_enum=False, length=50))
    status: DeviceStatus = Field(
        sa_type=sa.Enum(DeviceStatus, native_enum=False, length=50)
    )
    ip_address: Optional[str] = None
    location: Optional[str] = None


class Device(DeviceBase, table=True):
    """設備實體模型，對應資料庫中的 devices 表

    新建時只需提供 name、type、status、ip_address、location；
    id 與 created_at 由資料庫在寫入時產生。
    """

    __tablename__ = "devices"

    id: Optional[uuid.UUID] = Field(
        default=None,
        primary_key=True,
        sa_column_kwargs={"default": uuid.uuid4},
    )
    created_at: Optional[datetime] = Field(
        default=None,
        sa_type=sa.DateTime(),
        sa_column_kwargs={"server_default": sa.func.now(), "nullable": False},
    )

    @property
    def formatted_created_at(self) -> str:
        """供顯示用的建立時間"""
        if self.created_at is None:
            return "—"
        return self.created_at.strftime(CREATED_AT_FORMAT)
