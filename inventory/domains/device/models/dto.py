import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, computed_field, field_validator

from .device_model import DeviceStatus, DeviceType


class DeviceCreate(BaseModel):
    """創建設備的資料傳輸對象

    type 與 status 接受列舉名稱或顯示名稱（不分大小寫），空白時使用預設值。
    name 的長度等規則由服務層檢查。
    """

    name: str
    type: DeviceType = DeviceType.OTHER
    status: DeviceStatus = DeviceStatus.ACTIVE
    ip_address: Optional[str] = None
    location: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return DeviceType.from_input(value)
        return value

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return DeviceStatus.from_input(value)
        return value


class DeviceUpdate(BaseModel):
    """更新設備的資料傳輸對象

    只有明確設定的欄位 (model_fields_set) 會被套用，未設定代表「不變更」。
    ip_address / location 設為空白或 None 代表清除；
    name、type、status 為必填欄位，設為空白或 None 同樣視為不變更。
    """

    name: Optional[str] = None
    type: Optional[DeviceType] = None
    status: Optional[DeviceStatus] = None
    ip_address: Optional[str] = None
    location: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return DeviceType.from_input(value) if value.strip() else None
        return value

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return DeviceStatus.from_input(value) if value.strip() else None
        return value


class DeviceResponse(BaseModel):
    """設備響應的資料傳輸對象"""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    type: DeviceType
    status: DeviceStatus
    ip_address: Optional[str] = None
    location: Optional[str] = None
    created_at: datetime

    @computed_field
    @property
    def type_display(self) -> str:
        return self.type.display_name

    @computed_field
    @property
    def status_display(self) -> str:
        return self.status.display_name
