import logging
import re
import uuid
from typing import List, Optional

from inventory.domains.common.exceptions import (
    DeviceNotFoundError,
    InvalidArgumentError,
)
from inventory.domains.device.interfaces.device_repository import DeviceRepository
from inventory.domains.device.models.device_model import (
    NAME_MAX_LENGTH,
    Device,
    DeviceStatus,
    DeviceType,
)
from inventory.domains.device.models.dto import DeviceUpdate

logger = logging.getLogger(__name__)

_UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _none_if_blank(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


class DeviceService:
    """設備服務層，實現設備相關的業務邏輯

    輸入驗證與業務規則只存在於這一層；存儲庫不做任何驗證。
    呈現層不應直接呼叫存儲庫。
    """

    def __init__(self, device_repository: DeviceRepository):
        self.device_repository = device_repository

    # --- Read operations ---

    async def get_all_devices(self) -> List[Device]:
        return await self.device_repository.find_all()

    async def find_by_id(self, raw_id: Optional[str]) -> Optional[Device]:
        """根據 ID 字串獲取設備，不存在時返回 None"""
        device_id = self.parse_device_id(raw_id)
        return await self.device_repository.find_by_id(device_id)

    async def filter_by_type(self, device_type: DeviceType) -> List[Device]:
        return await self.device_repository.find_by_type(device_type)

    async def filter_by_status(self, status: DeviceStatus) -> List[Device]:
        return await self.device_repository.find_by_status(status)

    async def search(self, keyword: Optional[str]) -> List[Device]:
        if keyword is None or not keyword.strip():
            logger.warning("Rejected search with an empty keyword.")
            raise InvalidArgumentError("Search keyword must not be empty.")
        return await self.device_repository.search(keyword.strip())

    # --- Write operations ---

    async def add_device(
        self,
        name: Optional[str],
        device_type: DeviceType,
        status: DeviceStatus,
        ip_address: Optional[str] = None,
        location: Optional[str] = None,
    ) -> Device:
        """驗證輸入並新增設備

        Args:
            name: 必填，去除空白後 1-100 個字元
            device_type: 設備類型
            status: 設備狀態
            ip_address: 選填，空白視為未記錄
            location: 選填，空白視為未記錄

        Returns:
            已寫入的設備，id 與 created_at 皆已設定
        """
        self._validate_name(name)

        device = Device(
            name=name.strip(),
            type=device_type,
            status=status,
            ip_address=_none_if_blank(ip_address),
            location=_none_if_blank(location),
        )
        return await self.device_repository.save(device)

    async def update_device(
        self, raw_id: Optional[str], device_data: DeviceUpdate
    ) -> Device:
        """部分更新設備，只套用 device_data 中明確設定的欄位"""
        device_id = self.parse_device_id(raw_id)
        existing = await self.device_repository.find_by_id(device_id)
        if existing is None:
            logger.warning(f"Device with ID {device_id} not found for update.")
            raise DeviceNotFoundError(device_id)

        changes = device_data.model_dump(exclude_unset=True)

        # 名稱不可清除：空白視為不變更
        name = changes.get("name")
        if name is not None and name.strip():
            self._validate_name(name)
            existing.name = name.strip()
        if changes.get("type") is not None:
            existing.type = changes["type"]
        if changes.get("status") is not None:
            existing.status = changes["status"]
        if "ip_address" in changes:
            existing.ip_address = _none_if_blank(changes["ip_address"])
        if "location" in changes:
            existing.location = _none_if_blank(changes["location"])

        return await self.device_repository.update(existing)

    async def remove_device(self, raw_id: Optional[str]) -> bool:
        """刪除設備，返回是否確實刪除；找不到設備不視為錯誤"""
        device_id = self.parse_device_id(raw_id)
        return await self.device_repository.delete(device_id)

    # --- Helpers ---

    @staticmethod
    def parse_device_id(raw_id: Optional[str]) -> uuid.UUID:
        """將標準格式 (8-4-4-4-12) 的 UUID 字串轉為 uuid.UUID"""
        if raw_id is None or not raw_id.strip():
            raise InvalidArgumentError("ID must not be empty.")
        candidate = raw_id.strip()
        if not _UUID_PATTERN.fullmatch(candidate):
            raise InvalidArgumentError(f"'{raw_id}' is not a valid UUID.")
        return uuid.UUID(candidate)

    @staticmethod
    def _validate_name(name: Optional[str]) -> None:
        if name is None or not name.strip():
            logger.warning("Rejected device without a name.")
            raise InvalidArgumentError("Device name is required.")
        if len(name.strip()) > NAME_MAX_LENGTH:
            logger.warning(f"Rejected device name longer than {NAME_MAX_LENGTH}.")
            raise InvalidArgumentError(
                f"Device name must be {NAME_MAX_LENGTH} characters or fewer."
            )
