import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from inventory.domains.device.models.device_model import (
    Device,
    DeviceStatus,
    DeviceType,
)


class DeviceRepository(ABC):
    """設備存儲庫接口，定義對設備數據的操作方法

    每個方法都是對資料庫的單次往返；任何連線或語句錯誤皆以 StorageError 拋出。
    """

    @abstractmethod
    async def find_all(self) -> List[Device]:
        """獲取所有設備，依名稱排序"""
        pass

    @abstractmethod
    async def find_by_id(self, device_id: uuid.UUID) -> Optional[Device]:
        """根據 ID 獲取設備，不存在時返回 None"""
        pass

    @abstractmethod
    async def find_by_type(self, device_type: DeviceType) -> List[Device]:
        """獲取指定類型的設備，依名稱排序"""
        pass

    @abstractmethod
    async def find_by_status(self, status: DeviceStatus) -> List[Device]:
        """獲取指定狀態的設備，依名稱排序"""
        pass

    @abstractmethod
    async def search(self, keyword: str) -> List[Device]:
        """在名稱、IP 位址與位置中搜尋關鍵字（不分大小寫的子字串比對）

        keyword 不可為空，由呼叫端負責檢查。
        """
        pass

    @abstractmethod
    async def save(self, device: Device) -> Device:
        """新增設備，返回帶有資料庫產生之 id 與 created_at 的設備

        呼叫端提供的 id / created_at 會被忽略。
        """
        pass

    @abstractmethod
    async def update(self, device: Device) -> Device:
        """覆寫設備所有可變欄位；找不到 device.id 時拋出 DeviceNotFoundError"""
        pass

    @abstractmethod
    async def delete(self, device_id: uuid.UUID) -> bool:
        """刪除設備，返回是否確實刪除了一筆資料"""
        pass
