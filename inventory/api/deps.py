from inventory.db.base import async_session_maker
from inventory.domains.device.adapters.sqlmodel_device_repository import (
    SQLModelDeviceRepository,
)
from inventory.domains.device.services.device_service import DeviceService


def get_device_service() -> DeviceService:
    """獲取設備服務實例，用於依賴注入"""
    repository = SQLModelDeviceRepository(session_factory=async_session_maker)
    return DeviceService(device_repository=repository)
