"""
領域例外

兩類彼此不相交的錯誤：
- DomainError: 呼叫端輸入錯誤或指定的記錄不存在，修正輸入後可重試
- StorageError: 資料庫連線或語句執行失敗，一律包裝底層例外
"""

from typing import Any, Optional


class InventoryError(Exception):
    """設備清冊的基礎例外"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DomainError(InventoryError):
    """業務規則違反"""


class InvalidArgumentError(DomainError, ValueError):
    """輸入參數不合法"""


class InvalidEnumValueError(InvalidArgumentError):
    """無法解析為列舉值的輸入"""

    def __init__(self, value: Any, enum_name: str):
        super().__init__(f"Unknown {enum_name} value: '{value}'")
        self.value = value
        self.enum_name = enum_name


class DeviceNotFoundError(DomainError):
    """要更新或查詢的設備不存在"""

    def __init__(self, device_id: Any):
        super().__init__(f"No device found with ID: {device_id}")
        self.device_id = device_id


class StorageError(InventoryError):
    """資料庫存取失敗"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
