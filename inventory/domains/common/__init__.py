"""
共享領域模組

包含所有領域共用的例外。
"""

from inventory.domains.common.exceptions import (
    InventoryError,
    DomainError,
    InvalidArgumentError,
    InvalidEnumValueError,
    DeviceNotFoundError,
    StorageError,
)
