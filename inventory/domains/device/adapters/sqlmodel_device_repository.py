import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import delete, or_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from inventory.domains.common.exceptions import DeviceNotFoundError, StorageError
from inventory.domains.device.interfaces.device_repository import DeviceRepository
from inventory.domains.device.models.device_model import (
    Device,
    DeviceStatus,
    DeviceType,
)

logger = logging.getLogger(__name__)


class SQLModelDeviceRepository(DeviceRepository):
    """SQLModel 設備存儲庫實現

    每個操作從 session_factory 借用一個連線，結束時（無論成功或失敗）歸還。
    連線池的建立與關閉由呼叫端負責。
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session_scope(self, action: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Failed to {action}: {e}", exc_info=True)
            raise StorageError(f"Failed to {action}", cause=e) from e

    async def _fetch(self, statement, action: str) -> List[Device]:
        async with self._session_scope(action) as session:
            result = await session.execute(statement.order_by(Device.name))
            return list(result.scalars().all())

    # --- Queries ---

    async def find_all(self) -> List[Device]:
        """獲取所有設備，依名稱排序"""
        logger.debug("Fetching all devices")
        return await self._fetch(select(Device), "fetch all devices")

    async def find_by_id(self, device_id: uuid.UUID) -> Optional[Device]:
        """根據 ID 獲取設備"""
        logger.debug(f"Fetching device with ID: {device_id}")
        async with self._session_scope(f"find device by id: {device_id}") as session:
            stmt = select(Device).where(Device.id == device_id)
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def find_by_type(self, device_type: DeviceType) -> List[Device]:
        logger.debug(f"Fetching devices with type: {device_type.name}")
        return await self._fetch(
            select(Device).where(Device.type == device_type),
            f"filter by type: {device_type.name}",
        )

    async def find_by_status(self, status: DeviceStatus) -> List[Device]:
        logger.debug(f"Fetching devices with status: {status.name}")
        return await self._fetch(
            select(Device).where(Device.status == status),
            f"filter by status: {status.name}",
        )

    async def search(self, keyword: str) -> List[Device]:
        """在名稱、IP 位址與位置中搜尋關鍵字

        LIKE 萬用字元會被跳脫，按字面比對；NULL 欄位不會符合。
        """
        logger.debug(f"Searching devices for keyword: {keyword}")
        stmt = select(Device).where(
            or_(
                Device.name.icontains(keyword, autoescape=True),
                Device.ip_address.icontains(keyword, autoescape=True),
                Device.location.icontains(keyword, autoescape=True),
            )
        )
        return await self._fetch(stmt, f"search for keyword: {keyword}")

    # --- Mutations ---

    async def save(self, device: Device) -> Device:
        """新增設備，id 與 created_at 由資料庫產生"""
        logger.info(f"Attempting to create device: {device.name}")
        db_device = Device(
            name=device.name,
            type=device.type,
            status=device.status,
            ip_address=device.ip_address,
            location=device.location,
        )
        async with self._session_scope(f"save device: {device.name}") as session:
            session.add(db_device)
            # INSERT 與讀回 created_at 在同一交易、同一連線內完成
            await session.flush()
            await session.refresh(db_device)
            await session.commit()
        logger.info(
            f"Successfully created device '{db_device.name}' with ID {db_device.id}"
        )
        return db_device

    async def update(self, device: Device) -> Device:
        """覆寫設備的 name、type、status、ip_address、location

        不做樂觀鎖檢查：同一設備被同時更新時，以最後寫入者為準。
        """
        logger.debug(f"Updating device: {device.name} (ID: {device.id})")
        async with self._session_scope(f"update device: {device.id}") as session:
            stmt = (
                update(Device)
                .where(Device.id == device.id)
                .values(
                    name=device.name,
                    type=device.type,
                    status=device.status,
                    ip_address=device.ip_address,
                    location=device.location,
                )
                .execution_options(synchronize_session=False)
            )
            result = await session.execute(stmt)
            if result.rowcount == 0:
                logger.warning(f"Device with ID {device.id} not found for update.")
                raise DeviceNotFoundError(device.id)
            await session.commit()
        logger.info(f"Successfully updated device: {device.name} (ID: {device.id})")
        return device

    async def delete(self, device_id: uuid.UUID) -> bool:
        """刪除設備"""
        logger.debug(f"Removing device with ID: {device_id}")
        async with self._session_scope(f"delete device: {device_id}") as session:
            stmt = (
                delete(Device)
                .where(Device.id == device_id)
                .execution_options(synchronize_session=False)
            )
            result = await session.execute(stmt)
            await session.commit()

        removed = result.rowcount > 0
        if removed:
            logger.info(f"Successfully removed device with ID: {device_id}")
        else:
            logger.warning(f"Device with ID {device_id} not found for removal.")
        return removed
