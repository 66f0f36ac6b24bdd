"""
Shared fixtures for the device inventory test suite.
"""

from pathlib import Path
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import SQLModel

from inventory.db.base import build_engine, build_session_maker
from inventory.domains.device.adapters.sqlmodel_device_repository import (
    SQLModelDeviceRepository,
)
from inventory.domains.device.services.device_service import DeviceService
from inventory.tests.fakes import InMemoryDeviceRepository


@pytest.fixture
def memory_repository() -> InMemoryDeviceRepository:
    return InMemoryDeviceRepository()


@pytest.fixture
def device_service(memory_repository: InMemoryDeviceRepository) -> DeviceService:
    return DeviceService(device_repository=memory_repository)


@pytest.fixture
async def session_factory(
    tmp_path: Path,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """在 tmp_path 建立 SQLite 資料庫並返回 session factory"""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'devices.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield build_session_maker(engine)

    await engine.dispose()


@pytest.fixture
def sql_repository(
    session_factory: async_sessionmaker[AsyncSession],
) -> SQLModelDeviceRepository:
    return SQLModelDeviceRepository(session_factory=session_factory)
