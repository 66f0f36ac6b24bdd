"""
資料庫連接管理器
提供資料庫連接池的生命週期管理
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

from inventory.db.base import engine

# 確保 devices 表已註冊到 SQLModel.metadata
from inventory.domains.device.models.device_model import Device  # noqa: F401

logger = logging.getLogger(__name__)


class DatabaseManager:
    """資料庫連接管理器"""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.is_connected = False

    async def connect(self):
        """建立資料庫連接並創建表格"""
        logger.info("Connecting to the database...")
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        except Exception as e:
            logger.error(f"Database connection failed: {e}", exc_info=True)
            raise

        self.is_connected = True
        logger.info("Database connected, tables created (if they didn't exist).")

    async def disconnect(self):
        """關閉連接池，重複呼叫不會出錯"""
        if not self.is_connected:
            return
        await self.engine.dispose()
        self.is_connected = False
        logger.info("Database connection pool closed.")

    def is_ready(self) -> bool:
        """檢查資料庫是否就緒"""
        return self.is_connected


# 創建全域資料庫管理器實例
database = DatabaseManager(engine)
