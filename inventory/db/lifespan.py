import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from inventory.db.database import database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Context manager for FastAPI startup and shutdown logic."""
    logger.info("Application startup sequence initiated...")
    await database.connect()
    logger.info("Application startup complete.")

    yield

    # 在應用程式關閉前執行
    await database.disconnect()
    logger.info("Application shutdown complete.")
