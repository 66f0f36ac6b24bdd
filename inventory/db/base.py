from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from inventory.core.config import (
    DATABASE_URL,
    DB_ECHO,
    DB_POOL_RECYCLE,
    DB_POOL_SIZE,
    DB_POOL_TIMEOUT,
)


def build_engine(database_url: str = DATABASE_URL) -> AsyncEngine:
    """建立 async engine；SQLite 不使用連線池參數"""
    kwargs = {"echo": DB_ECHO, "pool_pre_ping": True}
    if make_url(database_url).get_backend_name() != "sqlite":
        kwargs.update(
            pool_size=DB_POOL_SIZE,
            pool_timeout=DB_POOL_TIMEOUT,
            pool_recycle=DB_POOL_RECYCLE,
        )
    return create_async_engine(database_url, **kwargs)


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    # expire_on_commit=False 可讓你在 commit 後仍能存取 session 中的物件
    return async_sessionmaker(engine, expire_on_commit=False)


# 使用 async engine，建立時不會立即連線
engine = build_engine()
async_session_maker = build_session_maker(engine)
