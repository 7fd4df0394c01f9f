"""Async engine and session lifecycle."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from vibeflow.config import Settings

logger = logging.getLogger(__name__)

engine: Optional[AsyncEngine] = None
SessionLocal: Optional[async_sessionmaker[AsyncSession]] = None


async def init_engine(cfg: Settings) -> None:
    """Create the process-wide engine and session factory (idempotent)."""
    global engine, SessionLocal
    if engine is not None:
        return
    engine = create_async_engine(cfg.db_url, echo=cfg.db_echo, pool_pre_ping=True)
    SessionLocal = async_sessionmaker(engine, expire_on_commit=False)
    logger.info("Database engine initialised")


async def dispose_engine() -> None:
    global engine, SessionLocal
    if engine is None:
        return
    await engine.dispose()
    engine = None
    SessionLocal = None


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Standalone unit of work for background tasks: commit on success, rollback on error."""
    if SessionLocal is None:
        raise RuntimeError("init_engine() has not been called")
    async with SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session for FastAPI dependencies."""
    async with session_scope() as session:
        yield session
