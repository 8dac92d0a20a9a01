"""
Process-wide lazy connection to the backing store

ConnectionManager owns one SQLAlchemy AsyncEngine for the lifetime of the process:

    EMPTY ──acquire──► CONNECTING(task) ──ok──► READY(engine)
      ▲                      │
      └────────fail──────────┘

- READY: acquire_connection() returns the cached engine without awaiting I/O
- CONNECTING: callers await the single in-flight task (N callers, one connect)
- EMPTY: the next caller starts a fresh establishment

Establishment pings the database before publishing the engine, so statements are
never issued against an engine that has not proven it can reach the server.
A failed establishment resets the state to EMPTY and re-raises to every waiter.
"""

import asyncio
from contextlib import asynccontextmanager
from enum import StrEnum
from typing import AsyncIterator, Awaitable, Callable, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.platform.exception.exceptions import ConfigurationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics


MISSING_DATABASE_URL = 'Please define the DATABASE_URL environment variable'

EngineConnector = Callable[[str], Awaitable[AsyncEngine]]


class ConnectionState(StrEnum):
    EMPTY = 'empty'
    CONNECTING = 'connecting'
    READY = 'ready'


def build_engine_connector(
    *,
    pool_size: int = 5,
    max_overflow: int = 10,
    pool_timeout: int = 30,
    pool_recycle: int = 1800,
) -> EngineConnector:
    async def connect(database_url: str) -> AsyncEngine:
        engine = create_async_engine(
            database_url,
            echo=False,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_recycle=pool_recycle,
            pool_pre_ping=True,
        )
        try:
            async with engine.connect() as conn:
                await conn.execute(text('SELECT 1'))  # Fail-fast
        except BaseException:
            await engine.dispose()
            raise
        return engine

    return connect


class ConnectionManager:
    def __init__(
        self,
        *,
        database_url: Optional[str],
        connector: Optional[EngineConnector] = None,
        connect_timeout: Optional[float] = None,
    ) -> None:
        if not database_url or not database_url.strip():
            raise ConfigurationError(MISSING_DATABASE_URL)

        self._database_url = database_url
        self._connector = connector or build_engine_connector()
        self._connect_timeout = connect_timeout
        self._engine: Optional[AsyncEngine] = None
        self._pending: Optional[asyncio.Task[AsyncEngine]] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def state(self) -> ConnectionState:
        if self._engine is not None:
            return ConnectionState.READY
        if self._pending is not None:
            return ConnectionState.CONNECTING
        return ConnectionState.EMPTY

    async def acquire_connection(self) -> AsyncEngine:
        if self._engine is not None:
            return self._engine

        if self._pending is None:
            # State flips to CONNECTING before the first suspension point
            self._pending = asyncio.ensure_future(self._establish())

        # Shielded so one cancelled waiter does not abort the shared attempt
        return await asyncio.shield(self._pending)

    async def _establish(self) -> AsyncEngine:
        Logger.base.info('🔗 [DB] Establishing backing store connection')
        try:
            connecting = self._connector(self._database_url)
            if self._connect_timeout:
                engine = await asyncio.wait_for(connecting, timeout=self._connect_timeout)
            else:
                engine = await connecting
        except BaseException as e:
            self._pending = None
            metrics.record_db_connection_attempt(success=False)
            Logger.base.warning(f'⚠️ [DB] Connection attempt failed: {type(e).__name__}: {e}')
            raise

        self._engine = engine
        self._session_maker = None
        self._pending = None
        metrics.record_db_connection_attempt(success=True)
        Logger.base.info('✅ [DB] Backing store connection ready')
        return engine

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Session bound to the shared engine (rolls back on exception)."""
        engine = await self.acquire_connection()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )
        async with self._session_maker() as session:
            yield session

    async def dispose(self) -> None:
        """
        Release pooled connections and return to EMPTY (application shutdown).

        An establishment still in flight is cancelled so it cannot publish an
        engine after shutdown.
        """
        pending, self._pending = self._pending, None
        if pending is not None:
            pending.cancel()
            await asyncio.gather(pending, return_exceptions=True)

        engine, self._engine = self._engine, None
        self._session_maker = None
        metrics.record_db_connection_closed()
        if engine is not None:
            await engine.dispose()
            Logger.base.info('🔌 [DB] Backing store connection disposed')
