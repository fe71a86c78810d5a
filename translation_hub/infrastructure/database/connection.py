"""Database connection management.

``ConnectionManager`` owns the pooled SQLAlchemy engine for the relational
backend. The engine is created lazily on first use, recreated after the
pool is found dead, and every connection attempt is bounded by a timeout.
Blocking database work runs in the default thread executor so it never
stalls the event loop.
"""

import asyncio
from typing import (
    Callable,
    Optional,
    TypeVar,
)

from sqlalchemy import (
    create_engine,
    text,
)
from sqlalchemy.engine import (
    Connection,
    Engine,
    make_url,
)
from sqlalchemy.exc import (
    DBAPIError,
    SQLAlchemyError,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from translation_hub.constants.database import (
    CONNECTION_TIMEOUT,
    DEFAULT_MAX_OVERFLOW,
    DEFAULT_POOL_SIZE,
    HEALTH_CHECK_QUERY,
    POOL_PRE_PING,
    POOL_RECYCLE_TIME,
)
from translation_hub.core.logging import logger
from translation_hub.domain.exceptions import BackendUnavailableError

# Registers the tables on SQLModel.metadata.
from translation_hub.infrastructure.database import models  # noqa: F401

T = TypeVar("T")


class ConnectionManager:
    """Lazily connected, self-healing handle on the database pool.

    A single manager is created at startup and passed by reference to the
    backend that uses it.
    """

    def __init__(
        self,
        url: str,
        pool_size: int = DEFAULT_POOL_SIZE,
        max_overflow: int = DEFAULT_MAX_OVERFLOW,
        connect_timeout: float = CONNECTION_TIMEOUT,
        echo: bool = False,
        create_schema: bool = True,
    ):
        """Initialize the connection manager.

        Args:
            url: SQLAlchemy database URL
            pool_size: Number of pooled connections
            max_overflow: Connections allowed beyond pool_size
            connect_timeout: Seconds allowed for one connection attempt
            echo: Log every SQL statement
            create_schema: Create missing tables on every (re)connect
        """
        self.url = make_url(url)
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.connect_timeout = connect_timeout
        self.echo = echo
        self.create_schema = create_schema
        self._engine: Optional[Engine] = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def _create_engine(self) -> Engine:
        """Build an engine for the configured URL."""
        kwargs = {"pool_pre_ping": POOL_PRE_PING, "echo": self.echo}

        if self.url.get_backend_name() == "sqlite":
            kwargs["connect_args"] = {"check_same_thread": False}
            if self.url.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
        else:
            kwargs.update(
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_recycle=POOL_RECYCLE_TIME,
                pool_timeout=self.connect_timeout,
            )
            if self.url.get_backend_name() == "postgresql":
                kwargs["connect_args"] = {"connect_timeout": max(1, int(self.connect_timeout))}

        return create_engine(self.url, **kwargs)

    def _prepare(self, engine: Engine) -> None:
        with engine.connect() as connection:
            connection.execute(text(HEALTH_CHECK_QUERY))
        if self.create_schema:
            SQLModel.metadata.create_all(engine)

    async def _connect(self) -> Engine:
        """Create an engine and prove it can reach the database.

        Raises:
            BackendUnavailableError: If the database cannot be reached in time
        """
        engine = self._create_engine()
        try:
            await asyncio.wait_for(asyncio.to_thread(self._prepare, engine), timeout=self.connect_timeout)
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            engine.dispose()
            logger.error(
                "database_connection_failed",
                backend=self.url.get_backend_name(),
                host=self.url.host,
                error=str(e) or type(e).__name__,
            )
            raise BackendUnavailableError("Could not connect to the storage backend") from e

        logger.info(
            "database_connected",
            backend=self.url.get_backend_name(),
            host=self.url.host,
            database=self.url.database,
        )
        return engine

    async def acquire(self) -> Engine:
        """Return a live engine, connecting first if there is none.

        Concurrent callers that find no engine wait on the same lock, so
        only one pool is ever created.

        Raises:
            BackendUnavailableError: If reconnection fails
        """
        engine = self._engine
        if engine is not None:
            return engine

        async with self._lock:
            if self._engine is None:
                self._engine = await self._connect()
            return self._engine

    async def invalidate(self) -> None:
        """Drop the current pool; the next acquire() reconnects."""
        async with self._lock:
            if self._engine is not None:
                engine, self._engine = self._engine, None
                await asyncio.to_thread(engine.dispose)
                logger.warning("database_pool_invalidated")

    async def run(self, operation: Callable[[Connection], T], write: bool = False) -> T:
        """Run a blocking callable against a pooled connection.

        Args:
            operation: Callable receiving an open connection
            write: Wrap the call in a transaction that commits on success

        Returns:
            Whatever the callable returns

        Raises:
            BackendUnavailableError: If no connection can be established
            SQLAlchemyError: If the statement itself fails
        """
        engine = await self.acquire()

        def _call() -> T:
            if write:
                with engine.begin() as connection:
                    return operation(connection)
            with engine.connect() as connection:
                return operation(connection)

        try:
            return await asyncio.to_thread(_call)
        except DBAPIError as e:
            if e.connection_invalidated:
                await self.invalidate()
            raise

    async def health_check(self) -> bool:
        """Check database connectivity.

        Returns:
            bool: True if a round trip succeeds, False otherwise
        """
        try:
            await self.run(lambda connection: connection.execute(text(HEALTH_CHECK_QUERY)))
            return True
        except (BackendUnavailableError, SQLAlchemyError) as e:
            logger.error("database_health_check_failed", error=str(e))
            return False

    async def dispose(self) -> None:
        """Close every pooled connection."""
        async with self._lock:
            if self._engine is not None:
                engine, self._engine = self._engine, None
                await asyncio.to_thread(engine.dispose)
                logger.info("database_connection_closed")
