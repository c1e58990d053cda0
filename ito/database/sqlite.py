"""SQLite implementation of the link store."""

import asyncio
import logging
import sqlite3
from typing import List, Optional

from sqlalchemy import delete, insert, select, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import DuplicateAlias, NotFound, StorageUnavailable
from .base import LinkStoreBase
from .engine import create_sqlite_engine, links_table, metadata
from .models import Link

# SQLite INTEGER range; no row can have an id outside it
MIN_LINK_ID = -2**63
MAX_LINK_ID = 2**63 - 1


def _is_unique_violation(error: IntegrityError) -> bool:
    return isinstance(error.orig, sqlite3.IntegrityError) and "UNIQUE constraint failed" in str(error.orig)


class SQLiteLinkStore(LinkStoreBase):
    """SQLite implementation of link store operations.
    
    Each call runs in a worker thread that checks a connection out of the
    engine's pool, runs one transaction and returns the connection. The
    checkout lives entirely inside the thread, so a cancelled request keeps
    its connection until its statements have finished.
    """
    
    def __init__(
        self,
        db_path: str,
        pool_max_size: int = 5,
        connection_timeout_seconds: float = 30.0,
        logger: Optional[logging.Logger] = None,
        engine: Optional[Engine] = None,
    ):
        """Initialize the store.
        
        Args:
            db_path: SQLite database file path
            pool_max_size: Maximum size of the connection pool
            connection_timeout_seconds: Pool checkout and busy timeout
            logger: Optional logger instance
            engine: Optional pre-built engine; one is created from the other
                arguments when omitted
        """
        super().__init__(db_path)
        
        self.logger = logger or logging.getLogger(__name__)
        self.engine = engine or create_sqlite_engine(
            db_path,
            pool_size=pool_max_size,
            timeout_seconds=connection_timeout_seconds,
        )
    
    def _transaction(self, func, *args):
        with self.engine.begin() as conn:
            return func(conn, *args)
    
    async def _run(self, func, *args):
        """Run ``func(conn, *args)`` in a thread inside one transaction."""
        try:
            return await asyncio.to_thread(self._transaction, func, *args)
        except SQLAlchemyError as e:
            self.logger.error(f"Database error in {func.__name__}: {e}")
            raise StorageUnavailable(f"storage error: {e}") from e
    
    @staticmethod
    def _create_schema(conn: Connection) -> None:
        metadata.create_all(conn, checkfirst=True)
    
    @staticmethod
    def _select_all(conn: Connection) -> List[Link]:
        rows = conn.execute(select(links_table).order_by(links_table.c.id)).all()
        return [Link.from_row(row) for row in rows]
    
    @staticmethod
    def _insert(conn: Connection, alias: str, target_url: str) -> int:
        try:
            result = conn.execute(insert(links_table).values(alias=alias, target_url=target_url))
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise DuplicateAlias(alias) from e
            raise
        return result.inserted_primary_key[0]
    
    @staticmethod
    def _select_by_alias(conn: Connection, alias: str) -> Optional[Link]:
        row = conn.execute(
            select(links_table).where(links_table.c.alias == alias)
        ).first()
        return Link.from_row(row) if row else None
    
    @staticmethod
    def _delete(conn: Connection, link_id: int) -> int:
        result = conn.execute(delete(links_table).where(links_table.c.id == link_id))
        return result.rowcount
    
    @staticmethod
    def _ping(conn: Connection) -> None:
        conn.execute(text("SELECT 1")).scalar()
    
    async def initialize(self) -> None:
        """Create the links table and alias index if they don't exist."""
        self.logger.info(f"Ensuring links schema in {self.db_config}")
        await self._run(self._create_schema)
    
    async def list_links(self) -> List[Link]:
        return await self._run(self._select_all)
    
    async def insert_link(self, alias: str, target_url: str) -> int:
        try:
            link_id = await self._run(self._insert, alias, target_url)
        except DuplicateAlias:
            self.logger.warning(f"Alias already exists: {alias}")
            raise
        self.logger.debug(f"Inserted link {link_id}: {alias} -> {target_url}")
        return link_id
    
    async def find_by_alias(self, alias: str) -> Link:
        link = await self._run(self._select_by_alias, alias)
        if link is None:
            raise NotFound(alias)
        return link
    
    async def delete_by_id(self, link_id: int) -> None:
        if not MIN_LINK_ID <= link_id <= MAX_LINK_ID:
            self.logger.debug(f"Delete of out-of-range link id {link_id} ignored")
            return
        deleted = await self._run(self._delete, link_id)
        if not deleted:
            self.logger.debug(f"Delete of missing link id {link_id} ignored")
    
    async def health_check(self) -> bool:
        try:
            await self._run(self._ping)
            return True
        except StorageUnavailable as e:
            self.logger.error(f"Health check failed: {e}")
            return False
    
    async def close(self) -> None:
        """Close all pooled connections."""
        await asyncio.to_thread(self.engine.dispose)
