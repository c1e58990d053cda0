"""SQLAlchemy engine and table definition for the link store."""

import os

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

metadata = MetaData()

links_table = Table(
    "links",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("alias", Text, nullable=False),
    Column("target_url", Text, nullable=False),
    Index("idx_links_alias", "alias", unique=True),
    sqlite_autoincrement=True,
)


def create_sqlite_engine(
    db_path: str,
    pool_size: int = 5,
    timeout_seconds: float = 30.0,
) -> Engine:
    """Create an engine holding at most ``pool_size`` SQLite connections.
    
    Args:
        db_path: SQLite database file path; its directory is created
        pool_size: Maximum number of pooled connections (no overflow)
        timeout_seconds: How long a checkout waits for a free connection,
            and the SQLite busy timeout of each connection
        
    Returns:
        Configured engine
    """
    if pool_size < 1:
        raise ValueError("pool_size must be at least 1")
    
    os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)
    
    return create_engine(
        f"sqlite:///{db_path}",
        poolclass=QueuePool,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=timeout_seconds,
        # connections are checked out from worker threads
        connect_args={"check_same_thread": False, "timeout": timeout_seconds},
    )
