"""Database layer for the ito link service."""

from .base import LinkStoreBase
from .engine import create_sqlite_engine, links_table
from .models import Link
from .sqlite import SQLiteLinkStore

__all__ = ["LinkStoreBase", "Link", "create_sqlite_engine", "links_table", "SQLiteLinkStore"]
