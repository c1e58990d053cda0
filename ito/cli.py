#!/usr/bin/env python3
"""
Command-line interface for the ito link store.

Usage:
    python -m ito.cli init-db
    python -m ito.cli add <alias> <target_url>
    python -m ito.cli get <alias>
    python -m ito.cli list
    python -m ito.cli delete <id>
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from config import load_config

from .common.logging_config import setup_logging
from .database.sqlite import SQLiteLinkStore
from .errors import LinkError
from .manager import LinkManager
from .resolver import RedirectResolver


class LinkCLI:
    """Command-line interface for the link store."""
    
    def __init__(self, db_path: str, verbose: bool = False):
        """Initialize CLI."""
        self.db_path = db_path
        self.verbose = verbose
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.store: Optional[SQLiteLinkStore] = None
        self.manager: Optional[LinkManager] = None
        self.resolver: Optional[RedirectResolver] = None
    
    async def initialize(self):
        """Open the store and make sure the schema exists."""
        self.store = SQLiteLinkStore(db_path=self.db_path, pool_max_size=1, logger=self.logger)
        await self.store.initialize()
        self.manager = LinkManager(self.store, logger=self.logger)
        self.resolver = RedirectResolver(self.store, logger=self.logger)
    
    async def cleanup(self):
        """Cleanup resources."""
        if self.store:
            await self.store.close()
    
    @staticmethod
    def _ok(payload: dict) -> int:
        print(json.dumps({"success": True, **payload}, indent=2))
        return 0
    
    @staticmethod
    def _fail(error: str) -> int:
        print(json.dumps({"success": False, "error": error}, indent=2), file=sys.stderr)
        return 1
    
    async def init_db(self) -> int:
        healthy = await self.store.health_check()
        if not healthy:
            return self._fail("database health check failed")
        return self._ok({"db_path": self.db_path, "message": "Database initialized"})
    
    async def add(self, alias: str, target_url: str) -> int:
        link = await self.manager.create(alias, target_url)
        return self._ok({"link": link.to_dict()})
    
    async def get(self, alias: str) -> int:
        target_url = await self.resolver.resolve(alias)
        return self._ok({"alias": alias, "target_url": target_url})
    
    async def list(self) -> int:
        links = await self.manager.list_links()
        return self._ok({"count": len(links), "links": [link.to_dict() for link in links]})
    
    async def delete(self, link_id: int) -> int:
        await self.manager.delete(link_id)
        return self._ok({"id": link_id, "message": f"Link {link_id} deleted"})


def build_parser(default_db_path: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ito link store CLI")
    parser.add_argument(
        "--db-path",
        default=default_db_path,
        help="SQLite database file"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    
    subparsers = parser.add_subparsers(dest="command", required=True)
    
    subparsers.add_parser("init-db", help="Create the database schema")
    
    add_parser = subparsers.add_parser("add", help="Create a link")
    add_parser.add_argument("alias", help="Public alias")
    add_parser.add_argument("target_url", help="Absolute URL to redirect to")
    
    get_parser = subparsers.add_parser("get", help="Resolve an alias")
    get_parser.add_argument("alias", help="Alias to resolve")
    
    subparsers.add_parser("list", help="List all links")
    
    delete_parser = subparsers.add_parser("delete", help="Delete a link by id")
    delete_parser.add_argument("id", type=int, help="Link id")
    
    return parser


async def run(args: argparse.Namespace) -> int:
    cli = LinkCLI(db_path=args.db_path, verbose=args.verbose)
    try:
        await cli.initialize()
        if args.command == "init-db":
            return await cli.init_db()
        if args.command == "add":
            return await cli.add(args.alias, args.target_url)
        if args.command == "get":
            return await cli.get(args.alias)
        if args.command == "list":
            return await cli.list()
        return await cli.delete(args.id)
    except LinkError as e:
        return cli._fail(str(e))
    finally:
        await cli.cleanup()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser(default_db_path=load_config().db_path)
    args = parser.parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
