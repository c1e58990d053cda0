#!/usr/bin/env python3
"""
Main entry point for the ito link service.

Concurrency: requests are handled concurrently on the event loop. Every
store call runs in a worker thread that borrows one connection from the
SQLAlchemy engine pool for a single transaction. Set WORKERS > 1 for
multi-process scaling (each worker has its own pool; SQLite serializes
writers).

Usage:
    python app.py

Environment variables:
    DB_PATH - SQLite database file (default ./data/ito.db)
    POOL_SIZE - Maximum pooled connections per worker
    HOST - Address to bind to
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from ito.database.sqlite import SQLiteLinkStore
from ito.common.logging_config import setup_logging
from web_app import create_app
from web_app.app_factory import attach_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store on startup and close it on shutdown."""
    config = app.state.config
    logger = app.state.logger
    
    logger.info("Starting ito link service...")
    
    store = SQLiteLinkStore(
        db_path=config.db_path,
        pool_max_size=config.pool_size,
        connection_timeout_seconds=config.pool_timeout_seconds,
        logger=logger,
    )
    await store.initialize()
    attach_store(app, store, logger=logger)
    
    logger.info("Service started successfully")
    
    try:
        yield
    finally:
        logger.info("Shutting down ito link service...")
        await store.close()
        logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()
    
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    
    logger.info("ito link service")
    logger.info(f"Configuration: {config.model_dump()}")
    
    app = create_app(store=None, config=config, logger=logger)
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    
    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )
    
    server = uvicorn.Server(uvicorn_config)
    
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True
    
    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)
    
    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
