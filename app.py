#!/usr/bin/env python3
"""
Main entry point for the short link service.

Concurrency: requests are served concurrently via async I/O (FastAPI +
asyncpg connection pool). Link state is only shared through the database,
so WORKERS > 1 scales across CPU cores. uvicorn imports ``build_app`` in
each worker process, and every worker builds its own service and pool.

Usage:
    python app.py

Environment variables:
    DATABASE_URL - PostgreSQL connection URL (memory:// for in-process store)
    CREATE_TABLES - Set to true to create the links table on startup
    BASE_URL - Base URL for short links
    HOST / PORT - Address to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortlink.service import ShortLinkService
from shortlink.common.logging_config import setup_logging
from web_app import create_app

APP_FACTORY = "app:build_app"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting shortlink service...")

    service = ShortLinkService.from_config(config, logger)
    if config.create_tables:
        await service.store.ensure_schema()

    app.state.service = service
    logger.info("Service started successfully")

    try:
        yield
    finally:
        logger.info("Shutting down shortlink service...")
        await service.close()
        logger.info("Service stopped")


def build_app() -> FastAPI:
    """Application factory called by uvicorn once per worker process."""
    config = load_config()
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    # Service is built in lifespan
    app = create_app(service_instance=None, config=config)
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    return app


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Shortlink Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url'})}")
    logger.info(f"Listening on: {config.host}:{config.port} ({config.workers} worker(s))")

    # uvicorn handles SIGINT/SIGTERM and drains connections before the lifespan exits
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
