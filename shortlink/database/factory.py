"""Link store construction from configuration."""

import logging
from typing import Optional

from .base import LinkStoreBase
from .memory import InMemoryLinkStore
from .postgres import PostgresLinkStore

MEMORY_SCHEME = "memory://"


def create_link_store(config, logger: Optional[logging.Logger] = None) -> LinkStoreBase:
    """Build the link store selected by ``config.database_url``.

    Args:
        config: Configuration instance
        logger: Optional logger

    Returns:
        In-process store for ``memory://`` URLs, PostgreSQL store otherwise
    """
    logger = logger or logging.getLogger(__name__)

    if config.database_url.startswith(MEMORY_SCHEME):
        logger.info("Using in-process link store")
        return InMemoryLinkStore(db_config=config.database_url, logger=logger)

    store = PostgresLinkStore(
        db_config=config.database_url,
        pool_min_size=config.pool_min_size,
        pool_max_size=config.pool_max_size,
        command_timeout_seconds=config.command_timeout_seconds,
        logger=logger,
    )
    logger.info(f"Using PostgreSQL link store at {store.display_dsn}")
    return store
