"""Business logic for creating and resolving short links."""

import logging
from typing import Dict, Optional

from .common.validators import DEFAULT_MAX_URL_LENGTH, is_valid_url
from .database.base import LinkStoreBase
from .database.factory import create_link_store
from .database.models import Link
from .errors import (
    IdentifierCollisionError,
    IdentifierSpaceExhaustedError,
    InvalidUrlError,
    LinkNotFoundError,
)
from .idgen import IdentifierGenerator

DEFAULT_MAX_INSERT_ATTEMPTS = 10


class ShorteningService:
    """Allocate identifiers and persist new links."""

    def __init__(
        self,
        store: LinkStoreBase,
        generator: Optional[IdentifierGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_insert_attempts: int = DEFAULT_MAX_INSERT_ATTEMPTS,
        max_url_length: int = DEFAULT_MAX_URL_LENGTH,
    ):
        """Initialize shortening service.

        Args:
            store: Link store
            generator: Optional identifier generator
            logger: Optional logger
            max_insert_attempts: Candidates tried before giving up
            max_url_length: Longest accepted long URL
        """
        if max_insert_attempts < 1:
            raise ValueError("max_insert_attempts must be at least 1")
        self.store = store
        self.generator = generator or IdentifierGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_insert_attempts = max_insert_attempts
        self.max_url_length = max_url_length

    async def shorten(self, long_url: str) -> Link:
        """Create a new short link for ``long_url``.

        A colliding identifier is replaced by a fresh candidate. A duplicate
        long URL and storage failures propagate without retry.

        Args:
            long_url: The original long URL

        Returns:
            The created link

        Raises:
            InvalidUrlError: If the URL fails validation
            UrlAlreadyExistsError: If the URL has already been shortened
            IdentifierSpaceExhaustedError: If every attempt collided
            StorageUnavailableError: If the store failed
        """
        is_valid, error = is_valid_url(long_url, self.max_url_length)
        if not is_valid:
            raise InvalidUrlError(error)

        for attempt in range(1, self.max_insert_attempts + 1):
            candidate = self.generator.generate()
            try:
                link = await self.store.insert(candidate, long_url)
            except IdentifierCollisionError:
                self.logger.debug(
                    f"Identifier collision on attempt {attempt}/{self.max_insert_attempts}: {candidate}"
                )
                continue

            self.logger.info(f"Created short link: {link.identifier} -> {long_url}")
            return link

        self.logger.error(
            f"Identifier allocation failed after {self.max_insert_attempts} attempts for {long_url}"
        )
        raise IdentifierSpaceExhaustedError(self.max_insert_attempts)


class RedirectService:
    """Resolve identifiers and count clicks."""

    def __init__(self, store: LinkStoreBase, logger: Optional[logging.Logger] = None):
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(self, identifier: str) -> str:
        """Return the long URL for ``identifier`` and count one click.

        Raises:
            LinkNotFoundError: If the identifier is unknown
            StorageUnavailableError: If the store failed
        """
        if not IdentifierGenerator.is_valid_format(identifier):
            raise LinkNotFoundError(identifier)

        long_url = await self.store.fetch_and_increment(identifier)
        self.logger.debug(f"Resolved {identifier} -> {long_url}")
        return long_url


class ShortLinkService:
    """Facade over the shortening and redirect services used by the web layer."""

    def __init__(
        self,
        store: LinkStoreBase,
        generator: Optional[IdentifierGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_insert_attempts: int = DEFAULT_MAX_INSERT_ATTEMPTS,
        max_url_length: int = DEFAULT_MAX_URL_LENGTH,
    ):
        self.store = store
        self.logger = logger or logging.getLogger(__name__)
        self.shortener = ShorteningService(
            store=store,
            generator=generator,
            logger=self.logger,
            max_insert_attempts=max_insert_attempts,
            max_url_length=max_url_length,
        )
        self.redirector = RedirectService(store=store, logger=self.logger)

    async def shorten(self, long_url: str) -> Link:
        return await self.shortener.shorten(long_url)

    async def resolve(self, identifier: str) -> str:
        return await self.redirector.resolve(identifier)

    async def get_link(self, identifier: str) -> Optional[Link]:
        """Get a link without counting a click."""
        return await self.store.get_link(identifier)

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.store.health_check()
        return {
            "database": db_healthy,
            "overall": db_healthy,
        }

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()

    @classmethod
    def from_config(cls, config, logger: Optional[logging.Logger] = None) -> "ShortLinkService":
        """Build the service and its store from a Config instance."""
        return cls(
            store=create_link_store(config, logger),
            generator=IdentifierGenerator(length=config.identifier_length),
            logger=logger,
            max_insert_attempts=config.max_insert_attempts,
            max_url_length=config.max_url_length,
        )
