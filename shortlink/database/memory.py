"""In-process link store for tests and local runs."""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from ..errors import (
    IdentifierCollisionError,
    LinkNotFoundError,
    UrlAlreadyExistsError,
)
from .base import LinkStoreBase
from .models import Link


class InMemoryLinkStore(LinkStoreBase):
    """Dictionary-backed link store.

    No method awaits between reading and writing its indexes, so each
    operation runs to completion on the event loop without interleaving.
    Not shared across processes.
    """

    def __init__(self, db_config: str = "memory://", logger: Optional[logging.Logger] = None):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._links: Dict[str, Link] = {}
        self._by_url: Dict[str, str] = {}

    async def insert(self, identifier: str, long_url: str) -> Link:
        if identifier in self._links:
            raise IdentifierCollisionError(identifier)
        if long_url in self._by_url:
            raise UrlAlreadyExistsError(long_url)

        link = Link(
            identifier=identifier,
            long_url=long_url,
            clicks=0,
            created_at=datetime.now(timezone.utc),
        )
        self._links[identifier] = link
        self._by_url[long_url] = identifier
        self.logger.debug(f"Inserted link: {identifier} -> {long_url}")
        return Link(**vars(link))

    async def fetch_and_increment(self, identifier: str) -> str:
        link = self._links.get(identifier)
        if link is None:
            raise LinkNotFoundError(identifier)
        link.clicks += 1
        return link.long_url

    async def get_link(self, identifier: str) -> Optional[Link]:
        link = self._links.get(identifier)
        return Link(**vars(link)) if link else None

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        pass

    def __len__(self) -> int:
        return len(self._links)
