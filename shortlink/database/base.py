"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import Link


class LinkStoreBase(ABC):
    """Abstract base class for link store operations.

    Implementations own all persisted link state and enforce two uniqueness
    constraints: one on the identifier and one on the long URL.
    """

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Database connection string
        """
        self.db_config = db_config

    @abstractmethod
    async def insert(self, identifier: str, long_url: str) -> Link:
        """Atomically create a new link with zero clicks.

        Args:
            identifier: The identifier to use
            long_url: The original long URL

        Returns:
            The created link

        Raises:
            IdentifierCollisionError: If the identifier is already taken
            UrlAlreadyExistsError: If the long URL is already shortened
            StorageUnavailableError: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def fetch_and_increment(self, identifier: str) -> str:
        """Atomically increment the click count and return the long URL.

        Args:
            identifier: The identifier to resolve

        Returns:
            The stored long URL

        Raises:
            LinkNotFoundError: If no link has this identifier
            StorageUnavailableError: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def get_link(self, identifier: str) -> Optional[Link]:
        """Get a link without touching its click count.

        Args:
            identifier: The identifier to lookup

        Returns:
            The link if found, None otherwise
        """
        pass

    async def ensure_schema(self) -> None:
        """Create storage structures if they are missing."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
