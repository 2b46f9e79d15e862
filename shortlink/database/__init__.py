"""Storage layer for short links."""

from .base import LinkStoreBase
from .factory import create_link_store
from .memory import InMemoryLinkStore
from .models import Link
from .postgres import PostgresLinkStore

__all__ = [
    "LinkStoreBase",
    "InMemoryLinkStore",
    "PostgresLinkStore",
    "Link",
    "create_link_store",
]
