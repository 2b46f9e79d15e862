"""Core business logic for the short link service."""

from .idgen import IdentifierGenerator
from .service import RedirectService, ShorteningService, ShortLinkService

__all__ = [
    "IdentifierGenerator",
    "ShorteningService",
    "RedirectService",
    "ShortLinkService",
]
