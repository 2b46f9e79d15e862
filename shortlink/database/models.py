"""Data models for the short link store."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Link:
    """Represents a persisted short link."""

    identifier: str
    long_url: str
    clicks: int = 0
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "identifier": self.identifier,
            "long_url": self.long_url,
            "clicks": self.clicks,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_record(cls, record) -> "Link":
        """Create from a database row (asyncpg Record or mapping)."""
        return cls(
            identifier=record["identifier"],
            long_url=record["long_url"],
            clicks=record["clicks"],
            created_at=record["created_at"],
        )
