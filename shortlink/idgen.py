"""Identifier generation for short links."""

import random
import string
from typing import Optional


class IdentifierGenerator:
    """Generate random fixed-length identifiers.

    Identifiers carry no uniqueness guarantee of their own; the link store
    rejects duplicates and the shortening service retries.
    """

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    def __init__(self, length: int = 6, rng: Optional[random.Random] = None):
        """Initialize identifier generator.

        Args:
            length: Number of characters per identifier
            rng: Optional random source (defaults to OS entropy)
        """
        if length < 1:
            raise ValueError("Identifier length must be at least 1")
        self.length = length
        self._rng = rng or random.SystemRandom()

    def generate(self) -> str:
        """Generate a random identifier.

        Returns:
            Identifier of ``self.length`` characters drawn from BASE62_CHARS
        """
        return ''.join(self._rng.choices(self.BASE62_CHARS, k=self.length))

    @classmethod
    def is_valid_format(cls, identifier: str) -> bool:
        """Check if identifier only uses the generator alphabet."""
        return bool(identifier) and all(c in cls.BASE62_CHARS for c in identifier)
