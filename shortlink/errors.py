"""Exception types for the short link service."""


class ShortLinkError(Exception):
    """Base class for all short link errors."""


class InvalidUrlError(ShortLinkError):
    """The submitted long URL was rejected before reaching storage."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid URL: {reason}")
        self.reason = reason


class LinkConflictError(ShortLinkError):
    """A uniqueness constraint fired on insert."""


class IdentifierCollisionError(LinkConflictError):
    """The generated identifier is already taken. Never surfaced to clients."""

    def __init__(self, identifier: str):
        super().__init__(f"Identifier '{identifier}' already exists")
        self.identifier = identifier


class UrlAlreadyExistsError(LinkConflictError):
    """The long URL has already been shortened."""

    def __init__(self, long_url: str):
        super().__init__(f"URL '{long_url}' has already been shortened")
        self.long_url = long_url


class LinkNotFoundError(ShortLinkError):
    """No link exists for the identifier."""

    def __init__(self, identifier: str):
        super().__init__(f"Short link '{identifier}' not found")
        self.identifier = identifier


class IdentifierSpaceExhaustedError(ShortLinkError):
    """Every attempt to allocate a free identifier collided."""

    def __init__(self, attempts: int):
        super().__init__(
            f"Unable to allocate a unique identifier after {attempts} attempts"
        )
        self.attempts = attempts


class StorageUnavailableError(ShortLinkError):
    """The backing store failed (connection, timeout or driver error)."""
