"""Domain exceptions.

Errors raised by the domain and application layers. Lookup misses during
a storefront render are not errors and never surface through these types.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Feed Errors
# ============================================================================


class FeedError(DomainError):
    """Base class for feed configuration errors."""

    pass


class FeedNotFoundError(FeedError):
    """Raised when a feed configuration does not exist."""

    def __init__(self, feed_id: str) -> None:
        super().__init__(
            f"Feed not found: {feed_id}",
            details={"feed_id": feed_id},
        )


class DomainAlreadyAssignedError(FeedError):
    """Raised when a sales channel domain already belongs to another feed.

    A domain resolves to at most one feed, so assignments are rejected
    at write time.
    """

    def __init__(self, domain_id: str, feed_id: str) -> None:
        """Initialize domain already assigned error.

        Args:
            domain_id: Sales channel domain being assigned.
            feed_id: Feed that already owns the domain.
        """
        super().__init__(
            f"Domain {domain_id} is already assigned to feed {feed_id}",
            details={"domain_id": domain_id, "feed_id": feed_id},
        )


# ============================================================================
# Platform Errors
# ============================================================================


class InvalidVersionError(DomainError):
    """Raised when a platform version string cannot be parsed."""

    def __init__(self, version: str) -> None:
        super().__init__(
            f"Invalid platform version: '{version}'",
            details={"version": version},
        )
