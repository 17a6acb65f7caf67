"""Platform version gates.

The storefront platform changed variant listing behavior across releases.
Versions are compared the way the platform itself compares them (PHP's
``version_compare``): numeric parts compare numerically, and pre-release
tags order as ``dev < alpha < beta < rc < release < pl``.
"""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Self

import structlog

from tweakwise.domain.exceptions import InvalidVersionError
from tweakwise.domain.models import ListingBehavior

logger = structlog.get_logger()

# Rank of a plain number; special tags rank around it
_NUMBER_RANK = 5

# Matched by prefix in this order, so "patch" ranks as "p"
_SPECIAL_FORMS = (
    ("dev", 1),
    ("alpha", 2),
    ("a", 2),
    ("beta", 3),
    ("b", 3),
    ("RC", 4),
    ("rc", 4),
    ("pl", 6),
    ("p", 6),
)

# Stand-in for a missing part: after any pre-release tag, before any number
_MISSING_PART = (_NUMBER_RANK, -1)

_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")
_TOKENS = re.compile(r"[0-9]+|[A-Za-z]+")


def _part_key(part: str) -> tuple[int, int]:
    if part.isdigit():
        return (_NUMBER_RANK, int(part))
    for form, rank in _SPECIAL_FORMS:
        if part.startswith(form):
            return (rank, 0)
    return (0, 0)


@total_ordering
@dataclass(frozen=True, eq=False)
class PlatformVersion:
    """A parsed platform version, e.g. ``6.5.8.2`` or ``6.4.15.0-rc1``.

    Attributes:
        raw: Version string as configured.
        parts: Comparable key for each version part.
    """

    raw: str
    parts: tuple[tuple[int, int], ...]

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Parse a version string.

        Args:
            raw: Version string.

        Returns:
            PlatformVersion instance.

        Raises:
            InvalidVersionError: If the string does not start with a number.
        """
        tokens = [
            token
            for chunk in _SEPARATORS.split(raw.strip())
            for token in _TOKENS.findall(chunk)
        ]
        if not tokens or not tokens[0].isdigit():
            raise InvalidVersionError(raw)
        return cls(raw=raw, parts=tuple(_part_key(t) for t in tokens))

    def compare(self, other: "PlatformVersion") -> int:
        """Compare with another version.

        Returns:
            -1, 0 or 1 like ``version_compare``.
        """
        length = max(len(self.parts), len(other.parts))
        mine = self.parts + (_MISSING_PART,) * (length - len(self.parts))
        theirs = other.parts + (_MISSING_PART,) * (length - len(other.parts))
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlatformVersion):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "PlatformVersion") -> bool:
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self.parts)

    def __str__(self) -> str:
        return self.raw


class PlatformVersionProbe:
    """Answers the version gates for the running platform release.

    Example usage:
        probe = PlatformVersionProbe.from_settings(settings)
        if probe.listing_behavior() is ListingBehavior.DISABLED:
            ...
    """

    def __init__(
        self,
        platform_version: str,
        variant_listing_min_version: str = "6.5.0",
        listing_config_min_version: str = "6.4.15",
    ) -> None:
        """Initialize probe.

        Args:
            platform_version: Version of the running platform.
            variant_listing_min_version: First release with variant
                listing substitution.
            listing_config_min_version: First release storing listing
                rules in a dedicated variant listing config.
        """
        self.version = PlatformVersion.parse(platform_version)
        self.variant_listing_min = PlatformVersion.parse(variant_listing_min_version)
        self.listing_config_min = PlatformVersion.parse(listing_config_min_version)

    @classmethod
    def from_settings(cls, settings) -> Self:
        """Create probe from application settings."""
        return cls(
            platform_version=settings.platform_version,
            variant_listing_min_version=settings.variant_listing_min_version,
            listing_config_min_version=settings.listing_config_min_version,
        )

    def supports_variant_listing(self) -> bool:
        """Check if the platform substitutes variants in listings."""
        return self.version >= self.variant_listing_min

    def has_variant_listing_config(self) -> bool:
        """Check if listing rules live in the variant listing config."""
        return self.version >= self.listing_config_min

    def listing_behavior(self) -> ListingBehavior:
        """Select the listing behavior for this release.

        Returns:
            The behavior variant to use for the whole request.
        """
        if not self.supports_variant_listing():
            behavior = ListingBehavior.DISABLED
        elif self.has_variant_listing_config():
            behavior = ListingBehavior.VARIANT_LISTING_CONFIG
        else:
            behavior = ListingBehavior.PARENT_GROUP_CONFIG

        logger.debug(
            "Listing behavior selected",
            platform_version=str(self.version),
            behavior=behavior.value,
        )
        return behavior
