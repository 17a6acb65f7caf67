"""Domain layer for storefront rendering.

Contains domain models, platform version gates and domain exceptions.
"""

from tweakwise.domain.exceptions import (
    DomainAlreadyAssignedError,
    DomainError,
    FeedError,
    FeedNotFoundError,
    InvalidVersionError,
)
from tweakwise.domain.models import (
    CategoryTreeNode,
    FeedConfig,
    IntegrationMode,
    ListingBehavior,
    Page,
    Product,
    ProductPage,
    SalesChannelContext,
    SearchMode,
    StorefrontRenderEvent,
    VariantListingConfig,
)
from tweakwise.domain.version import PlatformVersion, PlatformVersionProbe

__all__ = [
    # Exceptions
    "DomainError",
    "DomainAlreadyAssignedError",
    "FeedError",
    "FeedNotFoundError",
    "InvalidVersionError",
    # Models
    "CategoryTreeNode",
    "FeedConfig",
    "IntegrationMode",
    "ListingBehavior",
    "Page",
    "Product",
    "ProductPage",
    "SalesChannelContext",
    "SearchMode",
    "StorefrontRenderEvent",
    "VariantListingConfig",
    # Version gates
    "PlatformVersion",
    "PlatformVersionProbe",
]
