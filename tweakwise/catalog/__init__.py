"""Catalog module.

Category index building, canonical variant resolution and the
repositories they read from.
"""

from tweakwise.catalog.category_index import CategoryIndexBuilder, category_key
from tweakwise.catalog.repository import (
    FeedRepository,
    NavigationLoader,
    ProductRepository,
    build_navigation_tree,
)
from tweakwise.catalog.variant_resolver import CanonicalVariantResolver

__all__ = [
    # Category index
    "CategoryIndexBuilder",
    "category_key",
    # Variant resolution
    "CanonicalVariantResolver",
    # Repositories
    "FeedRepository",
    "NavigationLoader",
    "ProductRepository",
    "build_navigation_tree",
]
