"""Canonical variant resolution.

Decides which product represents a variant family on listing and
cross-sell surfaces. Platform releases changed both where the listing
rules are stored and which product is canonical, so each release family
gets its own strategy, selected once per request.

Every lookup miss falls through to a defined fallback; nothing here
raises for missing products.
"""

from abc import ABC, abstractmethod
from typing import Any

import structlog

from tweakwise.catalog.repository import ProductRepository
from tweakwise.domain.models import ListingBehavior, Product
from tweakwise.domain.version import PlatformVersionProbe

logger = structlog.get_logger()


def expands_in_listings(group_config: list[Any] | None) -> bool:
    """Check if any configurator group is expanded in listings.

    Args:
        group_config: Ordered configurator group rules.

    Returns:
        True if a rule has ``expressionForListings`` set to exactly True.
    """
    return any(
        isinstance(rule, dict) and rule.get("expressionForListings") is True
        for rule in group_config or []
    )


# ============================================================================
# Strategies
# ============================================================================


class ListingStrategy(ABC):
    """Base class for per-release variant selection."""

    def __init__(self, products: ProductRepository) -> None:
        self.products = products

    @abstractmethod
    async def select(self, product: Product, parent: Product) -> Product:
        """Select the canonical product for a variant and its parent.

        Args:
            product: Variant being displayed.
            parent: Its parent product.

        Returns:
            Product to display.
        """
        pass


class ParentGroupConfigStrategy(ListingStrategy):
    """Releases where group rules are stored on the parent itself."""

    async def select(self, product: Product, parent: Product) -> Product:
        if expands_in_listings(parent.configurator_group_config):
            return product
        return parent


class VariantListingConfigStrategy(ListingStrategy):
    """Releases with a dedicated variant listing config on the parent."""

    async def select(self, product: Product, parent: Product) -> Product:
        listing_config = parent.variant_listing_config
        group_config = None

        if listing_config is not None:
            if listing_config.display_parent:
                return parent

            if listing_config.main_variant_id:
                main_variant = await self.products.get_by_id(listing_config.main_variant_id)
                if main_variant is None:
                    logger.warning(
                        "Main variant not found, keeping product",
                        product_id=product.id,
                        main_variant_id=listing_config.main_variant_id,
                    )
                    return product
                return main_variant

            group_config = listing_config.configurator_group_config

        if expands_in_listings(group_config):
            return product

        first_variant = await self.products.find_first_by_parent_id(parent.id)
        return first_variant if first_variant is not None else parent


# ============================================================================
# Resolver
# ============================================================================


_STRATEGIES: dict[ListingBehavior, type[ListingStrategy]] = {
    ListingBehavior.PARENT_GROUP_CONFIG: ParentGroupConfigStrategy,
    ListingBehavior.VARIANT_LISTING_CONFIG: VariantListingConfigStrategy,
}


class CanonicalVariantResolver:
    """Resolves the product shown in place of a variant.

    Example usage:
        resolver = CanonicalVariantResolver(ProductRepository(session), probe)
        shown = await resolver.resolve(page.product)
    """

    def __init__(
        self,
        products: ProductRepository,
        probe: PlatformVersionProbe,
    ) -> None:
        """Initialize resolver and select the strategy for this release.

        Args:
            products: Product lookups.
            probe: Platform version gates.
        """
        self.products = products
        self.behavior = probe.listing_behavior()
        strategy_class = _STRATEGIES.get(self.behavior)
        self.strategy = strategy_class(products) if strategy_class else None

    async def resolve(self, product: Product) -> Product:
        """Get the product to show in listings and cross-sells.

        Args:
            product: Product being displayed.

        Returns:
            The canonical product; ``product`` itself when no override applies.
        """
        if self.strategy is None or not product.is_variant:
            return product

        parent = await self.products.get_by_id(product.parent_id)
        if parent is None:
            logger.debug(
                "Parent product not found, keeping product",
                product_id=product.id,
                parent_id=product.parent_id,
            )
            return product

        return await self.strategy.select(product, parent)
