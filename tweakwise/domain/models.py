"""Domain models for storefront rendering.

Plain dataclasses describing feeds, the category tree, products with
their variant listing configuration, and the render event handed over
by the storefront.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


# ============================================================================
# Feed Configuration
# ============================================================================


class IntegrationMode(str, Enum):
    """How the Tweakwise front-end is integrated into the storefront."""

    JAVASCRIPT = "javascript"
    PLUGINSTUDIO = "pluginstudio"


class SearchMode(str, Enum):
    """Way of search offered by the Tweakwise front-end."""

    INSTANT_SEARCH = "instant-search"
    SUGGESTIONS = "suggestions"


@dataclass(frozen=True)
class FeedConfig:
    """Tweakwise settings for one or more sales channel domains.

    Attributes:
        id: Feed identifier.
        token: Tweakwise instance key.
        integration: Integration mode.
        way_of_search: Search mode.
        name: Display name.
        domain_ids: Sales channel domains this feed applies to.
    """

    id: str
    token: str
    integration: IntegrationMode
    way_of_search: SearchMode
    name: str = "Main feed"
    domain_ids: frozenset[str] = frozenset()


# ============================================================================
# Category Tree
# ============================================================================


@dataclass
class CategoryTreeNode:
    """One category in a navigation tree.

    Attributes:
        id: Category ID.
        name: Category name (informational only).
        children: Ordered child nodes.
    """

    id: str
    name: str | None = None
    children: list["CategoryTreeNode"] = field(default_factory=list, repr=False)


# ============================================================================
# Products
# ============================================================================


@dataclass(frozen=True)
class VariantListingConfig:
    """Variant listing configuration stored on a parent product.

    Attributes:
        display_parent: Show the parent itself in listings.
        main_variant_id: Variant explicitly chosen to represent the family.
        configurator_group_config: Ordered group rules; a rule with
            ``expressionForListings`` set to ``True`` expands variants
            in listings.
    """

    display_parent: bool | None = None
    main_variant_id: str | None = None
    configurator_group_config: list[dict[str, Any]] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "VariantListingConfig | None":
        """Create config from its stored JSON form.

        Args:
            data: Stored config with camelCase keys, or None.

        Returns:
            VariantListingConfig, or None when nothing is stored.
        """
        if data is None:
            return None
        return cls(
            display_parent=data.get("displayParent"),
            main_variant_id=data.get("mainVariantId"),
            configurator_group_config=data.get("configuratorGroupConfig"),
        )


@dataclass(frozen=True)
class Product:
    """A product or product variant.

    Attributes:
        id: Product ID.
        product_number: External product number.
        parent_id: Parent product ID for variants, None otherwise.
        created_at: Creation timestamp.
        variant_listing_config: Listing configuration (newer shape).
        configurator_group_config: Group rules stored directly on the
            product (older shape).
    """

    id: str
    product_number: str
    parent_id: str | None = None
    created_at: datetime | None = None
    variant_listing_config: VariantListingConfig | None = None
    configurator_group_config: list[dict[str, Any]] | None = None

    @property
    def is_variant(self) -> bool:
        """Check if this product belongs to a variant family."""
        return bool(self.parent_id)


# ============================================================================
# Render Event
# ============================================================================


class ListingBehavior(str, Enum):
    """Variant listing behavior of the running platform release."""

    DISABLED = "disabled"
    PARENT_GROUP_CONFIG = "parent_group_config"
    VARIANT_LISTING_CONFIG = "variant_listing_config"


@dataclass(frozen=True)
class SalesChannelContext:
    """Sales channel data of the current request.

    Attributes:
        domain_id: Sales channel domain ID.
        navigation_category_id: Root category of the sales channel navigation.
        sales_channel_id: Sales channel ID.
    """

    domain_id: str
    navigation_category_id: str
    sales_channel_id: str | None = None


@dataclass
class Page:
    """A storefront page that can carry extensions."""

    extensions: dict[str, Any] = field(default_factory=dict)

    def add_extensions(self, extensions: dict[str, Any]) -> None:
        """Attach extensions to the page, replacing existing keys."""
        self.extensions.update(extensions)


@dataclass
class ProductPage(Page):
    """Product detail page."""

    product: Product | None = None


@dataclass
class StorefrontRenderEvent:
    """A storefront page render.

    Attributes:
        context: Sales channel context.
        locale: Active request locale (e.g. "en-GB").
        page: Page being rendered, if any.
    """

    context: SalesChannelContext
    locale: str
    page: Page | None = None
