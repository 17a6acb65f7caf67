"""Tweakwise configuration payload.

Packages the resolved feed, category index and cross-sell identifier
into the ``twConfiguration`` extension read by the front-end script.
"""

import zlib
from dataclasses import dataclass, field
from typing import Any

from tweakwise.domain.models import FeedConfig, IntegrationMode, SearchMode


def cross_sell_product_id(product_number: str, locale: str, domain_id: str) -> str:
    """Build the cross-sell identifier for a product on a domain.

    Args:
        product_number: Product number of the canonical product.
        locale: Active request locale.
        domain_id: Sales channel domain ID.

    Returns:
        Identifier like ``"SW10001 (en-GB - <crc32 of domain as hex>)"``.
    """
    return f"{product_number} ({locale} - {zlib.crc32(domain_id.encode()):x})"


@dataclass(frozen=True)
class TweakwiseConfiguration:
    """Configuration payload for one storefront render.

    Attributes:
        domain_id: Sales channel domain ID.
        root_category_id: Root of the sales channel navigation.
        instance_key: Tweakwise instance key.
        integration: Integration mode.
        way_of_search: Search mode.
        category_data: Domain-salted key to category ID.
        cross_sell_product_id: Cross-sell identifier on product pages.
    """

    domain_id: str
    root_category_id: str
    instance_key: str
    integration: IntegrationMode
    way_of_search: SearchMode
    category_data: dict[str, str] = field(default_factory=dict)
    cross_sell_product_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the front-end wire format.

        Returns:
            Dictionary with the field names the front-end script expects.
        """
        data: dict[str, Any] = {
            "domainId": self.domain_id,
            "rootCategoryId": self.root_category_id,
            "instanceKey": self.instance_key,
            "integration": self.integration.value,
            "wayOfSearch": self.way_of_search.value,
            "categoryData": dict(self.category_data),
        }
        if self.cross_sell_product_id is not None:
            data["crossSellProductId"] = self.cross_sell_product_id
        return data


class ConfigAssembler:
    """Assembles the Tweakwise configuration payload."""

    def assemble(
        self,
        feed: FeedConfig,
        domain_id: str,
        root_category_id: str,
        category_index: dict[str, str],
        cross_sell_product_id: str | None = None,
    ) -> TweakwiseConfiguration:
        """Build the payload.

        Args:
            feed: Feed resolved for the domain.
            domain_id: Sales channel domain ID.
            root_category_id: Root of the sales channel navigation.
            category_index: Output of the category index builder.
            cross_sell_product_id: Set only on product pages.

        Returns:
            TweakwiseConfiguration instance.
        """
        return TweakwiseConfiguration(
            domain_id=domain_id,
            root_category_id=root_category_id,
            instance_key=feed.token,
            integration=feed.integration,
            way_of_search=feed.way_of_search,
            category_data=category_index,
            cross_sell_product_id=cross_sell_product_id,
        )
