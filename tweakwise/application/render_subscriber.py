"""Storefront render subscriber.

Runs once per storefront page render: looks up the feed for the current
domain and attaches the Tweakwise configuration to the page.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from tweakwise.application.config_assembler import (
    ConfigAssembler,
    TweakwiseConfiguration,
    cross_sell_product_id,
)
from tweakwise.catalog.category_index import CategoryIndexBuilder
from tweakwise.catalog.repository import FeedRepository, NavigationLoader, ProductRepository
from tweakwise.catalog.variant_resolver import CanonicalVariantResolver
from tweakwise.domain.models import FeedConfig, ProductPage, StorefrontRenderEvent
from tweakwise.domain.version import PlatformVersionProbe
from tweakwise.infrastructure.config import settings

logger = structlog.get_logger()

EXTENSION_NAME = "twConfiguration"


class StorefrontRenderSubscriber:
    """Adds the Tweakwise configuration to rendered storefront pages.

    Example usage:
        subscriber = get_render_subscriber(session)
        config = await subscriber.on_render(event)
    """

    def __init__(
        self,
        feeds: FeedRepository,
        products: ProductRepository,
        navigation: NavigationLoader,
        probe: PlatformVersionProbe,
        navigation_depth: int = 99,
    ) -> None:
        """Initialize subscriber.

        Args:
            feeds: Feed lookups by domain.
            products: Product lookups.
            navigation: Navigation tree loader.
            probe: Platform version gates.
            navigation_depth: Levels of navigation to index.
        """
        self.feeds = feeds
        self.navigation = navigation
        self.navigation_depth = navigation_depth
        self.resolver = CanonicalVariantResolver(products, probe)
        self.index_builder = CategoryIndexBuilder()
        self.assembler = ConfigAssembler()

    async def find_feed(self, domain_id: str) -> FeedConfig | None:
        """Get the feed for a domain; renders for other domains are skipped."""
        feed = await self.feeds.find_by_domain(domain_id)
        if feed is None:
            logger.debug("No Tweakwise feed for domain", domain_id=domain_id)
        return feed

    async def on_render(self, event: StorefrontRenderEvent) -> TweakwiseConfiguration | None:
        """Build and attach the Tweakwise configuration for a render.

        Args:
            event: Storefront render event.

        Returns:
            The configuration, or None when no feed is set up for the domain.
        """
        feed = await self.find_feed(event.context.domain_id)
        if feed is None:
            return None
        return await self.attach(event, feed)

    async def attach(
        self, event: StorefrontRenderEvent, feed: FeedConfig
    ) -> TweakwiseConfiguration:
        """Build the configuration for a render using an already resolved feed.

        Args:
            event: Storefront render event.
            feed: Feed assigned to the event domain.

        Returns:
            The configuration, also attached to the page when there is one.
        """
        domain_id = event.context.domain_id
        root_category_id = event.context.navigation_category_id
        tree = await self.navigation.load(root_category_id, self.navigation_depth)
        category_data = self.index_builder.build(tree, domain_id)

        cross_sell_id = None
        page = event.page
        if isinstance(page, ProductPage) and page.product is not None:
            product = await self.resolver.resolve(page.product)
            cross_sell_id = cross_sell_product_id(product.product_number, event.locale, domain_id)

        config = self.assembler.assemble(
            feed,
            domain_id=domain_id,
            root_category_id=root_category_id,
            category_index=category_data,
            cross_sell_product_id=cross_sell_id,
        )

        if page is not None:
            page.add_extensions({EXTENSION_NAME: config.to_dict()})

        logger.info(
            "Tweakwise configuration attached",
            domain_id=domain_id,
            feed_id=feed.id,
            category_count=len(category_data),
            cross_sell=cross_sell_id is not None,
        )
        return config


def get_render_subscriber(session: AsyncSession) -> StorefrontRenderSubscriber:
    """Get render subscriber bound to a database session.

    Args:
        session: Async SQLAlchemy session.

    Returns:
        StorefrontRenderSubscriber instance.
    """
    return StorefrontRenderSubscriber(
        feeds=FeedRepository(session),
        products=ProductRepository(session),
        navigation=NavigationLoader(session),
        probe=PlatformVersionProbe.from_settings(settings),
        navigation_depth=settings.navigation_depth,
    )
