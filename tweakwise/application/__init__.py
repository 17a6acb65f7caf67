"""Application layer module.

Contains application services (use cases) that orchestrate
domain logic and infrastructure.
"""

from tweakwise.application.config_assembler import (
    ConfigAssembler,
    TweakwiseConfiguration,
    cross_sell_product_id,
)
from tweakwise.application.feed_service import FeedService, get_feed_service
from tweakwise.application.render_subscriber import (
    StorefrontRenderSubscriber,
    get_render_subscriber,
)

__all__ = [
    "ConfigAssembler",
    "TweakwiseConfiguration",
    "cross_sell_product_id",
    "FeedService",
    "get_feed_service",
    "StorefrontRenderSubscriber",
    "get_render_subscriber",
]
