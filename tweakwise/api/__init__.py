"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from tweakwise.api.feeds import router as feeds_router
from tweakwise.api.health import router as health_router
from tweakwise.api.storefront import router as storefront_router

__all__ = [
    "feeds_router",
    "health_router",
    "storefront_router",
]
