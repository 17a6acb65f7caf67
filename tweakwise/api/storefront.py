"""Storefront render endpoints.

Called by the storefront for every page render to obtain the Tweakwise
page extension.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tweakwise.api.schemas import ErrorResponse, PageType, RenderRequest, RenderResponse
from tweakwise.application.render_subscriber import (
    StorefrontRenderSubscriber,
    get_render_subscriber,
)
from tweakwise.catalog.repository import ProductRepository
from tweakwise.domain.models import Page, ProductPage, SalesChannelContext, StorefrontRenderEvent
from tweakwise.infrastructure.database import get_session

logger = structlog.get_logger()

router = APIRouter(prefix="/storefront", tags=["Storefront"])


# ============================================================================
# Dependencies
# ============================================================================


def get_subscriber(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> StorefrontRenderSubscriber:
    """Get render subscriber for the request session."""
    return get_render_subscriber(session)


def get_products(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductRepository:
    """Get product repository for the request session."""
    return ProductRepository(session)


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/render",
    response_model=RenderResponse,
    responses={
        404: {"model": ErrorResponse},
    },
    summary="Render page extensions",
    description="Get the Tweakwise configuration extension for a page render.",
)
async def render(
    request: RenderRequest,
    subscriber: Annotated[StorefrontRenderSubscriber, Depends(get_subscriber)],
    products: Annotated[ProductRepository, Depends(get_products)],
) -> RenderResponse:
    """Build page extensions for a storefront render.

    Args:
        request: Render event data.
        subscriber: Render subscriber.
        products: Product repository for product pages.

    Returns:
        Extensions to attach to the page.

    Raises:
        HTTPException: If a product page names an unknown product.
    """
    # Domains without a feed skip the feature before any catalog lookup
    feed = await subscriber.find_feed(request.domain_id)
    if feed is None:
        return RenderResponse()

    page: Page | None = None
    if request.page is not None:
        if request.page.type == PageType.PRODUCT:
            product = await products.get_by_id(request.page.product_id)
            if product is None:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail={
                        "error_code": "PRODUCT_NOT_FOUND",
                        "message": f"Product not found: {request.page.product_id}",
                    },
                )
            page = ProductPage(product=product)
        else:
            page = Page()

    event = StorefrontRenderEvent(
        context=SalesChannelContext(
            domain_id=request.domain_id,
            navigation_category_id=request.navigation_category_id,
            sales_channel_id=request.sales_channel_id,
        ),
        locale=request.locale,
        page=page,
    )

    config = await subscriber.attach(event, feed)
    if page is None:
        return RenderResponse(extensions={"twConfiguration": config.to_dict()})
    return RenderResponse(extensions=page.extensions)
