"""Feed administration endpoints.

Provides endpoints for listing, reading and creating Tweakwise feeds.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tweakwise.api.schemas import (
    ErrorResponse,
    FeedCreateRequest,
    FeedListResponse,
    FeedResponse,
)
from tweakwise.application.feed_service import FeedService, get_feed_service
from tweakwise.domain.exceptions import DomainAlreadyAssignedError, FeedNotFoundError
from tweakwise.domain.models import FeedConfig
from tweakwise.infrastructure.database import get_session

router = APIRouter(prefix="/feeds", tags=["Feeds"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> FeedService:
    """Get feed service for the request session."""
    return get_feed_service(session)


# ============================================================================
# Converters
# ============================================================================


def feed_to_response(feed: FeedConfig) -> FeedResponse:
    """Convert FeedConfig to response schema."""
    return FeedResponse(
        id=feed.id,
        name=feed.name,
        token=feed.token,
        integration=feed.integration,
        way_of_search=feed.way_of_search,
        domain_ids=sorted(feed.domain_ids),
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=FeedListResponse,
    responses={401: {"model": ErrorResponse}},
    summary="List feeds",
)
async def list_feeds(
    service: Annotated[FeedService, Depends(get_service)],
) -> FeedListResponse:
    """List all feeds."""
    feeds = await service.list_feeds()
    return FeedListResponse(
        feeds=[feed_to_response(feed) for feed in feeds],
        total=len(feeds),
    )


@router.get(
    "/{feed_id}",
    response_model=FeedResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Get feed details",
)
async def get_feed(
    feed_id: str,
    service: Annotated[FeedService, Depends(get_service)],
) -> FeedResponse:
    """Get a feed by ID.

    Raises:
        HTTPException: If feed not found.
    """
    try:
        feed = await service.get_feed(feed_id)
    except FeedNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error_code": "FEED_NOT_FOUND", "message": e.message},
        ) from e

    return feed_to_response(feed)


@router.post(
    "",
    response_model=FeedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Create feed",
    description="Create a feed and assign it to sales channel domains.",
)
async def create_feed(
    request: FeedCreateRequest,
    service: Annotated[FeedService, Depends(get_service)],
) -> FeedResponse:
    """Create a feed.

    Args:
        request: Feed data.
        service: Feed service.

    Returns:
        Created feed.

    Raises:
        HTTPException: If a domain already belongs to another feed.
    """
    try:
        feed = await service.create_feed(
            token=request.token,
            integration=request.integration,
            way_of_search=request.way_of_search,
            domain_ids=request.domain_ids,
            name=request.name,
        )
    except DomainAlreadyAssignedError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "error_code": "DOMAIN_ALREADY_ASSIGNED",
                "message": e.message,
                "details": [
                    {"field": "domain_ids", "message": e.details["domain_id"]},
                ],
            },
        ) from e

    return feed_to_response(feed)
