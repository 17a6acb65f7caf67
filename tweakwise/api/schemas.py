"""API schemas for the Tweakwise frontend service.

Pydantic models for request/response validation and serialization.
"""

from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, Field, model_validator

from tweakwise.domain.models import IntegrationMode, SearchMode


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Storefront Render Schemas
# ============================================================================


class PageType(str, Enum):
    """Kind of storefront page being rendered."""

    PRODUCT = "product"
    NAVIGATION = "navigation"
    GENERIC = "generic"


class PageSchema(BaseModel):
    """Page being rendered."""

    type: PageType = Field(default=PageType.GENERIC, description="Page kind")
    product_id: str | None = Field(
        default=None, description="Detail product, required for product pages"
    )

    @model_validator(mode="after")
    def check_product_id(self) -> Self:
        """Product pages must name their product."""
        if self.type == PageType.PRODUCT and not self.product_id:
            raise ValueError("product_id is required for product pages")
        return self


class RenderRequest(BaseModel):
    """Storefront render event."""

    domain_id: str = Field(..., min_length=1, description="Sales channel domain ID")
    navigation_category_id: str = Field(
        ..., min_length=1, description="Root category of the sales channel navigation"
    )
    sales_channel_id: str | None = Field(default=None, description="Sales channel ID")
    locale: str = Field(default="en-GB", min_length=1, description="Request locale")
    page: PageSchema | None = Field(default=None, description="Page being rendered")


class RenderResponse(BaseModel):
    """Page extensions to merge into the render."""

    extensions: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Extensions by name; empty when the domain has no feed",
    )


# ============================================================================
# Feed Schemas
# ============================================================================


class FeedCreateRequest(BaseModel):
    """Request to create a feed."""

    name: str = Field(default="Main feed", min_length=1, max_length=255)
    token: str = Field(..., min_length=1, max_length=255, description="Tweakwise instance key")
    integration: IntegrationMode = Field(..., description="Integration mode")
    way_of_search: SearchMode = Field(..., description="Search mode")
    domain_ids: list[str] = Field(
        ..., min_length=1, description="Sales channel domains the feed applies to"
    )


class FeedResponse(BaseModel):
    """Feed details."""

    id: str = Field(..., description="Feed identifier")
    name: str = Field(..., description="Display name")
    token: str = Field(..., description="Tweakwise instance key")
    integration: IntegrationMode = Field(..., description="Integration mode")
    way_of_search: SearchMode = Field(..., description="Search mode")
    domain_ids: list[str] = Field(default_factory=list, description="Assigned domains")


class FeedListResponse(BaseModel):
    """List of feeds."""

    feeds: list[FeedResponse] = Field(..., description="Feeds")
    total: int = Field(..., description="Number of feeds")
