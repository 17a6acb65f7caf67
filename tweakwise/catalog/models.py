"""SQLAlchemy models for feeds, categories and products.

Defines the tables the storefront render reads from.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tweakwise.domain.models import (
    FeedConfig,
    IntegrationMode,
    Product,
    SearchMode,
    VariantListingConfig,
)
from tweakwise.infrastructure.database import Base


class FeedModel(Base):
    """Tweakwise feed configuration.

    Attributes:
        id: Unique feed identifier (UUID).
        name: Display name.
        token: Tweakwise instance key.
        integration: Integration mode.
        way_of_search: Search mode.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "tweakwise_feeds"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="Main feed")
    token: Mapped[str] = mapped_column(String(255), nullable=False)
    integration: Mapped[str] = mapped_column(String(50), nullable=False)
    way_of_search: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    domains: Mapped[list["FeedDomainModel"]] = relationship(
        "FeedDomainModel",
        back_populates="feed",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<FeedModel(id={self.id}, name={self.name})>"

    def to_domain(self) -> FeedConfig:
        """Convert to domain feed config.

        Returns:
            FeedConfig instance.
        """
        return FeedConfig(
            id=self.id,
            name=self.name,
            token=self.token,
            integration=IntegrationMode(self.integration),
            way_of_search=SearchMode(self.way_of_search),
            domain_ids=frozenset(d.sales_channel_domain_id for d in self.domains),
        )


class FeedDomainModel(Base):
    """Assignment of a sales channel domain to a feed.

    The unique constraint on the domain column keeps domain to feed
    resolution unambiguous.
    """

    __tablename__ = "tweakwise_feed_sales_channel_domains"

    feed_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("tweakwise_feeds.id", ondelete="CASCADE"),
        primary_key=True,
    )
    sales_channel_domain_id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        unique=True,
    )

    # Relationships
    feed: Mapped["FeedModel"] = relationship("FeedModel", back_populates="domains")


class CategoryModel(Base):
    """Storefront category.

    Attributes:
        id: Category ID.
        parent_id: Parent category ID (None for roots).
        name: Category name.
        position: Sort position among siblings.
        active: Whether the category is active.
        visible: Whether the category shows in navigation.
    """

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    parent_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        """String representation."""
        return f"<CategoryModel(id={self.id}, name={self.name})>"


class ProductModel(Base):
    """Product or product variant.

    Attributes:
        id: Product ID.
        parent_id: Parent product for variants.
        product_number: External product number.
        variant_listing_config: Listing config JSON (camelCase keys).
        configurator_group_config: Group rules JSON stored on the product.
        created_at: Creation timestamp.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    parent_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    product_number: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    variant_listing_config: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    configurator_group_config: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductModel(id={self.id}, product_number={self.product_number})>"

    def to_domain(self) -> Product:
        """Convert to domain product.

        Returns:
            Product instance.
        """
        return Product(
            id=self.id,
            product_number=self.product_number,
            parent_id=self.parent_id,
            created_at=self.created_at,
            variant_listing_config=VariantListingConfig.from_dict(self.variant_listing_config),
            configurator_group_config=self.configurator_group_config,
        )
