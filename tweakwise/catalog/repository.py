"""Repositories for feeds, products and the navigation tree.

Read access for storefront renders plus the writes needed by feed
administration.
"""

from collections.abc import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tweakwise.catalog.models import CategoryModel, FeedDomainModel, FeedModel, ProductModel
from tweakwise.domain.models import CategoryTreeNode, FeedConfig, Product


class FeedRepository:
    """Repository for Tweakwise feed configurations.

    Example usage:
        async with async_session_factory() as session:
            repo = FeedRepository(session)
            feed = await repo.find_by_domain(domain_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def find_by_domain(self, domain_id: str) -> FeedConfig | None:
        """Find the feed assigned to a sales channel domain.

        Domains are unique per feed, so at most one row matches. Should
        the data ever disagree, the oldest feed wins.

        Args:
            domain_id: Sales channel domain ID.

        Returns:
            FeedConfig if the domain has a feed, None otherwise.
        """
        query = (
            select(FeedModel)
            .join(FeedModel.domains)
            .where(FeedDomainModel.sales_channel_domain_id == domain_id)
            .options(selectinload(FeedModel.domains))
            .order_by(FeedModel.created_at, FeedModel.id)
            .limit(1)
        )
        result = await self.session.execute(query)
        feed = result.scalars().first()
        return feed.to_domain() if feed else None

    async def get_by_id(self, feed_id: str) -> FeedConfig | None:
        """Get feed by ID.

        Args:
            feed_id: Feed ID.

        Returns:
            FeedConfig if found, None otherwise.
        """
        query = (
            select(FeedModel)
            .where(FeedModel.id == feed_id)
            .options(selectinload(FeedModel.domains))
        )
        result = await self.session.execute(query)
        feed = result.scalar_one_or_none()
        return feed.to_domain() if feed else None

    async def list_all(self) -> list[FeedConfig]:
        """List all feeds ordered by name.

        Returns:
            All feed configs.
        """
        query = (
            select(FeedModel)
            .options(selectinload(FeedModel.domains))
            .order_by(FeedModel.name, FeedModel.id)
        )
        result = await self.session.execute(query)
        return [feed.to_domain() for feed in result.scalars().all()]

    async def find_domain_owners(self, domain_ids: Iterable[str]) -> dict[str, str]:
        """Find which feeds already own the given domains.

        Args:
            domain_ids: Sales channel domain IDs.

        Returns:
            Mapping of domain ID to owning feed ID.
        """
        query = select(FeedDomainModel).where(
            FeedDomainModel.sales_channel_domain_id.in_(list(domain_ids))
        )
        result = await self.session.execute(query)
        return {row.sales_channel_domain_id: row.feed_id for row in result.scalars().all()}

    async def save(self, feed: FeedConfig) -> FeedConfig:
        """Persist a new feed with its domain assignments.

        Args:
            feed: Feed to save.

        Returns:
            Saved feed.
        """
        model = FeedModel(
            id=feed.id,
            name=feed.name,
            token=feed.token,
            integration=feed.integration.value,
            way_of_search=feed.way_of_search.value,
            domains=[
                FeedDomainModel(sales_channel_domain_id=domain_id)
                for domain_id in sorted(feed.domain_ids)
            ],
        )
        self.session.add(model)
        await self.session.flush()
        return feed


class ProductRepository:
    """Repository for product lookups."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        result = await self.session.execute(
            select(ProductModel).where(ProductModel.id == product_id)
        )
        product = result.scalar_one_or_none()
        return product.to_domain() if product else None

    async def find_first_by_parent_id(self, parent_id: str) -> Product | None:
        """Get the first created variant of a parent product.

        Args:
            parent_id: Parent product ID.

        Returns:
            Oldest variant if the parent has any, None otherwise.
        """
        query = (
            select(ProductModel)
            .where(ProductModel.parent_id == parent_id)
            .order_by(ProductModel.created_at, ProductModel.id)
            .limit(1)
        )
        result = await self.session.execute(query)
        product = result.scalars().first()
        return product.to_domain() if product else None


def build_navigation_tree(
    categories: Sequence[CategoryModel],
    root_category_id: str,
    depth: int,
) -> list[CategoryTreeNode]:
    """Assemble the navigation tree below a root category.

    Args:
        categories: Category rows in sibling order.
        root_category_id: Root of the sales channel navigation.
        depth: Number of levels to load below the root.

    Returns:
        Tree nodes for the root's children; the root itself is excluded.
    """
    children_of: dict[str | None, list[CategoryTreeNode]] = {}
    for category in categories:
        node = CategoryTreeNode(id=category.id, name=category.name)
        children_of.setdefault(category.parent_id, []).append(node)

    roots = children_of.get(root_category_id, [])
    attached = {root_category_id}
    level = list(roots)
    for _ in range(1, depth):
        next_level = []
        for node in level:
            if node.id in attached:
                continue
            attached.add(node.id)
            node.children = children_of.get(node.id, [])
            next_level.extend(node.children)
        level = next_level

    return roots


class NavigationLoader:
    """Loads the storefront navigation tree.

    Only active and visible categories are part of the navigation.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def load(self, root_category_id: str, depth: int) -> list[CategoryTreeNode]:
        """Load the navigation tree below a root category.

        Args:
            root_category_id: Root of the sales channel navigation.
            depth: Number of levels to load below the root.

        Returns:
            Tree nodes for the root's children.
        """
        query = (
            select(CategoryModel)
            .where(CategoryModel.active.is_(True), CategoryModel.visible.is_(True))
            .order_by(CategoryModel.position, CategoryModel.name, CategoryModel.id)
        )
        result = await self.session.execute(query)
        return build_navigation_tree(result.scalars().all(), root_category_id, depth)
