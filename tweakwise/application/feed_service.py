"""Feed administration service.

Lists, reads and creates Tweakwise feed configurations. A sales channel
domain can belong to one feed only; this is checked before writing.
"""

from uuid import uuid4

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from tweakwise.catalog.repository import FeedRepository
from tweakwise.domain.exceptions import DomainAlreadyAssignedError, FeedNotFoundError
from tweakwise.domain.models import FeedConfig, IntegrationMode, SearchMode

logger = structlog.get_logger()


class FeedService:
    """Service for feed administration."""

    def __init__(self, repository: FeedRepository) -> None:
        self.repository = repository

    async def list_feeds(self) -> list[FeedConfig]:
        """List all feeds."""
        return await self.repository.list_all()

    async def get_feed(self, feed_id: str) -> FeedConfig:
        """Get a feed by ID.

        Args:
            feed_id: Feed ID.

        Returns:
            The feed.

        Raises:
            FeedNotFoundError: If the feed does not exist.
        """
        feed = await self.repository.get_by_id(feed_id)
        if feed is None:
            raise FeedNotFoundError(feed_id)
        return feed

    async def create_feed(
        self,
        token: str,
        integration: IntegrationMode,
        way_of_search: SearchMode,
        domain_ids: list[str],
        name: str = "Main feed",
    ) -> FeedConfig:
        """Create a feed for a set of sales channel domains.

        Args:
            token: Tweakwise instance key.
            integration: Integration mode.
            way_of_search: Search mode.
            domain_ids: Domains the feed applies to.
            name: Display name.

        Returns:
            The created feed.

        Raises:
            DomainAlreadyAssignedError: If a domain already has a feed.
        """
        owners = await self.repository.find_domain_owners(domain_ids)
        for domain_id in domain_ids:
            if domain_id in owners:
                logger.warning(
                    "Domain already assigned to a feed",
                    domain_id=domain_id,
                    feed_id=owners[domain_id],
                )
                raise DomainAlreadyAssignedError(domain_id, owners[domain_id])

        feed = FeedConfig(
            id=str(uuid4()),
            name=name,
            token=token,
            integration=integration,
            way_of_search=way_of_search,
            domain_ids=frozenset(domain_ids),
        )
        await self.repository.save(feed)

        logger.info("Feed created", feed_id=feed.id, domain_count=len(feed.domain_ids))
        return feed


def get_feed_service(session: AsyncSession) -> FeedService:
    """Get feed service bound to a database session.

    Args:
        session: Async SQLAlchemy session.

    Returns:
        FeedService instance.
    """
    return FeedService(FeedRepository(session))
