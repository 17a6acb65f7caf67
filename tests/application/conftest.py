"""Shared fixtures for application service tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from tweakwise.catalog.repository import FeedRepository, NavigationLoader, ProductRepository
from tweakwise.domain.models import CategoryTreeNode, FeedConfig, IntegrationMode, SearchMode


@pytest.fixture
def feed() -> FeedConfig:
    """Create a feed assigned to dom1."""
    return FeedConfig(
        id="feed-1",
        token="instance-key",
        integration=IntegrationMode.JAVASCRIPT,
        way_of_search=SearchMode.SUGGESTIONS,
        domain_ids=frozenset({"dom1"}),
    )


@pytest.fixture
def navigation_tree() -> list[CategoryTreeNode]:
    """Navigation tree below Root: A -> [A1, A2], B."""
    return [
        CategoryTreeNode(
            id="A",
            children=[CategoryTreeNode(id="A1"), CategoryTreeNode(id="A2")],
        ),
        CategoryTreeNode(id="B"),
    ]


@pytest.fixture
def mock_feeds(feed) -> MagicMock:
    """Create a feed repository mock that knows dom1."""
    feeds = MagicMock(spec=FeedRepository)
    feeds.find_by_domain = AsyncMock(
        side_effect=lambda domain_id: feed if domain_id in feed.domain_ids else None
    )
    feeds.get_by_id = AsyncMock(return_value=None)
    feeds.list_all = AsyncMock(return_value=[feed])
    feeds.find_domain_owners = AsyncMock(return_value={})
    feeds.save = AsyncMock(side_effect=lambda f: f)
    return feeds


@pytest.fixture
def mock_products() -> MagicMock:
    """Create an empty product repository mock."""
    products = MagicMock(spec=ProductRepository)
    products.get_by_id = AsyncMock(return_value=None)
    products.find_first_by_parent_id = AsyncMock(return_value=None)
    return products


@pytest.fixture
def mock_navigation(navigation_tree) -> MagicMock:
    """Create a navigation loader mock returning the sample tree."""
    navigation = MagicMock(spec=NavigationLoader)
    navigation.load = AsyncMock(return_value=navigation_tree)
    return navigation
