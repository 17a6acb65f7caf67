"""Shared fixtures for API tests."""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from tweakwise.api.feeds import get_service
from tweakwise.api.storefront import get_products, get_subscriber
from tweakwise.application.feed_service import FeedService
from tweakwise.application.render_subscriber import StorefrontRenderSubscriber
from tweakwise.catalog.repository import FeedRepository, NavigationLoader, ProductRepository
from tweakwise.domain.models import (
    CategoryTreeNode,
    FeedConfig,
    IntegrationMode,
    Product,
    SearchMode,
)
from tweakwise.domain.version import PlatformVersionProbe
from tweakwise.infrastructure.config import settings
from tweakwise.main import app


# ============================================================================
# Sample Data
# ============================================================================


@pytest.fixture
def feed() -> FeedConfig:
    """Create a feed assigned to dom1."""
    return FeedConfig(
        id="feed-1",
        name="Main feed",
        token="instance-key",
        integration=IntegrationMode.JAVASCRIPT,
        way_of_search=SearchMode.INSTANT_SEARCH,
        domain_ids=frozenset({"dom1"}),
    )


@pytest.fixture
def catalog() -> dict[str, Product]:
    """Products by ID: a simple product and a variant family."""
    products = [
        Product(id="simple", product_number="SW10001"),
        Product(id="parent1", product_number="SW10002"),
        Product(id="child1", product_number="SW10002.1", parent_id="parent1"),
        Product(id="child2", product_number="SW10002.2", parent_id="parent1"),
    ]
    return {p.id: p for p in products}


# ============================================================================
# Repository Mocks
# ============================================================================


@pytest.fixture
def mock_feed_repository(feed) -> MagicMock:
    """Feed repository mock that knows dom1."""
    feeds = MagicMock(spec=FeedRepository)
    feeds.find_by_domain = AsyncMock(
        side_effect=lambda domain_id: feed if domain_id in feed.domain_ids else None
    )
    feeds.get_by_id = AsyncMock(
        side_effect=lambda feed_id: feed if feed_id == feed.id else None
    )
    feeds.list_all = AsyncMock(return_value=[feed])
    feeds.find_domain_owners = AsyncMock(
        side_effect=lambda domain_ids: {d: feed.id for d in domain_ids if d in feed.domain_ids}
    )
    feeds.save = AsyncMock(side_effect=lambda f: f)
    return feeds


@pytest.fixture
def mock_product_repository(catalog) -> MagicMock:
    """Product repository mock serving the sample catalog."""
    products = MagicMock(spec=ProductRepository)
    products.get_by_id = AsyncMock(side_effect=lambda product_id: catalog.get(product_id))
    products.find_first_by_parent_id = AsyncMock(
        side_effect=lambda parent_id: next(
            (p for p in catalog.values() if p.parent_id == parent_id), None
        )
    )
    return products


@pytest.fixture
def mock_navigation() -> MagicMock:
    """Navigation loader mock: Root -> [A -> [A1, A2], B]."""
    navigation = MagicMock(spec=NavigationLoader)
    navigation.load = AsyncMock(
        return_value=[
            CategoryTreeNode(
                id="A",
                children=[CategoryTreeNode(id="A1"), CategoryTreeNode(id="A2")],
            ),
            CategoryTreeNode(id="B"),
        ]
    )
    return navigation


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def overrides(
    mock_feed_repository, mock_product_repository, mock_navigation
) -> Generator[None, None, None]:
    """Route dependencies to repository mocks instead of the database."""
    app.dependency_overrides[get_subscriber] = lambda: StorefrontRenderSubscriber(
        feeds=mock_feed_repository,
        products=mock_product_repository,
        navigation=mock_navigation,
        probe=PlatformVersionProbe("6.5.8.2"),
    )
    app.dependency_overrides[get_products] = lambda: mock_product_repository
    app.dependency_overrides[get_service] = lambda: FeedService(mock_feed_repository)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(overrides) -> TestClient:
    """Create test client without authentication."""
    return TestClient(app)


@pytest.fixture
def auth_client(overrides) -> TestClient:
    """Create test client with valid API key authentication."""
    return TestClient(
        app,
        headers={"Authorization": f"Bearer {settings.tweakwise_api_key}"},
    )
