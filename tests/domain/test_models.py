"""Tests for domain models."""

from tweakwise.domain.models import (
    FeedConfig,
    IntegrationMode,
    Page,
    Product,
    ProductPage,
    SearchMode,
    VariantListingConfig,
)


class TestVariantListingConfig:
    """Tests for VariantListingConfig."""

    def test_from_none(self) -> None:
        assert VariantListingConfig.from_dict(None) is None

    def test_from_partial_dict(self) -> None:
        config = VariantListingConfig.from_dict({"displayParent": True})
        assert config.display_parent is True
        assert config.main_variant_id is None
        assert config.configurator_group_config is None


class TestProduct:
    """Tests for Product."""

    def test_variant(self) -> None:
        assert Product(id="c", product_number="1", parent_id="p").is_variant

    def test_not_variant(self) -> None:
        assert not Product(id="p", product_number="1").is_variant


class TestPage:
    """Tests for pages and extensions."""

    def test_add_extensions(self) -> None:
        page = Page()
        page.add_extensions({"twConfiguration": {"domainId": "dom1"}})
        assert page.extensions == {"twConfiguration": {"domainId": "dom1"}}

    def test_add_extensions_replaces_key(self) -> None:
        page = Page(extensions={"twConfiguration": {}, "other": 1})
        page.add_extensions({"twConfiguration": {"domainId": "dom1"}})
        assert page.extensions == {"twConfiguration": {"domainId": "dom1"}, "other": 1}

    def test_product_page_is_page(self) -> None:
        page = ProductPage(product=Product(id="p", product_number="1"))
        assert isinstance(page, Page)
        assert page.extensions == {}

    def test_pages_do_not_share_extensions(self) -> None:
        first, second = Page(), Page()
        first.add_extensions({"a": 1})
        assert second.extensions == {}


class TestFeedConfig:
    """Tests for FeedConfig."""

    def test_defaults(self) -> None:
        feed = FeedConfig(
            id="f1",
            token="key",
            integration=IntegrationMode.PLUGINSTUDIO,
            way_of_search=SearchMode.SUGGESTIONS,
        )
        assert feed.name == "Main feed"
        assert feed.domain_ids == frozenset()

    def test_enum_values(self) -> None:
        assert IntegrationMode("javascript") is IntegrationMode.JAVASCRIPT
        assert SearchMode("instant-search") is SearchMode.INSTANT_SEARCH
