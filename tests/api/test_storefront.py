"""Tests for storefront render endpoints."""

import hashlib
import zlib

from fastapi import status


def render_body(**overrides) -> dict:
    body = {
        "domain_id": "dom1",
        "navigation_category_id": "root",
        "locale": "en-GB",
    }
    body.update(overrides)
    return body


class TestRender:
    """Tests for POST /storefront/render."""

    def test_render_without_auth(self, client) -> None:
        """Storefront renders do not need an API key."""
        response = client.post("/storefront/render", json=render_body())
        assert response.status_code == status.HTTP_200_OK

    def test_unknown_domain(self, client, mock_navigation) -> None:
        """Domains without a feed get no extensions."""
        response = client.post("/storefront/render", json=render_body(domain_id="other"))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"extensions": {}}
        mock_navigation.load.assert_not_awaited()

    def test_navigation_page(self, client) -> None:
        """Navigation pages get the configuration without cross-sell."""
        response = client.post(
            "/storefront/render",
            json=render_body(page={"type": "navigation"}),
        )

        assert response.status_code == status.HTTP_200_OK
        config = response.json()["extensions"]["twConfiguration"]
        assert config == {
            "domainId": "dom1",
            "rootCategoryId": "root",
            "instanceKey": "instance-key",
            "integration": "javascript",
            "wayOfSearch": "instant-search",
            "categoryData": {
                hashlib.md5(f"{cid}_dom1".encode()).hexdigest(): cid
                for cid in ["A", "A1", "A2", "B"]
            },
        }

    def test_render_without_page(self, client) -> None:
        response = client.post("/storefront/render", json=render_body())

        config = response.json()["extensions"]["twConfiguration"]
        assert "crossSellProductId" not in config

    def test_product_page(self, client) -> None:
        """Product pages carry the cross-sell identifier."""
        response = client.post(
            "/storefront/render",
            json=render_body(locale="nl-NL", page={"type": "product", "product_id": "simple"}),
        )

        assert response.status_code == status.HTTP_200_OK
        config = response.json()["extensions"]["twConfiguration"]
        expected_hash = format(zlib.crc32(b"dom1"), "x")
        assert config["crossSellProductId"] == f"SW10001 (nl-NL - {expected_hash})"

    def test_variant_product_page(self, client) -> None:
        """Variants are advertised by the first child of their family."""
        response = client.post(
            "/storefront/render",
            json=render_body(page={"type": "product", "product_id": "child2"}),
        )

        config = response.json()["extensions"]["twConfiguration"]
        assert config["crossSellProductId"].startswith("SW10002.1 (en-GB - ")

    def test_product_page_unknown_product(self, client) -> None:
        response = client.post(
            "/storefront/render",
            json=render_body(page={"type": "product", "product_id": "missing"}),
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error_code"] == "PRODUCT_NOT_FOUND"

    def test_unknown_domain_skips_product_lookup(self, client, mock_product_repository) -> None:
        """Without a feed the product page is never looked up."""
        response = client.post(
            "/storefront/render",
            json=render_body(
                domain_id="other",
                page={"type": "product", "product_id": "missing"},
            ),
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"extensions": {}}
        mock_product_repository.get_by_id.assert_not_awaited()

    def test_product_page_requires_product_id(self, client) -> None:
        response = client.post(
            "/storefront/render",
            json=render_body(page={"type": "product"}),
        )
        assert response.status_code == 422

    def test_missing_domain(self, client) -> None:
        response = client.post("/storefront/render", json={"navigation_category_id": "root"})
        assert response.status_code == 422

    def test_request_id_echoed(self, client) -> None:
        response = client.post(
            "/storefront/render",
            json=render_body(),
            headers={"X-Request-ID": "render-1"},
        )
        assert response.headers["X-Request-ID"] == "render-1"
