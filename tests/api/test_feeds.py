"""Tests for feed administration endpoints."""

from fastapi import status


class TestAuthentication:
    """Feed endpoints require the API key."""

    def test_missing_key(self, client) -> None:
        response = client.get("/feeds")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error_code"] == "UNAUTHORIZED"

    def test_invalid_key(self, client) -> None:
        response = client.get("/feeds", headers={"Authorization": "Bearer wrong"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error_code"] == "INVALID_API_KEY"

    def test_invalid_format(self, client) -> None:
        response = client.get("/feeds", headers={"Authorization": "Token abc"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestListFeeds:
    """Tests for GET /feeds."""

    def test_list(self, auth_client) -> None:
        response = auth_client.get("/feeds")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 1
        assert data["feeds"][0] == {
            "id": "feed-1",
            "name": "Main feed",
            "token": "instance-key",
            "integration": "javascript",
            "way_of_search": "instant-search",
            "domain_ids": ["dom1"],
        }


class TestGetFeed:
    """Tests for GET /feeds/{feed_id}."""

    def test_get(self, auth_client) -> None:
        response = auth_client.get("/feeds/feed-1")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["token"] == "instance-key"

    def test_not_found(self, auth_client) -> None:
        response = auth_client.get("/feeds/missing")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error_code"] == "FEED_NOT_FOUND"


class TestCreateFeed:
    """Tests for POST /feeds."""

    def test_create(self, auth_client, mock_feed_repository) -> None:
        response = auth_client.post(
            "/feeds",
            json={
                "token": "new-key",
                "integration": "pluginstudio",
                "way_of_search": "suggestions",
                "domain_ids": ["dom2"],
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Main feed"
        assert data["domain_ids"] == ["dom2"]
        mock_feed_repository.save.assert_awaited_once()

    def test_domain_already_assigned(self, auth_client, mock_feed_repository) -> None:
        response = auth_client.post(
            "/feeds",
            json={
                "token": "new-key",
                "integration": "javascript",
                "way_of_search": "suggestions",
                "domain_ids": ["dom1"],
            },
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error_code"] == "DOMAIN_ALREADY_ASSIGNED"
        mock_feed_repository.save.assert_not_awaited()

    def test_invalid_integration(self, auth_client) -> None:
        response = auth_client.post(
            "/feeds",
            json={
                "token": "new-key",
                "integration": "iframe",
                "way_of_search": "suggestions",
                "domain_ids": ["dom2"],
            },
        )
        assert response.status_code == 422

    def test_requires_domains(self, auth_client) -> None:
        response = auth_client.post(
            "/feeds",
            json={
                "token": "new-key",
                "integration": "javascript",
                "way_of_search": "suggestions",
                "domain_ids": [],
            },
        )
        assert response.status_code == 422
