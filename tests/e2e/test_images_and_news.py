"""End-to-end tests for image upload and the news bar."""

import pytest
from fastapi.testclient import TestClient

from feedback.interface.api.app import create_app
from tests.conftest import ADMIN_TOKEN
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(build_test_container()))


class TestImageUpload:
    """End-to-end tests for POST /images."""

    def test_upload_and_attach(self, client):
        """An uploaded image URL can be attached to a thread."""
        # Act
        uploaded = client.post(
            "/images",
            content=b"\xff\xd8\xff\xe0fake-jpeg",
            headers={"Content-Type": "image/jpeg"},
        )
        url = uploaded.json()["url"]
        thread = client.post(
            "/threads", json={"content": "Look", "rating": 3, "image_url": url}
        )

        # Assert
        assert uploaded.status_code == 201
        assert url.startswith("/media/")
        assert client.get("/threads").json()["threads"][0]["image_url"] == url
        assert thread.status_code == 201

    def test_non_image_rejected(self, client):
        """Non-image uploads are a 400."""
        response = client.post(
            "/images", content=b"hello", headers={"Content-Type": "text/plain"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Please select an image file"


class TestNews:
    """End-to-end tests for news."""

    def test_publish_and_list(self, client):
        """Published news is listed publicly."""
        # Act
        published = client.post(
            "/admin/news",
            json={"title": "Welcome", "content": "Be kind"},
            headers={"X-Admin-Token": ADMIN_TOKEN},
        )
        listed = client.get("/news")

        # Assert
        assert published.status_code == 201
        assert [n["title"] for n in listed.json()["news"]] == ["Welcome"]

    def test_publish_requires_token(self, client):
        """Only the moderator publishes news."""
        response = client.post("/admin/news", json={"title": "Hi", "content": "x"})

        assert response.status_code == 401
        assert client.get("/news").json()["news"] == []
