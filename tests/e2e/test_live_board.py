"""End-to-end tests for the live board feed."""

from fastapi.testclient import TestClient

from feedback.interface.api.app import create_app
from tests.conftest import ADMIN_TOKEN
from tests.di import build_test_container

ADMIN = {"X-Admin-Token": ADMIN_TOKEN}


class TestLiveBoard:
    """The feed follows thread changes while the app is running."""

    def test_feed_tracks_submit_and_archive(self):
        """Inserts and archives refresh the live snapshot."""
        with TestClient(create_app(build_test_container())) as client:
            # Arrange
            initial = client.get("/threads/live").json()

            # Act
            thread = client.post(
                "/threads", json={"content": "Live one", "rating": 5}
            ).json()
            after_submit = client.get("/threads/live").json()
            client.post(f"/admin/threads/{thread['thread_id']}/archive", headers=ADMIN)
            after_archive = client.get("/threads/live").json()

        # Assert
        assert initial["threads"] == []
        assert [t["thread_id"] for t in after_submit["threads"]] == [
            thread["thread_id"]
        ]
        assert after_submit["version"] == initial["version"] + 1
        assert after_archive["threads"] == []
        assert after_archive["version"] == after_submit["version"] + 1

    def test_rejected_submission_does_not_refresh(self):
        """Failed writes record no change."""
        with TestClient(create_app(build_test_container())) as client:
            before = client.get("/threads/live").json()["version"]

            response = client.post("/threads", json={"content": " ", "rating": 3})
            after = client.get("/threads/live").json()["version"]

        assert response.status_code == 400
        assert after == before

    def test_feed_not_running_without_lifespan(self):
        """Without app startup the live board reports unavailable."""
        client = TestClient(create_app(build_test_container()))

        response = client.get("/threads/live")

        assert response.status_code == 503
