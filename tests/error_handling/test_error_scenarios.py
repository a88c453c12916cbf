"""Test error handling scenarios."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from intake.core.exceptions import StorageError


@pytest.fixture
def broken_client(tmp_path):
    """TestClient whose database table was never created."""
    from intake.core.storage import ApplicationStorage
    from intake.main import create_app

    storage = ApplicationStorage(f"sqlite+aiosqlite:///{tmp_path / 'broken.db'}")
    app = create_app(storage)
    with patch.object(storage, "init_models", AsyncMock()):
        with TestClient(app) as client:
            yield client


class TestStorageFailures:
    """Storage failures map to 500 with a JSON error body."""

    def test_create_returns_500(self, broken_client, sample_application_data):
        """Test insert failure."""
        response = broken_client.post("/api/applications", json=sample_application_data)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create application"}

    def test_list_returns_500(self, broken_client):
        """Test list failure."""
        response = broken_client.get("/api/applications")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch applications"}

    def test_get_returns_500(self, broken_client):
        """Test single fetch failure."""
        response = broken_client.get("/api/applications/1")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch application"}

    @pytest.mark.parametrize("action", ["approve", "reject"])
    def test_status_change_returns_500(self, broken_client, action):
        """Test update failure."""
        response = broken_client.put(f"/api/applications/1/{action}")

        assert response.status_code == 500
        assert response.json() == {"error": f"Failed to {action} application"}

    def test_statistics_degrade_to_empty(self, broken_client):
        """Test statistics still answer when every count fails."""
        response = broken_client.get("/api/statistics")

        assert response.status_code == 200
        assert response.json() == {}

    def test_health_unaffected(self, broken_client):
        """Test health does not touch storage."""
        assert broken_client.get("/api/health").status_code == 200


class TestRaisedStorageError:
    """Errors raised by a storage call propagate to the handler."""

    def test_storage_error_detail_not_leaked(self, test_client):
        """Test the engine message stays out of the response."""
        storage = test_client.app.state.storage
        with patch.object(
            storage,
            "list_applications",
            AsyncMock(side_effect=StorageError("fetch applications", "disk I/O error")),
        ):
            response = test_client.get("/api/applications")

        assert response.status_code == 500
        assert "disk I/O error" not in response.text
