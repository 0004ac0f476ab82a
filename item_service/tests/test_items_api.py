"""Integration tests for the /items endpoints."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from item_service.api import create_app
from item_service.core.execution import WorkerPool
from item_service.core.exceptions import StorageError
from item_service.infrastructure.database import InMemoryItemRepository, Item, ItemRepository

VALID_ITEM = {
    "name": "Widget",
    "description": "A small widget",
    "status": "NEW",
    "email": "owner@example.com",
}


@pytest.fixture
def client(repository, worker_pool):
    """TestClient over an app backed by the seeded in-memory repository."""
    app = create_app(item_repository=repository, worker_pool=worker_pool)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_storage():
    """Mock repository whose every call raises StorageError."""
    storage = MagicMock(spec=ItemRepository)
    for name in ("find_all", "find_by_id", "save", "delete_by_id", "find_all_ids", "exists_by_id"):
        getattr(storage, name).side_effect = StorageError("database unavailable")
    return storage


@pytest.fixture
def failing_client(failing_storage, worker_pool):
    app = create_app(item_repository=failing_storage, worker_pool=worker_pool)
    with TestClient(app) as test_client:
        yield test_client


class TestListAndGet:
    """Test GET /items and GET /items/{id}."""

    def test_list_items(self, client):
        """Test listing returns every stored item."""
        response = client.get("/items")

        assert response.status_code == 200
        body = response.json()
        assert [item["id"] for item in body] == [1, 2, 3]
        assert body[0] == {
            "id": 1,
            "name": "Widget",
            "description": "A small widget",
            "status": "NEW",
            "email": None,
        }

    def test_list_empty(self, worker_pool):
        """Test listing an empty store returns an empty array."""
        app = create_app(item_repository=InMemoryItemRepository(), worker_pool=worker_pool)
        with TestClient(app) as client:
            response = client.get("/items")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_item(self, client):
        """Test fetching an existing item."""
        response = client.get("/items/2")

        assert response.status_code == 200
        assert response.json()["name"] == "Gadget"

    def test_get_missing_item(self, client):
        """Test fetching an unknown id returns 404."""
        response = client.get("/items/99")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_list_storage_error(self, failing_client):
        """Test a storage failure while listing returns 500."""
        response = failing_client.get("/items")

        assert response.status_code == 500


class TestCreate:
    """Test POST /items."""

    def test_create_item(self, client, repository):
        """Test a valid payload is stored with a new id."""
        response = client.post("/items", json=VALID_ITEM)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 4
        assert body["email"] == "owner@example.com"
        assert repository.exists_by_id(4)

    def test_create_ignores_client_id(self, client):
        """Test storage assigns the id even when the body carries one."""
        response = client.post("/items", json={**VALID_ITEM, "id": 1})

        assert response.status_code == 201
        assert response.json()["id"] == 4

    def test_create_minimal_item(self, client):
        """Test description and email are optional."""
        response = client.post("/items", json={"name": "Bare", "status": "NEW"})

        assert response.status_code == 201
        assert response.json()["description"] is None

    def test_create_with_empty_email(self, client, repository):
        """Test an empty email is accepted and stored as given."""
        response = client.post("/items", json={"name": "A", "status": "NEW", "email": ""})

        assert response.status_code == 201
        assert response.json()["email"] == ""
        assert repository.find_by_id(4).email == ""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"name": "   "},
            {"name": "x" * 51},
            {"description": "d" * 201},
            {"status": ""},
            {"status": " "},
            {"email": "not-an-email"},
            {"email": "user@domain"},
        ],
    )
    def test_create_invalid_payload(self, client, repository, overrides):
        """Test validation failures return 400 and store nothing."""
        response = client.post("/items", json={**VALID_ITEM, **overrides})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["details"]
        assert repository.find_all_ids() == [1, 2, 3]

    def test_create_missing_fields(self, client):
        """Test a body without required fields returns 400."""
        response = client.post("/items", json={"description": "no name"})

        assert response.status_code == 400
        fields = {detail["field"] for detail in response.json()["details"]}
        assert {"name", "status"} <= fields


class TestUpdate:
    """Test PUT /items/{id}."""

    def test_update_item(self, client, repository):
        """Test a full replace keeps the path id."""
        response = client.put("/items/1", json={**VALID_ITEM, "id": 42, "status": "DONE"})

        assert response.status_code == 200
        assert response.json()["id"] == 1
        assert response.json()["status"] == "DONE"
        assert repository.find_by_id(1).email == "owner@example.com"
        assert not repository.exists_by_id(42)

    def test_update_missing_item(self, client, repository):
        """Test updating an unknown id returns 404 and creates nothing."""
        response = client.put("/items/99", json=VALID_ITEM)

        assert response.status_code == 404
        assert not repository.exists_by_id(99)

    def test_update_invalid_payload(self, client):
        """Test the update payload is validated like create."""
        response = client.put("/items/1", json={**VALID_ITEM, "name": ""})

        assert response.status_code == 400


class TestDelete:
    """Test DELETE /items/{id}."""

    def test_delete_item(self, client, repository):
        """Test deleting an existing item returns 204."""
        response = client.delete("/items/1")

        assert response.status_code == 204
        assert not repository.exists_by_id(1)

    def test_delete_missing_item(self, client):
        """Test deleting an unknown id returns 404."""
        response = client.delete("/items/99")

        assert response.status_code == 404

    def test_delete_storage_error(self, worker_pool):
        """Test an unexpected storage error returns 500."""
        storage = MagicMock(spec=ItemRepository)
        storage.exists_by_id.return_value = True
        storage.delete_by_id.side_effect = StorageError("connection reset")
        app = create_app(item_repository=storage, worker_pool=worker_pool)

        with TestClient(app) as client:
            response = client.delete("/items/1")

        assert response.status_code == 500
        assert "connection reset" in response.json()["error"]


class TestProcess:
    """Test GET /items/process."""

    def test_process_items(self, client, repository):
        """Test processing returns every item as PROCESSED."""
        response = client.get("/items/process")

        assert response.status_code == 200
        body = response.json()
        assert sorted(item["id"] for item in body) == [1, 2, 3]
        assert {item["status"] for item in body} == {"PROCESSED"}
        assert {item.status for item in repository.find_all()} == {"PROCESSED"}

    def test_process_empty_store(self, worker_pool):
        """Test processing nothing returns 204."""
        app = create_app(item_repository=InMemoryItemRepository(), worker_pool=worker_pool)
        with TestClient(app) as client:
            response = client.get("/items/process")

        assert response.status_code == 204

    def test_process_all_items_fail(self, worker_pool):
        """Test a batch where every unit fails returns 204."""
        storage = MagicMock(spec=ItemRepository)
        storage.find_all_ids.return_value = [1, 2]
        storage.find_by_id.side_effect = StorageError("timeout")
        app = create_app(item_repository=storage, worker_pool=worker_pool)

        with TestClient(app) as client:
            response = client.get("/items/process")

        assert response.status_code == 204

    def test_process_partial_failure(self, worker_pool):
        """Test failed items are left out of the 200 response."""
        storage = InMemoryItemRepository([Item(name="A", status="NEW"), Item(name="B", status="NEW")])
        original_save = storage.save

        def save(item):
            if item.id == 1:
                raise StorageError("write conflict")
            return original_save(item)

        storage.save = save
        app = create_app(item_repository=storage, worker_pool=worker_pool)

        with TestClient(app) as client:
            response = client.get("/items/process")

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [2]

    def test_process_enumeration_failure(self, failing_client):
        """Test a batch that cannot list ids returns 500."""
        response = failing_client.get("/items/process")

        assert response.status_code == 500
        assert "Batch processing failed" in response.json()["error"]


class TestSystem:
    """Test system endpoints and cross-cutting behaviour."""

    def test_health(self, client):
        """Test health reports storage and worker pool status."""
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["dependencies"]["storage"]["backend"] == "InMemoryItemRepository"
        assert body["dependencies"]["worker_pool"]["max_workers"] == 4

    def test_health_degraded_when_storage_fails(self, failing_client):
        """Test a failing storage marks the service degraded."""
        response = failing_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["dependencies"]["storage"]["status"] == "unavailable"

    def test_request_id_header(self, client):
        """Test every response carries a request id, echoing the caller's."""
        generated = client.get("/items")
        echoed = client.get("/items", headers={"X-Request-ID": "req-123"})

        assert generated.headers["X-Request-ID"]
        assert echoed.headers["X-Request-ID"] == "req-123"

    def test_injected_pool_not_shut_down_with_app(self, repository):
        """Test the app only drains pools it created itself."""
        pool = WorkerPool(max_workers=1, queue_capacity=1)
        app = create_app(item_repository=repository, worker_pool=pool)

        with TestClient(app):
            pass

        assert pool.closed is False
        pool.shutdown()

    def test_owned_pool_drained_on_shutdown(self, repository, monkeypatch):
        """Test a pool built by the app is shut down with it."""
        monkeypatch.setenv("WORKER_POOL_MAX_WORKERS", "2")
        app = create_app(item_repository=repository)

        with TestClient(app):
            assert app.state.worker_pool.closed is False

        assert app.state.worker_pool.closed is True
