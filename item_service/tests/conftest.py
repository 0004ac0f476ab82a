"""
Pytest configuration and fixtures for all tests.
"""

import os
import threading
import time
from typing import Iterable, Optional

import pytest

# Set up test environment variables before importing any modules
os.environ.setdefault("ITEM_STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from item_service.core.execution import WorkerPool  # noqa: E402
from item_service.infrastructure.database import InMemoryItemRepository, Item  # noqa: E402


class GatedItemRepository(InMemoryItemRepository):
    """In-memory repository whose loads for selected ids block until the gate opens."""

    def __init__(self, items, gated_ids: Iterable[int]):
        super().__init__(items)
        self.gate = threading.Event()
        self.gated_ids = set(gated_ids)

    def find_by_id(self, item_id: int) -> Optional[Item]:
        if item_id in self.gated_ids:
            self.gate.wait(timeout=5)
        return super().find_by_id(item_id)


def wait_until_idle(pool: WorkerPool, timeout: float = 2.0) -> None:
    """Block until the pool reports no in-flight units."""
    deadline = time.monotonic() + timeout
    while pool.stats()["in_flight"] and time.monotonic() < deadline:
        time.sleep(0.01)


def make_items(count: int):
    return [Item(name=f"Item {i}", status="NEW") for i in range(1, count + 1)]


@pytest.fixture
def worker_pool():
    """Small pool shut down after each test."""
    pool = WorkerPool(max_workers=4, queue_capacity=64, shutdown_timeout=5)
    yield pool
    pool.shutdown()


@pytest.fixture
def repository():
    """In-memory repository seeded with three NEW items (ids 1-3)."""
    return InMemoryItemRepository(
        [
            Item(name="Widget", status="NEW", description="A small widget"),
            Item(name="Gadget", status="NEW", email="gadget@example.com"),
            Item(name="Gizmo", status="NEW"),
        ]
    )


@pytest.fixture
def gated_repository_factory():
    """Factory for GatedItemRepository(items, gated_ids)."""
    return GatedItemRepository


@pytest.fixture
def item_factory():
    """Factory for a list of NEW items named 'Item 1'..'Item N'."""
    return make_items


@pytest.fixture
def wait_idle():
    """Helper that waits for a pool to finish its in-flight units."""
    return wait_until_idle
