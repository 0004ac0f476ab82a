"""Health monitoring module for the item service."""

from item_service.infrastructure.health.checks import check_storage, check_worker_pool

__all__ = [
    "check_storage",
    "check_worker_pool",
]
