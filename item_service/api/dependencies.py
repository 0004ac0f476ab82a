"""FastAPI dependencies for the item service.

Dependency injection functions for route handlers.
"""

from fastapi import Request

from item_service.core.batch import BatchProcessor
from item_service.core.execution import WorkerPool
from item_service.infrastructure.database.repositories import ItemRepository


def get_item_repository(request: Request) -> ItemRepository:
    """Get the item repository from app state.

    Note:
        Set by create_app via app.state.item_repository.
    """
    return request.app.state.item_repository


def get_worker_pool(request: Request) -> WorkerPool:
    """Get the shared worker pool from app state."""
    return request.app.state.worker_pool


def get_batch_processor(request: Request) -> BatchProcessor:
    """Get the batch processor from app state."""
    return request.app.state.batch_processor
