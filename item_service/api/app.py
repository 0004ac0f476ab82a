"""FastAPI application factory for the item service."""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from item_service import __version__
from item_service.api.middleware import request_id_middleware, validation_exception_handler
from item_service.api.routes import items, system
from item_service.core.batch import BatchProcessor
from item_service.core.execution import WorkerPool
from item_service.core.logging import logger
from item_service.infrastructure.database.repositories import (
    ItemRepository,
    build_item_repository,
)


def create_app(
    item_repository: Optional[ItemRepository] = None,
    worker_pool: Optional[WorkerPool] = None,
) -> FastAPI:
    """Create and configure FastAPI app. Factory pattern for testability.

    Args:
        item_repository: Storage to use (built from ITEM_STORAGE_BACKEND if omitted)
        worker_pool: Pool for batch units (built from WORKER_POOL_* if omitted).
            A pool passed in stays owned by the caller and is not shut down here.
    """
    repository = item_repository if item_repository is not None else build_item_repository()
    owns_pool = worker_pool is None
    pool = WorkerPool.from_config() if owns_pool else worker_pool

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("app_started", version=__version__, storage=type(repository).__name__)
        yield
        if owns_pool:
            # Drain in-flight units without blocking the event loop
            await asyncio.to_thread(pool.shutdown)
        logger.info("app_stopped")

    app = FastAPI(
        title="item-service",
        description=(
            "Item CRUD API with a batch endpoint that marks every stored item "
            "as PROCESSED using a bounded worker pool."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Store collaborators for route access
    app.state.item_repository = repository
    app.state.worker_pool = pool
    app.state.batch_processor = BatchProcessor(repository, pool)

    # Add middleware
    app.middleware("http")(request_id_middleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Register routes
    app.include_router(system.router)
    app.include_router(items.router)

    return app
