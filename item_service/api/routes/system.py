"""System routes for the item service."""

from datetime import datetime

from fastapi import APIRouter, Depends

from item_service import __version__
from item_service.api.dependencies import get_item_repository, get_worker_pool
from item_service.core.execution import WorkerPool
from item_service.infrastructure.database.repositories import ItemRepository
from item_service.infrastructure.health import check_storage, check_worker_pool

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check(
    repo: ItemRepository = Depends(get_item_repository),
    worker_pool: WorkerPool = Depends(get_worker_pool),
):
    """Health check. Returns service status, version, storage health and worker pool load."""
    storage_health = await check_storage(repo)
    pool_health = check_worker_pool(worker_pool)

    all_healthy = storage_health.get("status") == "healthy" and pool_health["status"] == "healthy"
    overall_status = "healthy" if all_healthy else "degraded"

    return {
        "status": overall_status,
        "service": "item-service",
        "version": __version__,
        "dependencies": {"storage": storage_health, "worker_pool": pool_health},
        "timestamp": datetime.now().isoformat() + "Z",
    }
