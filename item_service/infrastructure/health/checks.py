"""Health check functions for the item service.

Tests storage connectivity and reports worker pool load.
"""

import asyncio
from typing import Any, Dict

from item_service.core.execution import WorkerPool
from item_service.infrastructure.database.repositories import ItemRepository


async def check_storage(repository: ItemRepository) -> Dict[str, Any]:
    """Test storage connectivity with a minimal existence query.

    Returns:
        Dict with status ("healthy", "timeout", "unavailable"), backend name
        and optional error message
    """
    backend = type(repository).__name__

    try:
        await asyncio.wait_for(asyncio.to_thread(repository.exists_by_id, 0), timeout=2.0)

        return {"status": "healthy", "backend": backend}

    except asyncio.TimeoutError:
        return {"status": "timeout", "backend": backend, "error": "Request timed out after 2s"}

    except Exception as e:
        return {"status": "unavailable", "backend": backend, "error": str(e)[:100]}


def check_worker_pool(worker_pool: WorkerPool) -> Dict[str, Any]:
    """Report worker pool sizing and load."""
    stats = worker_pool.stats()
    stats["status"] = "closed" if stats["closed"] else "healthy"
    return stats
