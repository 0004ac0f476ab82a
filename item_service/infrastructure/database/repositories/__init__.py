"""Repository implementations for the item service.

Implements Repository pattern with Dependency Inversion principle.
"""

from item_service.config import config
from item_service.core.logging import logger
from item_service.infrastructure.database.repositories.base import BaseRepository, ItemRepository
from item_service.infrastructure.database.repositories.items import SupabaseItemRepository
from item_service.infrastructure.database.repositories.memory import InMemoryItemRepository


def build_item_repository() -> ItemRepository:
    """Create the item repository selected by ITEM_STORAGE_BACKEND.

    Raises:
        RuntimeError: If the Supabase backend is selected without credentials
        ValueError: If the backend name is unknown
    """
    backend = config.storage_backend()

    if backend == "memory":
        logger.info("item_repository_selected", backend=backend)
        return InMemoryItemRepository()

    if backend == "supabase":
        if not config.is_configured():
            missing = ", ".join(config.get_missing_config())
            raise RuntimeError(f"Supabase backend selected but missing: {missing}")
        logger.info("item_repository_selected", backend=backend, table=config.items_table())
        return SupabaseItemRepository()

    raise ValueError(f"Unknown ITEM_STORAGE_BACKEND: {backend!r}")


__all__ = [
    "BaseRepository",
    "ItemRepository",
    "InMemoryItemRepository",
    "SupabaseItemRepository",
    "build_item_repository",
]
