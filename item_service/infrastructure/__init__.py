"""Infrastructure modules for the item service.

- Database: Supabase client singleton and item repositories
- Health: Dependency health checks
"""

# Database
from item_service.infrastructure.database import (
    PROCESSED_STATUS,
    BaseRepository,
    InMemoryItemRepository,
    Item,
    ItemRepository,
    SupabaseClient,
    SupabaseItemRepository,
    build_item_repository,
)

__all__ = [
    # Database
    "SupabaseClient",
    "Item",
    "PROCESSED_STATUS",
    "BaseRepository",
    "ItemRepository",
    "InMemoryItemRepository",
    "SupabaseItemRepository",
    "build_item_repository",
]
