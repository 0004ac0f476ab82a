"""Database module for the item service.

Provides Supabase client singleton and repository pattern for item storage.
"""

from item_service.infrastructure.database.client import SupabaseClient
from item_service.infrastructure.database.models import PROCESSED_STATUS, Item
from item_service.infrastructure.database.repositories import (
    BaseRepository,
    InMemoryItemRepository,
    ItemRepository,
    SupabaseItemRepository,
    build_item_repository,
)

__all__ = [
    "SupabaseClient",
    "Item",
    "PROCESSED_STATUS",
    "BaseRepository",
    "ItemRepository",
    "InMemoryItemRepository",
    "SupabaseItemRepository",
    "build_item_repository",
]
