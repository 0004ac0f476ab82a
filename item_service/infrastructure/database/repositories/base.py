"""Base repository interfaces for the item service.

Implements Repository pattern with Dependency Inversion principle.
The batch processor and the HTTP routes depend on ItemRepository only;
concrete backends live next to this module.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from item_service.infrastructure.database.client import SupabaseClient
from item_service.infrastructure.database.models import Item

T = TypeVar("T")


class ItemRepository(ABC):
    """Storage interface for items.

    Implementations must be safe for concurrent calls on independent ids and
    must raise StorageError on backend failures instead of returning defaults.
    """

    @abstractmethod
    def find_all(self) -> List[Item]:
        """Return every stored item."""

    @abstractmethod
    def find_by_id(self, item_id: int) -> Optional[Item]:
        """Return the item with this id, or None if absent."""

    @abstractmethod
    def save(self, item: Item) -> Item:
        """Insert (id is None) or fully replace an item and return the stored copy."""

    @abstractmethod
    def delete_by_id(self, item_id: int) -> None:
        """Delete the item with this id."""

    @abstractmethod
    def find_all_ids(self) -> List[int]:
        """Return the ids of every stored item."""

    @abstractmethod
    def exists_by_id(self, item_id: int) -> bool:
        """Check whether an item with this id exists."""


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository for Supabase table operations.

    Provides dependency inversion - depend on repository interface, not concrete tables.
    """

    def __init__(self):
        """Initialize repository with Supabase client."""
        self._client: SupabaseClient = SupabaseClient()

    @property
    def db(self):
        """Get Supabase client instance."""
        return self._client.client

    @abstractmethod
    def table_name(self) -> str:
        """Return the table name this repository manages."""
        pass
