"""Items repository for the item service.

Handles CRUD operations for items stored in Supabase.
"""

from typing import Any, Dict, List, Optional

from item_service.config import config
from item_service.core.exceptions import StorageError
from item_service.core.logging import logger
from item_service.infrastructure.database.models import Item
from item_service.infrastructure.database.repositories.base import BaseRepository, ItemRepository


class SupabaseItemRepository(BaseRepository[Item], ItemRepository):
    """Repository for items table operations.

    Unlike the logging repositories this one never fails open: every backend
    error is logged and re-raised as StorageError so callers can decide.
    """

    def table_name(self) -> str:
        """Return table name."""
        return config.items_table()

    def find_all(self) -> List[Item]:
        """List all items ordered by id.

        Returns:
            List of Item objects

        Raises:
            StorageError: If the query fails
        """
        try:
            result = self.db.table(self.table_name()).select("*").order("id").execute()
        except Exception as e:
            logger.error("item_list_failed", error=str(e))
            raise StorageError(f"Failed to list items: {e}") from e

        return [Item.from_row(row) for row in result.data or []]

    def find_by_id(self, item_id: int) -> Optional[Item]:
        """Get a single item by ID.

        Args:
            item_id: Item ID

        Returns:
            Item or None if not found

        Raises:
            StorageError: If the query fails
        """
        try:
            result = self.db.table(self.table_name()).select("*").eq("id", item_id).execute()
        except Exception as e:
            logger.error("item_fetch_failed", item_id=item_id, error=str(e))
            raise StorageError(f"Failed to fetch item {item_id}: {e}") from e

        if not result.data:
            return None

        return Item.from_row(result.data[0])

    def save(self, item: Item) -> Item:
        """Insert a new item or replace an existing one.

        Args:
            item: Item to store. When item.id is None the database assigns it.

        Returns:
            The stored item as returned by the database

        Raises:
            StorageError: If the write fails or returns no row
        """
        data = self._model_to_row(item)

        try:
            if item.id is None:
                result = self.db.table(self.table_name()).insert(data).execute()
            else:
                result = self.db.table(self.table_name()).upsert(data).execute()
        except Exception as e:
            logger.error("item_save_failed", item_id=item.id, error=str(e))
            raise StorageError(f"Failed to save item {item.id}: {e}") from e

        if not result.data:
            raise StorageError(f"Save of item {item.id} returned no row")

        saved = Item.from_row(result.data[0])
        logger.debug("item_saved", item_id=saved.id, status=saved.status)
        return saved

    def delete_by_id(self, item_id: int) -> None:
        """Delete an item.

        Args:
            item_id: Item ID

        Raises:
            StorageError: If the delete fails
        """
        try:
            self.db.table(self.table_name()).delete().eq("id", item_id).execute()
        except Exception as e:
            logger.error("item_delete_failed", item_id=item_id, error=str(e))
            raise StorageError(f"Failed to delete item {item_id}: {e}") from e

    def find_all_ids(self) -> List[int]:
        """List the ids of all items.

        Raises:
            StorageError: If the query fails
        """
        try:
            result = self.db.table(self.table_name()).select("id").execute()
        except Exception as e:
            logger.error("item_ids_fetch_failed", error=str(e))
            raise StorageError(f"Failed to list item ids: {e}") from e

        return [row["id"] for row in result.data or []]

    def exists_by_id(self, item_id: int) -> bool:
        """Check if an item exists.

        Raises:
            StorageError: If the query fails
        """
        try:
            result = (
                self.db.table(self.table_name())
                .select("id", count="exact")
                .eq("id", item_id)
                .execute()
            )
        except Exception as e:
            logger.error("item_exists_check_failed", item_id=item_id, error=str(e))
            raise StorageError(f"Failed to check item {item_id}: {e}") from e

        count = result.count if getattr(result, "count", None) is not None else len(result.data or [])
        return count > 0

    def _model_to_row(self, item: Item) -> Dict[str, Any]:
        """Convert Item model to database row dict.

        The id column is omitted for inserts so the database assigns it.
        """
        row = {
            "name": item.name,
            "description": item.description,
            "status": item.status,
            "email": item.email,
        }
        if item.id is not None:
            row["id"] = item.id
        return row
