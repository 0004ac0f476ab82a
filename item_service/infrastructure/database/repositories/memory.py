"""In-memory items repository for the item service.

Default backend when Supabase is not selected. Also used by the tests.
"""

import threading
from dataclasses import replace
from typing import Dict, List, Optional

from item_service.core.logging import logger
from item_service.infrastructure.database.models import Item
from item_service.infrastructure.database.repositories.base import ItemRepository


class InMemoryItemRepository(ItemRepository):
    """Thread-safe dict-backed item storage with auto-increment ids.

    Every read and write hands out a copy, so callers never share an Item instance.
    """

    def __init__(self, items: Optional[List[Item]] = None):
        self._lock = threading.Lock()
        self._items: Dict[int, Item] = {}
        self._next_id = 1
        for item in items or []:
            self.save(item)

    def find_all(self) -> List[Item]:
        with self._lock:
            return [replace(item) for _, item in sorted(self._items.items())]

    def find_by_id(self, item_id: int) -> Optional[Item]:
        with self._lock:
            item = self._items.get(item_id)
            return replace(item) if item is not None else None

    def save(self, item: Item) -> Item:
        with self._lock:
            if item.id is None:
                stored = replace(item, id=self._next_id)
            else:
                stored = replace(item)
            self._items[stored.id] = stored
            self._next_id = max(self._next_id, stored.id + 1)

        logger.debug("item_saved", item_id=stored.id, status=stored.status)
        return replace(stored)

    def delete_by_id(self, item_id: int) -> None:
        with self._lock:
            self._items.pop(item_id, None)

    def find_all_ids(self) -> List[int]:
        with self._lock:
            return sorted(self._items)

    def exists_by_id(self, item_id: int) -> bool:
        with self._lock:
            return item_id in self._items
