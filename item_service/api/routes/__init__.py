"""Routes for the item service."""

from item_service.api.routes import items, system

__all__ = ["items", "system"]
