"""Pydantic models for the item service."""

from item_service.models.items import EMAIL_PATTERN, ItemRequest

__all__ = [
    "EMAIL_PATTERN",
    "ItemRequest",
]
