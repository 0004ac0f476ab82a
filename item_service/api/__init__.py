"""HTTP API for the item service."""

from item_service.api.app import create_app

__all__ = ["create_app"]
