"""Middleware for the item service."""

from item_service.api.middleware.errors import validation_exception_handler
from item_service.api.middleware.request_id import request_id_middleware

__all__ = ["request_id_middleware", "validation_exception_handler"]
