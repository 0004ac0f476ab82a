"""Batch processing module for the item service.

Components:
- BatchProcessor: Runs one unit of work per item on the worker pool
- BatchResult: Type-safe result model
- ProcessingSuccess / ProcessingFailure: Per-item outcomes
"""

from item_service.core.batch.models import (
    BatchResult,
    ProcessingFailure,
    ProcessingOutcome,
    ProcessingSuccess,
)
from item_service.core.batch.processor import BatchProcessor

__all__ = [
    "BatchProcessor",
    "BatchResult",
    "ProcessingFailure",
    "ProcessingOutcome",
    "ProcessingSuccess",
]
