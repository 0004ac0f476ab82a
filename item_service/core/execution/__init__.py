"""Execution module for the item service.

Provides the bounded worker pool that runs units of work.
"""

from item_service.core.execution.worker_pool import WorkerPool

__all__ = ["WorkerPool"]
