"""Batch processor for the item service.

Marks every stored item as PROCESSED, one unit of work per item on the
shared worker pool, and hands back the result only after every unit is done.
"""

import asyncio
import secrets
import time
from dataclasses import replace
from typing import List, Optional

from item_service.core.batch.models import (
    BatchResult,
    ProcessingFailure,
    ProcessingOutcome,
    ProcessingSuccess,
)
from item_service.core.exceptions import BatchProcessingError, ItemNotFoundError, WorkerPoolError
from item_service.core.execution.worker_pool import WorkerPool
from item_service.core.logging import logger
from item_service.infrastructure.database.models import PROCESSED_STATUS, Item
from item_service.infrastructure.database.repositories.base import ItemRepository


class BatchProcessor:
    """Orchestrates batch item processing.

    Each unit of work loads its own copy of an item, sets the status and saves
    it, and returns a ProcessingOutcome. Units never raise and never touch
    shared state; a single asyncio.gather over the pool futures is the only
    place outcomes are combined.
    """

    def __init__(self, repository: ItemRepository, worker_pool: WorkerPool):
        """Initialize batch processor.

        Args:
            repository: Item storage
            worker_pool: Pool that runs the per-item units (owned by the caller)
        """
        self.repository = repository
        self.worker_pool = worker_pool

    async def process_all(self) -> List[Item]:
        """Process every stored item and return those that were saved.

        Raises:
            BatchProcessingError: If ids cannot be enumerated or the pool rejects work
        """
        result = await self.run_batch()
        return result.items

    async def run_batch(self, batch_id: Optional[str] = None) -> BatchResult:
        """Run one batch over the current identifier set.

        Args:
            batch_id: Optional batch ID (generated if not provided)

        Returns:
            BatchResult with the saved items and the per-item failures

        Raises:
            BatchProcessingError: If ids cannot be enumerated or the pool rejects work
        """
        if batch_id is None:
            batch_id = f"batch_{int(time.time() * 1000)}_{secrets.token_urlsafe(8)}"

        start_time = time.time()

        try:
            item_ids = self.repository.find_all_ids()
        except Exception as e:
            logger.error("batch_enumeration_failed", batch_id=batch_id, error=str(e))
            raise BatchProcessingError(f"Failed to enumerate item ids: {e}", batch_id) from e

        logger.info("batch_processing_started", batch_id=batch_id, total_items=len(item_ids))

        futures = []
        submit_error: Optional[WorkerPoolError] = None
        for item_id in item_ids:
            try:
                future = self.worker_pool.submit(self._process_item, batch_id, item_id)
            except WorkerPoolError as e:
                submit_error = e
                break
            futures.append(asyncio.wrap_future(future))

        # Barrier: nothing is returned or raised until every submitted unit is terminal
        outcomes: List[ProcessingOutcome] = list(await asyncio.gather(*futures))

        if submit_error is not None:
            logger.error(
                "batch_submission_failed",
                batch_id=batch_id,
                submitted=len(futures),
                total_items=len(item_ids),
                error=str(submit_error),
            )
            raise BatchProcessingError(
                f"Worker pool rejected item {item_ids[len(futures)]} "
                f"after {len(futures)} of {len(item_ids)} submissions: {submit_error}",
                batch_id,
            ) from submit_error

        result = BatchResult.create(
            batch_id=batch_id,
            outcomes=outcomes,
            processing_time=time.time() - start_time,
        )

        logger.info("batch_processing_completed", **result.summary())

        return result

    def _process_item(self, batch_id: str, item_id: int) -> ProcessingOutcome:
        """Load, mark and save one item. Runs on a worker thread."""
        try:
            item = self.repository.find_by_id(item_id)
        except Exception as e:
            return self._failure(batch_id, item_id, "load", e)

        if item is None:
            return self._failure(batch_id, item_id, "load", ItemNotFoundError(item_id))

        try:
            saved = self.repository.save(replace(item, status=PROCESSED_STATUS))
        except Exception as e:
            return self._failure(batch_id, item_id, "save", e)

        logger.debug("item_processed", batch_id=batch_id, item_id=item_id)
        return ProcessingSuccess(item=saved)

    def _failure(
        self, batch_id: str, item_id: int, stage: str, error: Exception
    ) -> ProcessingFailure:
        logger.warning(
            "item_processing_failed",
            batch_id=batch_id,
            item_id=item_id,
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )
        return ProcessingFailure(
            item_id=item_id,
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )
