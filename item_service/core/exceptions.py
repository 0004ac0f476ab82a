"""Exception hierarchy for the item service.

Per-item faults are converted into processing outcomes inside the batch
processor; only the errors below cross component boundaries.
"""


class ItemServiceError(Exception):
    """Base class for all item service errors."""


class StorageError(ItemServiceError):
    """Raised when the storage backend fails to complete an operation."""


class ItemNotFoundError(ItemServiceError):
    """Raised when an item id does not exist in storage."""

    def __init__(self, item_id):
        super().__init__(f"Item {item_id} not found")
        self.item_id = item_id


class WorkerPoolError(ItemServiceError):
    """Base class for worker pool submission errors."""


class WorkerPoolSaturatedError(WorkerPoolError):
    """Raised when the pool has no free worker and its queue is full."""


class WorkerPoolClosedError(WorkerPoolError):
    """Raised when work is submitted to a pool that is shutting down."""


class BatchProcessingError(ItemServiceError):
    """Raised when a batch run cannot be carried out as a whole."""

    def __init__(self, message: str, batch_id: str):
        super().__init__(message)
        self.batch_id = batch_id
