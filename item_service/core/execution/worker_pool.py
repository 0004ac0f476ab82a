"""Bounded worker pool for the item service.

Wraps a ThreadPoolExecutor with a hard cap on outstanding work and a
drain-on-shutdown contract. The application owns one pool and injects it
wherever units of work are dispatched.
"""

import contextvars
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable, Dict, Optional, Set

from item_service.config import config
from item_service.core.exceptions import WorkerPoolClosedError, WorkerPoolSaturatedError
from item_service.core.logging import logger


class WorkerPool:
    """Thread pool with bounded capacity and graceful drain.

    At most ``max_workers`` units run at once and at most ``queue_capacity``
    more wait for a free thread. Submitting beyond that raises
    WorkerPoolSaturatedError instead of blocking or dropping work.
    """

    def __init__(
        self,
        max_workers: int,
        queue_capacity: int,
        shutdown_timeout: float = 30,
        thread_name_prefix: str = "item-worker",
    ):
        """Initialize worker pool.

        Args:
            max_workers: Number of worker threads (>= 1)
            queue_capacity: Units allowed to wait for a thread (>= 0)
            shutdown_timeout: Seconds shutdown() waits for in-flight units
            thread_name_prefix: Prefix for worker thread names

        Raises:
            ValueError: If sizes are out of range
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        if queue_capacity < 0:
            raise ValueError(f"queue_capacity must be >= 0, got {queue_capacity}")
        if shutdown_timeout < 0:
            raise ValueError(f"shutdown_timeout must be >= 0, got {shutdown_timeout}")

        self.max_workers = max_workers
        self.queue_capacity = queue_capacity
        self.shutdown_timeout = shutdown_timeout

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=thread_name_prefix
        )
        self._slots = threading.BoundedSemaphore(max_workers + queue_capacity)
        self._lock = threading.Lock()
        self._in_flight: Set[Future] = set()
        self._closed = False

        logger.info(
            "worker_pool_initialized",
            max_workers=max_workers,
            queue_capacity=queue_capacity,
            shutdown_timeout=shutdown_timeout,
            thread_name_prefix=thread_name_prefix,
        )

    @classmethod
    def from_config(cls) -> "WorkerPool":
        """Build a pool from WORKER_POOL_* environment settings."""
        return cls(
            max_workers=config.worker_pool_max_workers(),
            queue_capacity=config.worker_pool_queue_capacity(),
            shutdown_timeout=config.worker_pool_shutdown_timeout(),
            thread_name_prefix=config.worker_pool_thread_prefix(),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Schedule a unit of work.

        Returns:
            concurrent.futures.Future for the unit's result

        Raises:
            WorkerPoolClosedError: If shutdown() has been called
            WorkerPoolSaturatedError: If every worker and queue slot is taken
        """
        with self._lock:
            if self._closed:
                raise WorkerPoolClosedError("Worker pool is shut down; submission rejected")

            if not self._slots.acquire(blocking=False):
                logger.warning(
                    "worker_pool_saturated",
                    max_workers=self.max_workers,
                    queue_capacity=self.queue_capacity,
                    in_flight=len(self._in_flight),
                )
                raise WorkerPoolSaturatedError(
                    f"Worker pool at capacity ({self.max_workers} workers, "
                    f"{self.queue_capacity} queued)"
                )

            try:
                # Units see the submitter's contextvars, including bound log context
                context = contextvars.copy_context()
                future = self._executor.submit(context.run, fn, *args, **kwargs)
            except RuntimeError:
                self._slots.release()
                raise WorkerPoolClosedError("Worker pool executor is shut down")

            self._in_flight.add(future)

        future.add_done_callback(self._release)
        return future

    def _release(self, future: Future) -> None:
        with self._lock:
            self._in_flight.discard(future)
            self._slots.release()

    def stats(self) -> Dict[str, Any]:
        """Snapshot of pool sizing and load for health reporting."""
        with self._lock:
            in_flight = len(self._in_flight)
        return {
            "max_workers": self.max_workers,
            "queue_capacity": self.queue_capacity,
            "in_flight": in_flight,
            "closed": self._closed,
        }

    def shutdown(self, timeout: Optional[float] = None) -> bool:
        """Stop accepting work and let submitted units finish.

        Args:
            timeout: Seconds to wait for in-flight units (defaults to shutdown_timeout)

        Returns:
            True if every submitted unit finished within the timeout
        """
        with self._lock:
            self._closed = True
            pending = set(self._in_flight)

        wait_for = self.shutdown_timeout if timeout is None else timeout
        logger.info("worker_pool_draining", in_flight=len(pending), timeout=wait_for)

        _, not_done = wait(pending, timeout=wait_for)

        drained = not not_done
        if drained:
            self._executor.shutdown(wait=True)
            logger.info("worker_pool_shutdown", drained=True)
        else:
            self._executor.shutdown(wait=False)
            logger.warning("worker_pool_shutdown", drained=False, still_running=len(not_done))

        return drained

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()
