"""Batch processing models for the item service.

Type-safe models for per-item outcomes and batch results.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Union

from item_service.infrastructure.database.models import Item


@dataclass(frozen=True)
class ProcessingSuccess:
    """Unit of work reached Saved."""

    item: Item


@dataclass(frozen=True)
class ProcessingFailure:
    """Unit of work stopped in LoadFailed or SaveFailed."""

    item_id: int
    stage: str  # 'load', 'save'
    error: str
    error_type: str = "Exception"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "stage": self.stage,
            "error": self.error,
            "error_type": self.error_type,
        }


ProcessingOutcome = Union[ProcessingSuccess, ProcessingFailure]


@dataclass
class BatchResult:
    """Result of one batch run over the full identifier set."""

    batch_id: str
    status: str  # 'completed', 'completed_with_errors'
    total_items: int
    successful: int
    failed: int
    processing_time_seconds: float
    items: List[Item] = field(default_factory=list)
    failures: List[ProcessingFailure] = field(default_factory=list)
    timestamp: str = ""

    @classmethod
    def create(
        cls,
        batch_id: str,
        outcomes: List[ProcessingOutcome],
        processing_time: float,
    ) -> "BatchResult":
        """Factory method to aggregate outcomes into a BatchResult with auto-generated timestamp."""
        items = [o.item for o in outcomes if isinstance(o, ProcessingSuccess)]
        failures = [o for o in outcomes if isinstance(o, ProcessingFailure)]
        status = "completed" if not failures else "completed_with_errors"

        return cls(
            batch_id=batch_id,
            status=status,
            total_items=len(outcomes),
            successful=len(items),
            failed=len(failures),
            processing_time_seconds=round(processing_time, 2),
            items=items,
            failures=failures,
            timestamp=datetime.now().isoformat() + "Z",
        )

    def summary(self) -> Dict[str, Any]:
        """Operator-facing summary without the item payloads."""
        return {
            "batch_id": self.batch_id,
            "status": self.status,
            "total_items": self.total_items,
            "successful": self.successful,
            "failed": self.failed,
            "processing_time_seconds": self.processing_time_seconds,
            "failures": [f.to_dict() for f in self.failures],
            "timestamp": self.timestamp,
        }
