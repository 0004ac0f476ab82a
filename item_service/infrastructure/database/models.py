"""Database models for the item service.

Type-safe dataclasses representing database records.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

PROCESSED_STATUS = "PROCESSED"


@dataclass
class Item:
    """Represents a record in the items table."""

    name: str
    status: str
    id: Optional[int] = None
    description: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the item into a JSON-compatible dict."""
        return asdict(self)

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Item":
        """Build an item from a database row dict."""
        return cls(
            id=row.get("id"),
            name=row["name"],
            status=row["status"],
            description=row.get("description"),
            email=row.get("email"),
        )
