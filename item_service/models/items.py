"""Item-related Pydantic models for the item service.

These models validate item payloads for POST /items and PUT /items/{id}.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, validator

from item_service.infrastructure.database.models import Item

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


class ItemRequest(BaseModel):
    """Request body for creating or fully replacing an item.

    Any id in the body is ignored; storage assigns ids on create and the
    path id wins on update.
    """
    name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Item name (max 50 characters)"
    )
    description: Optional[str] = Field(
        None,
        max_length=200,
        description="Optional description (max 200 characters)"
    )
    status: str = Field(
        ...,
        min_length=1,
        description="Free-text status label (e.g. 'NEW', 'PROCESSED')"
    )
    email: Optional[str] = Field(
        None,
        description="Optional contact email (empty string means none)"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Widget",
                    "description": "A small widget",
                    "status": "NEW",
                    "email": "owner@example.com"
                }
            ]
        }
    }

    @validator("name", "status")
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only values."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @validator("email")
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        """Apply the address pattern to non-empty emails only."""
        if v and not re.match(EMAIL_PATTERN, v):
            raise ValueError("must be a valid email address")
        return v

    def to_item(self, item_id: Optional[int] = None) -> Item:
        """Build the storage model, forcing the given id."""
        return Item(
            id=item_id,
            name=self.name,
            description=self.description,
            status=self.status,
            email=self.email,
        )
