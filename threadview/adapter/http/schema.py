"""Wire models for the comment service JSON contract.

The service marshals empty comment lists as null and, depending on the
deployment, capitalizes its pagination counters, so the models accept both.
"""

import re
from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

# Go-style RFC 3339 timestamps carry up to nine fractional digits
_FRACTION = re.compile(r"(\.\d{6})\d+")


class CommentPayload(BaseModel):
    """Comment as serialized by the service."""

    id: int
    content: str
    created_at: datetime
    parent_id: Optional[int] = None
    children: Optional[list["CommentPayload"]] = None

    @field_validator("created_at", mode="before")
    @classmethod
    def truncate_nanoseconds(cls, v: Any) -> Any:
        """Trim sub-microsecond precision the datetime type cannot hold."""
        if isinstance(v, str):
            return _FRACTION.sub(r"\1", v, count=1)
        return v


class CommentListPayload(BaseModel):
    """Response body of GET /comments."""

    comments: Optional[list[CommentPayload]] = None
    page: Optional[int] = None
    pages: int = Field(default=0, validation_alias=AliasChoices("pages", "Pages"))


class CreateCommentBody(BaseModel):
    """Request body of POST /comments."""

    content: str
    parent_id: Optional[int] = None


class DeletePayload(BaseModel):
    """Response body of DELETE /comments/{id}."""

    deleted: int = 0
