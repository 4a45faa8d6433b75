"""
Note schemas.

These schemas define the API contracts for note CRUD operations.
"""

import re
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import PaginationResponse

TAG_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


def _validate_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    """Tags form a set: normalize to lowercase and drop duplicates."""
    if tags is None:
        return None
    for tag in tags:
        if len(tag) < 1 or len(tag) > 30:
            raise ValueError("Tags must be between 1 and 30 characters")
        if not TAG_PATTERN.match(tag):
            raise ValueError("Tags can only contain letters, numbers, hyphens, and underscores")
    return sorted({tag.lower() for tag in tags})


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=200, description="Note title")
    body: str = Field(default="", description="Note body")
    tags: List[str] = Field(default_factory=list, max_length=20, description="Note tags")

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v):
        return _validate_tags(v)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError("Title cannot be blank")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Meeting Notes - Q4 Planning",
                "body": "1. Review Q3 performance\n2. Set Q4 objectives",
                "tags": ["meeting", "planning"],
            }
        }
    )


class NoteUpdate(BaseModel):
    """Note update request schema; omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    body: Optional[str] = Field(default=None)
    tags: Optional[List[str]] = Field(default=None, max_length=20)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v):
        return _validate_tags(v)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Title cannot be blank")
        return v


class NoteResponse(BaseModel):
    """Note response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    body: str
    tags: List[str]
    owner_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    is_owner: bool = Field(default=False, description="Whether the caller owns the note")


class NoteListResponse(PaginationResponse[NoteResponse]):
    """Paginated notes visible to the caller."""
