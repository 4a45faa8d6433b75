"""Collaboration schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CollaboratorRequest(BaseModel):
    """Grant a user access to a note, addressed by username."""

    username: str = Field(min_length=1, max_length=50, description="Username of the collaborator")

    model_config = ConfigDict(json_schema_extra={"example": {"username": "colleague"}})


class CollaboratorResponse(BaseModel):
    """A collaboration grant with the collaborator's public details."""

    id: uuid.UUID = Field(description="Collaboration id")
    note_id: uuid.UUID
    user_id: uuid.UUID
    username: str
    full_name: str
    created_at: datetime


class NoteAccessResponse(BaseModel):
    """What the caller may do with a note."""

    note_id: uuid.UUID
    is_owner: bool
    can_read: bool
    can_update: bool
    can_delete: bool
    can_manage_collaborators: bool
