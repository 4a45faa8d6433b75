"""Note service implementation."""

import logging
from typing import Optional
from uuid import UUID

from ...config import get_settings
from ..errors import NotFoundError
from ..models.note import Note
from ..models.types import normalize_tags
from ..schemas.collaboration import NoteAccessResponse
from ..schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from ..storage import Stores
from .access_control import AccessGuard, Permission
from .interfaces import INoteService

logger = logging.getLogger(__name__)


class NoteService(INoteService):
    """Note service implementation; every access goes through the guard."""

    def __init__(self, stores: Stores, guard: Optional[AccessGuard] = None):
        self.stores = stores
        self.guard = guard or AccessGuard(stores)

    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note owned by the caller.

        Access tokens outlive accounts, so the owner is looked up first.
        """
        if await self.stores.users.get_by_id(user_id) is None:
            raise NotFoundError("User not found")

        note = await self.stores.notes.create_note(
            {
                "title": request.title,
                "body": request.body,
                "tags": request.tags,
                "owner_id": user_id,
            }
        )
        logger.info(f"User {user_id} created note {note.id}")
        return self._note_to_response(note, user_id)

    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Get note by ID for its owner or a collaborator."""
        note = await self.guard.authorize(user_id, note_id, Permission.READ)
        return self._note_to_response(note, user_id)

    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update existing note; owner and collaborators may edit."""
        await self.guard.authorize(user_id, note_id, Permission.UPDATE)

        update_data = request.model_dump(exclude_none=True)
        updated_note = await self.stores.notes.update_note(note_id, update_data)
        if updated_note is None:
            # deleted between the check and the write
            raise NotFoundError("Note not found")

        logger.info(f"User {user_id} updated note {note_id}")
        return self._note_to_response(updated_note, user_id)

    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        """Delete note; only the owner may."""
        await self.guard.authorize(user_id, note_id, Permission.DELETE)
        if not await self.stores.notes.delete_note(note_id):
            raise NotFoundError("Note not found")
        logger.info(f"User {user_id} deleted note {note_id}")

    async def list_notes(
        self,
        user_id: UUID,
        page: int = 1,
        per_page: int = 20,
        tag: Optional[str] = None,
    ) -> NoteListResponse:
        """List owned and shared notes with pagination."""
        settings = get_settings()
        if page < 1:
            page = 1
        if per_page < 1:
            per_page = settings.default_page_size
        per_page = min(per_page, settings.max_page_size)

        # same normalization as stored tags
        tags = normalize_tags([tag] if tag else None)
        notes, total_count = await self.stores.notes.list_accessible(
            user_id, tags[0] if tags else None, page, per_page
        )
        items = [self._note_to_response(note, user_id) for note in notes]
        return NoteListResponse.create(items=items, total=total_count, page=page, per_page=per_page)

    async def check_note_access(self, note_id: UUID, user_id: UUID) -> NoteAccessResponse:
        """Check user note permissions."""
        access = await self.guard.describe_access(user_id, note_id)
        return NoteAccessResponse(note_id=note_id, **access)

    def _note_to_response(self, note: Note, user_id: UUID) -> NoteResponse:
        return NoteResponse(
            id=note.id,
            title=note.title,
            body=note.body,
            tags=list(note.tags or []),
            owner_id=note.owner_id,
            created_at=note.created_at,
            updated_at=note.updated_at,
            is_owner=note.is_owned_by(user_id),
        )
