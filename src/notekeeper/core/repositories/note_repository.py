"""Note repository for database operations."""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, desc, func, or_, select

from ..models.base import utc_now
from ..models.collaboration import Collaboration
from ..models.note import Note
from .base import SQLRepository
from .interfaces import INoteRepository


class NoteRepository(SQLRepository, INoteRepository):
    """Repository for note database operations."""

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        async with self._translate_errors(missing_message="User not found"):
            self.session.add(note)
            await self.session.commit()
            await self.session.refresh(note)
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID."""
        stmt = select(Note).where(Note.id == note_id)
        async with self._translate_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def update_note(self, note_id: UUID, update_data: dict) -> Optional[Note]:
        """Update note fields; updated_at moves even when nothing else changed."""
        note = await self.get_by_id(note_id)
        if not note:
            return None

        async with self._translate_errors():
            for key, value in update_data.items():
                setattr(note, key, value)
            note.updated_at = utc_now()
            await self.session.commit()
            await self.session.refresh(note)
        return note

    async def delete_note(self, note_id: UUID) -> bool:
        """Delete note and its collaborations in one transaction."""
        async with self._translate_errors():
            await self.session.execute(
                delete(Collaboration).where(Collaboration.note_id == note_id)
            )
            result = await self.session.execute(delete(Note).where(Note.id == note_id))
            await self.session.commit()
        return result.rowcount > 0

    async def list_accessible(
        self,
        user_id: UUID,
        tag: Optional[str] = None,
        page: int = 1,
        per_page: int = 20,
    ) -> Tuple[List[Note], int]:
        """List owned and shared notes with pagination and optional tag filter."""
        offset = (page - 1) * per_page

        shared_note_ids = select(Collaboration.note_id).where(Collaboration.user_id == user_id)
        access_condition = or_(Note.owner_id == user_id, Note.id.in_(shared_note_ids))
        stmt = select(Note).where(access_condition).order_by(desc(Note.updated_at), Note.id)

        async with self._translate_errors():
            if tag:
                # tags column is dialect specific, so filter after loading
                result = await self.session.execute(stmt)
                notes = [note for note in result.scalars() if tag in note.tags]
                return notes[offset : offset + per_page], len(notes)

            count_stmt = select(func.count(Note.id)).where(access_condition)
            total_count = (await self.session.execute(count_stmt)).scalar_one()

            result = await self.session.execute(stmt.offset(offset).limit(per_page))
            return list(result.scalars()), total_count
