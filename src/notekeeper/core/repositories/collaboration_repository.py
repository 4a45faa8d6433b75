"""Collaboration repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, select

from ..errors import ALREADY_COLLABORATOR
from ..models.collaboration import Collaboration
from .base import SQLRepository
from .interfaces import ICollaborationRepository


class CollaborationRepository(SQLRepository, ICollaborationRepository):
    """Repository for collaboration grants."""

    async def create(self, note_id: UUID, user_id: UUID) -> Collaboration:
        """Create grant; the (note_id, user_id) unique constraint rejects duplicates."""
        collaboration = Collaboration(note_id=note_id, user_id=user_id)
        async with self._translate_errors(
            duplicate_message=ALREADY_COLLABORATOR, missing_message="Note or user not found"
        ):
            self.session.add(collaboration)
            await self.session.commit()
            await self.session.refresh(collaboration)
        return collaboration

    async def get(self, note_id: UUID, user_id: UUID) -> Optional[Collaboration]:
        """Get grant for note and user."""
        stmt = select(Collaboration).where(
            and_(Collaboration.note_id == note_id, Collaboration.user_id == user_id)
        )
        async with self._translate_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def exists(self, note_id: UUID, user_id: UUID) -> bool:
        """Check if note is shared with user."""
        return await self.get(note_id, user_id) is not None

    async def delete(self, note_id: UUID, user_id: UUID) -> bool:
        """Delete grant for note and user."""
        stmt = delete(Collaboration).where(
            and_(Collaboration.note_id == note_id, Collaboration.user_id == user_id)
        )
        async with self._translate_errors():
            result = await self.session.execute(stmt)
            await self.session.commit()
        return result.rowcount > 0

    async def list_for_note(self, note_id: UUID) -> List[Collaboration]:
        """List grants on a note."""
        stmt = (
            select(Collaboration)
            .where(Collaboration.note_id == note_id)
            .order_by(Collaboration.created_at, Collaboration.id)
        )
        async with self._translate_errors():
            result = await self.session.execute(stmt)
            return list(result.scalars())
