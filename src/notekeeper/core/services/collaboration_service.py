"""Collaboration service implementation."""

import logging
from typing import List, Optional
from uuid import UUID

from ..errors import InvariantError, NotFoundError
from ..models.collaboration import Collaboration
from ..models.user import User
from ..schemas.collaboration import CollaboratorRequest, CollaboratorResponse
from ..storage import Stores
from .access_control import AccessGuard, Permission
from .interfaces import ICollaborationService

logger = logging.getLogger(__name__)


class CollaborationService(ICollaborationService):
    """Owner-managed sharing of notes."""

    def __init__(self, stores: Stores, guard: Optional[AccessGuard] = None):
        self.stores = stores
        self.guard = guard or AccessGuard(stores)

    async def add_collaborator(
        self, user_id: UUID, note_id: UUID, request: CollaboratorRequest
    ) -> CollaboratorResponse:
        """Share note with another user.

        Duplicate grants are rejected by the store's unique constraint,
        not by a lookup here.
        """
        note = await self.guard.authorize(user_id, note_id, Permission.MANAGE)

        target_user = await self.stores.users.get_by_username(request.username)
        if target_user is None:
            raise NotFoundError(f"User '{request.username}' not found")

        if note.is_owned_by(target_user.id):
            raise InvariantError("The owner already has full access to this note")

        collaboration = await self.stores.collaborations.create(note_id, target_user.id)
        logger.info(f"User {user_id} added collaborator {target_user.id} to note {note_id}")
        return self._to_response(collaboration, target_user)

    async def remove_collaborator(
        self, user_id: UUID, note_id: UUID, collaborator_id: UUID
    ) -> None:
        """Revoke note share."""
        await self.guard.authorize(user_id, note_id, Permission.MANAGE)

        if not await self.stores.collaborations.delete(note_id, collaborator_id):
            raise NotFoundError("Collaborator not found on this note")
        logger.info(f"User {user_id} removed collaborator {collaborator_id} from note {note_id}")

    async def list_collaborators(self, user_id: UUID, note_id: UUID) -> List[CollaboratorResponse]:
        """List collaborators; visible to anyone who can read the note."""
        await self.guard.authorize(user_id, note_id, Permission.READ)

        responses = []
        for collaboration in await self.stores.collaborations.list_for_note(note_id):
            member = await self.stores.users.get_by_id(collaboration.user_id)
            if member is not None:
                responses.append(self._to_response(collaboration, member))
        return responses

    def _to_response(self, collaboration: Collaboration, member: User) -> CollaboratorResponse:
        return CollaboratorResponse(
            id=collaboration.id,
            note_id=collaboration.note_id,
            user_id=member.id,
            username=member.username,
            full_name=member.full_name,
            created_at=collaboration.created_at,
        )
