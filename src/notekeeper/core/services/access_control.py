"""
Access control for notes.

Owners can do everything. Collaborators can read and update but never
delete or manage other collaborators. Everyone else is denied. All checks
run before any note or collaboration record is modified.
"""

import logging
from enum import Enum
from typing import Dict
from uuid import UUID

from ..errors import AuthorizationError, NotFoundError
from ..models.note import Note
from ..storage import Stores

logger = logging.getLogger(__name__)


class Permission(str, Enum):
    """Operation the caller wants to perform on a note."""

    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE = "manage"  # add/remove collaborators


# the single place where owner/collaborator asymmetry is decided
COLLABORATOR_PERMISSIONS = frozenset({Permission.READ, Permission.UPDATE})

DENIAL_MESSAGES = {
    Permission.READ: "You do not have access to this note",
    Permission.UPDATE: "You do not have access to this note",
    Permission.DELETE: "Only the owner can delete this note",
    Permission.MANAGE: "Only the owner can manage collaborators",
}


class AccessGuard:
    """Grants or denies a user a permission level on a note."""

    def __init__(self, stores: Stores):
        self.stores = stores

    async def authorize(self, user_id: UUID, note_id: UUID, level: Permission) -> Note:
        """Return the note when allowed.

        Raises NotFoundError if the note does not exist and
        AuthorizationError if the caller lacks ``level``.
        """
        note = await self.stores.notes.get_by_id(note_id)
        if note is None:
            raise NotFoundError("Note not found")

        if note.is_owned_by(user_id):
            return note

        if level in COLLABORATOR_PERMISSIONS and await self.stores.collaborations.exists(
            note_id, user_id
        ):
            return note

        logger.warning(f"Denied {level.value} on note {note_id} for user {user_id}")
        raise AuthorizationError(DENIAL_MESSAGES[level])

    async def describe_access(self, user_id: UUID, note_id: UUID) -> Dict[str, bool]:
        """Check user note permissions for every level at once."""
        note = await self.stores.notes.get_by_id(note_id)
        if note is None:
            raise NotFoundError("Note not found")

        is_owner = note.is_owned_by(user_id)
        is_collaborator = not is_owner and await self.stores.collaborations.exists(
            note_id, user_id
        )
        if not is_owner and not is_collaborator:
            # strangers learn nothing beyond "not allowed"
            raise AuthorizationError(DENIAL_MESSAGES[Permission.READ])

        def allowed(level: Permission) -> bool:
            return is_owner or level in COLLABORATOR_PERMISSIONS

        return {
            "is_owner": is_owner,
            "can_read": allowed(Permission.READ),
            "can_update": allowed(Permission.UPDATE),
            "can_delete": allowed(Permission.DELETE),
            "can_manage_collaborators": allowed(Permission.MANAGE),
        }
