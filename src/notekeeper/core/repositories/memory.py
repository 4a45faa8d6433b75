"""
In-process store implementations.

All repositories built from one ``InMemoryStorage`` share its state and its
lock, so uniqueness checks and inserts happen in a single critical section
just like a database constraint. Records are the ORM model classes used as
plain objects, never attached to a session.
"""

import threading
import uuid
from typing import Dict, List, Optional, Set, Tuple
from uuid import UUID

from ..errors import (
    ALREADY_COLLABORATOR,
    REFRESH_TOKEN_NOT_RECOGNIZED,
    USERNAME_TAKEN,
    DuplicateEntryError,
    InvariantError,
    NotFoundError,
)
from ..models.base import utc_now
from ..models.collaboration import Collaboration
from ..models.note import Note
from ..models.types import normalize_tags
from ..models.user import User
from .interfaces import (
    ICollaborationRepository,
    INoteRepository,
    IRefreshTokenLedger,
    IUserRepository,
)


class InMemoryStorage:
    """Shared state for the in-memory repositories."""

    def __init__(self):
        self.lock = threading.RLock()
        self.users: Dict[UUID, User] = {}
        self.user_ids_by_username: Dict[str, UUID] = {}
        self.notes: Dict[UUID, Note] = {}
        self.collaborations: Dict[Tuple[UUID, UUID], Collaboration] = {}
        self.refresh_tokens: Set[str] = set()

    def clear(self) -> None:
        """Drop every record."""
        with self.lock:
            self.users.clear()
            self.user_ids_by_username.clear()
            self.notes.clear()
            self.collaborations.clear()
            self.refresh_tokens.clear()


class InMemoryUserRepository(IUserRepository):
    """Credential store kept in process memory."""

    def __init__(self, storage: InMemoryStorage):
        self.storage = storage

    async def create_user(self, user_data: dict) -> User:
        now = utc_now()
        user = User(id=uuid.uuid4(), created_at=now, updated_at=now, **user_data)
        with self.storage.lock:
            if user.username in self.storage.user_ids_by_username:
                raise DuplicateEntryError(USERNAME_TAKEN)
            self.storage.users[user.id] = user
            self.storage.user_ids_by_username[user.username] = user.id
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        with self.storage.lock:
            return self.storage.users.get(user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        with self.storage.lock:
            user_id = self.storage.user_ids_by_username.get(username)
            return self.storage.users.get(user_id) if user_id else None


class InMemoryNoteRepository(INoteRepository):
    """Note store kept in process memory."""

    def __init__(self, storage: InMemoryStorage):
        self.storage = storage

    async def create_note(self, note_data: dict) -> Note:
        now = utc_now()
        data = {"body": "", **note_data}
        data["tags"] = normalize_tags(data.get("tags"))
        note = Note(id=uuid.uuid4(), created_at=now, updated_at=now, **data)
        with self.storage.lock:
            if note.owner_id not in self.storage.users:
                raise NotFoundError("User not found")
            self.storage.notes[note.id] = note
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        with self.storage.lock:
            return self.storage.notes.get(note_id)

    async def update_note(self, note_id: UUID, update_data: dict) -> Optional[Note]:
        with self.storage.lock:
            note = self.storage.notes.get(note_id)
            if note is None:
                return None
            for key, value in update_data.items():
                if key == "tags":
                    value = normalize_tags(value)
                setattr(note, key, value)
            note.updated_at = utc_now()
            return note

    async def delete_note(self, note_id: UUID) -> bool:
        with self.storage.lock:
            if self.storage.notes.pop(note_id, None) is None:
                return False
            for key in [k for k in self.storage.collaborations if k[0] == note_id]:
                del self.storage.collaborations[key]
            return True

    async def list_accessible(
        self,
        user_id: UUID,
        tag: Optional[str] = None,
        page: int = 1,
        per_page: int = 20,
    ) -> Tuple[List[Note], int]:
        offset = (page - 1) * per_page
        with self.storage.lock:
            shared_ids = {
                note_id for note_id, member_id in self.storage.collaborations if member_id == user_id
            }
            notes = [
                note
                for note in self.storage.notes.values()
                if note.owner_id == user_id or note.id in shared_ids
            ]
        if tag:
            notes = [note for note in notes if tag in note.tags]
        notes.sort(key=lambda note: (note.updated_at, str(note.id)), reverse=True)
        return notes[offset : offset + per_page], len(notes)


class InMemoryCollaborationRepository(ICollaborationRepository):
    """Collaboration store kept in process memory."""

    def __init__(self, storage: InMemoryStorage):
        self.storage = storage

    async def create(self, note_id: UUID, user_id: UUID) -> Collaboration:
        collaboration = Collaboration(
            id=uuid.uuid4(), note_id=note_id, user_id=user_id, created_at=utc_now()
        )
        with self.storage.lock:
            # same referential rules as the foreign keys of the SQL schema
            if note_id not in self.storage.notes or user_id not in self.storage.users:
                raise NotFoundError("Note or user not found")
            if (note_id, user_id) in self.storage.collaborations:
                raise DuplicateEntryError(ALREADY_COLLABORATOR)
            self.storage.collaborations[(note_id, user_id)] = collaboration
        return collaboration

    async def get(self, note_id: UUID, user_id: UUID) -> Optional[Collaboration]:
        with self.storage.lock:
            return self.storage.collaborations.get((note_id, user_id))

    async def exists(self, note_id: UUID, user_id: UUID) -> bool:
        with self.storage.lock:
            return (note_id, user_id) in self.storage.collaborations

    async def delete(self, note_id: UUID, user_id: UUID) -> bool:
        with self.storage.lock:
            return self.storage.collaborations.pop((note_id, user_id), None) is not None

    async def list_for_note(self, note_id: UUID) -> List[Collaboration]:
        with self.storage.lock:
            grants = [c for (n_id, _), c in self.storage.collaborations.items() if n_id == note_id]
        return sorted(grants, key=lambda c: c.created_at)


class InMemoryRefreshTokenLedger(IRefreshTokenLedger):
    """Revocation ledger kept in process memory."""

    def __init__(self, storage: InMemoryStorage):
        self.storage = storage

    async def add(self, token: str) -> None:
        with self.storage.lock:
            if token in self.storage.refresh_tokens:
                raise DuplicateEntryError("Refresh token already recorded")
            self.storage.refresh_tokens.add(token)

    async def remove(self, token: str) -> None:
        with self.storage.lock:
            if token not in self.storage.refresh_tokens:
                raise InvariantError(REFRESH_TOKEN_NOT_RECOGNIZED)
            self.storage.refresh_tokens.remove(token)

    async def contains(self, token: str) -> bool:
        with self.storage.lock:
            return token in self.storage.refresh_tokens
