"""
Store interfaces consumed by the services.

Each store has a durable SQLAlchemy implementation and an in-memory one;
services only ever see these abstractions.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from ..models.collaboration import Collaboration
from ..models.note import Note
from ..models.user import User


class IUserRepository(ABC):
    """Credential store."""

    @abstractmethod
    async def create_user(self, user_data: dict) -> User:
        """Insert user, raising DuplicateEntryError if the username is taken."""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass


class INoteRepository(ABC):
    """Note store."""

    @abstractmethod
    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        pass

    @abstractmethod
    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID."""
        pass

    @abstractmethod
    async def update_note(self, note_id: UUID, update_data: dict) -> Optional[Note]:
        """Update note in place and refresh updated_at."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID) -> bool:
        """Delete note together with its collaborations."""
        pass

    @abstractmethod
    async def list_accessible(
        self,
        user_id: UUID,
        tag: Optional[str] = None,
        page: int = 1,
        per_page: int = 20,
    ) -> Tuple[List[Note], int]:
        """List notes owned by or shared with the user, most recently updated first."""
        pass


class ICollaborationRepository(ABC):
    """Collaboration store."""

    @abstractmethod
    async def create(self, note_id: UUID, user_id: UUID) -> Collaboration:
        """Insert grant, raising DuplicateEntryError if the pair already exists."""
        pass

    @abstractmethod
    async def get(self, note_id: UUID, user_id: UUID) -> Optional[Collaboration]:
        """Get grant for the pair."""
        pass

    @abstractmethod
    async def exists(self, note_id: UUID, user_id: UUID) -> bool:
        """Check if the pair has a grant."""
        pass

    @abstractmethod
    async def delete(self, note_id: UUID, user_id: UUID) -> bool:
        """Delete grant for the pair."""
        pass

    @abstractmethod
    async def list_for_note(self, note_id: UUID) -> List[Collaboration]:
        """List grants on a note, oldest first."""
        pass


class IRefreshTokenLedger(ABC):
    """Set of refresh tokens that are still valid for exchange."""

    @abstractmethod
    async def add(self, token: str) -> None:
        """Record an issued refresh token."""
        pass

    @abstractmethod
    async def remove(self, token: str) -> None:
        """Remove token, raising InvariantError if it is not in the ledger."""
        pass

    @abstractmethod
    async def contains(self, token: str) -> bool:
        """Check ledger membership."""
        pass
