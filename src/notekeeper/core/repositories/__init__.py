"""Repository layer for data access."""

from .collaboration_repository import CollaborationRepository
from .interfaces import (
    ICollaborationRepository,
    INoteRepository,
    IRefreshTokenLedger,
    IUserRepository,
)
from .memory import (
    InMemoryCollaborationRepository,
    InMemoryNoteRepository,
    InMemoryRefreshTokenLedger,
    InMemoryStorage,
    InMemoryUserRepository,
)
from .note_repository import NoteRepository
from .redis_ledger import RedisRefreshTokenLedger
from .refresh_token_repository import RefreshTokenRepository
from .user_repository import UserRepository

__all__ = [
    # Interfaces
    "IUserRepository",
    "INoteRepository",
    "ICollaborationRepository",
    "IRefreshTokenLedger",
    # SQLAlchemy
    "UserRepository",
    "NoteRepository",
    "CollaborationRepository",
    "RefreshTokenRepository",
    # In-memory
    "InMemoryStorage",
    "InMemoryUserRepository",
    "InMemoryNoteRepository",
    "InMemoryCollaborationRepository",
    "InMemoryRefreshTokenLedger",
    # Redis
    "RedisRefreshTokenLedger",
]
