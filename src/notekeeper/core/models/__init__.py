"""
Database models for NoteKeeper.

SQLAlchemy ORM models that define the durable schema. The in-memory
backend reuses the same classes as plain records.

Models included:
    - User: account with username/password authentication
    - Note: note content, tags and owner reference
    - Collaboration: (note, user) sharing grants
    - RefreshToken: revocation ledger for refresh tokens
"""

from .base import BaseModel
from .collaboration import Collaboration
from .note import Note
from .refresh_token import RefreshToken
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "Collaboration",
    "RefreshToken",
]
