"""
Store bundles handed to the services.

The bundle is assembled once per request (database) or once per process
(memory) by the wiring layer; services never branch on the backend.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from .repositories import (
    CollaborationRepository,
    ICollaborationRepository,
    InMemoryCollaborationRepository,
    InMemoryNoteRepository,
    InMemoryRefreshTokenLedger,
    InMemoryStorage,
    InMemoryUserRepository,
    INoteRepository,
    IRefreshTokenLedger,
    IUserRepository,
    NoteRepository,
    RefreshTokenRepository,
    UserRepository,
)


@dataclass
class Stores:
    """The four stores the core depends on."""

    users: IUserRepository
    notes: INoteRepository
    collaborations: ICollaborationRepository
    refresh_tokens: IRefreshTokenLedger


def build_sql_stores(
    session: AsyncSession, ledger: Optional[IRefreshTokenLedger] = None
) -> Stores:
    """Stores over one database session; the ledger may live elsewhere."""
    return Stores(
        users=UserRepository(session),
        notes=NoteRepository(session),
        collaborations=CollaborationRepository(session),
        refresh_tokens=ledger or RefreshTokenRepository(session),
    )


def build_memory_stores(
    storage: Optional[InMemoryStorage] = None, ledger: Optional[IRefreshTokenLedger] = None
) -> Stores:
    """Stores sharing one in-process state object."""
    storage = storage or InMemoryStorage()
    return Stores(
        users=InMemoryUserRepository(storage),
        notes=InMemoryNoteRepository(storage),
        collaborations=InMemoryCollaborationRepository(storage),
        refresh_tokens=ledger or InMemoryRefreshTokenLedger(storage),
    )
