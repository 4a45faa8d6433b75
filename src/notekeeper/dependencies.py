"""
Request-scoped wiring: which store backend the services receive.

This is the only place that looks at ``storage_backend`` and
``token_ledger_backend``; services just get a ``Stores`` bundle.
"""

from typing import AsyncIterator, Optional

from fastapi import Depends

from .config import Settings, get_settings
from .core.redis_client import get_redis_client
from .core.repositories import InMemoryStorage, IRefreshTokenLedger, RedisRefreshTokenLedger
from .core.services import AccessGuard, AuthService, CollaborationService, NoteService
from .core.storage import Stores, build_memory_stores, build_sql_stores
from .database import get_session_factory
from .security import TokenService

_memory_storage: Optional[InMemoryStorage] = None


def get_memory_storage() -> InMemoryStorage:
    """Process-wide in-memory state used when storage_backend is 'memory'."""
    global _memory_storage
    if _memory_storage is None:
        _memory_storage = InMemoryStorage()
    return _memory_storage


def _redis_ledger(settings: Settings) -> Optional[IRefreshTokenLedger]:
    if settings.token_ledger_backend != "redis":
        return None
    expire_seconds = None
    if settings.refresh_token_expire_days:
        expire_seconds = settings.refresh_token_expire_days * 24 * 3600
    return RedisRefreshTokenLedger(get_redis_client(), expire_seconds=expire_seconds)


async def get_stores(settings: Settings = Depends(get_settings)) -> AsyncIterator[Stores]:
    """Yield the store bundle for one request."""
    ledger = _redis_ledger(settings)
    if settings.storage_backend == "memory":
        yield build_memory_stores(get_memory_storage(), ledger=ledger)
        return

    async with get_session_factory()() as session:
        yield build_sql_stores(session, ledger=ledger)


def get_tokens(settings: Settings = Depends(get_settings)) -> TokenService:
    """Token service bound to the request's settings."""
    return TokenService(settings)


def get_auth_service(
    stores: Stores = Depends(get_stores), tokens: TokenService = Depends(get_tokens)
) -> AuthService:
    return AuthService(stores, tokens)


def get_note_service(stores: Stores = Depends(get_stores)) -> NoteService:
    return NoteService(stores, AccessGuard(stores))


def get_collaboration_service(stores: Stores = Depends(get_stores)) -> CollaborationService:
    return CollaborationService(stores, AccessGuard(stores))
