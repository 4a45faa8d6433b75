"""Refresh token ledger kept in Redis, one key per token."""

import hashlib
from typing import Optional

from ..errors import REFRESH_TOKEN_NOT_RECOGNIZED, DuplicateEntryError, InvariantError
from ..redis_client import RedisClient
from .interfaces import IRefreshTokenLedger


class RedisRefreshTokenLedger(IRefreshTokenLedger):
    """Each token is a key; SET NX, DEL and EXISTS are atomic per token."""

    def __init__(self, client: RedisClient, expire_seconds: Optional[int] = None):
        self.client = client
        self.expire_seconds = expire_seconds

    def _key(self, token: str) -> str:
        # keys stay short and the raw token never shows up in KEYS/MONITOR output
        digest = hashlib.sha256(token.encode("utf-8")).hexdigest()
        return self.client.key("refresh", digest)

    async def add(self, token: str) -> None:
        stored = await self.client.set_if_absent(self._key(token), "1", self.expire_seconds)
        if not stored:
            raise DuplicateEntryError("Refresh token already recorded")

    async def remove(self, token: str) -> None:
        if not await self.client.delete(self._key(token)):
            raise InvariantError(REFRESH_TOKEN_NOT_RECOGNIZED)

    async def contains(self, token: str) -> bool:
        return await self.client.exists(self._key(token))
