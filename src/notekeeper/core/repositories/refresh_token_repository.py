"""Refresh token ledger backed by the database."""

from sqlalchemy import delete, select

from ..errors import REFRESH_TOKEN_NOT_RECOGNIZED, InvariantError
from ..models.refresh_token import RefreshToken
from .base import SQLRepository
from .interfaces import IRefreshTokenLedger


class RefreshTokenRepository(SQLRepository, IRefreshTokenLedger):
    """Stores the refresh tokens that have not been logged out."""

    async def add(self, token: str) -> None:
        """Record issued refresh token."""
        async with self._translate_errors(duplicate_message="Refresh token already recorded"):
            self.session.add(RefreshToken(token=token))
            await self.session.commit()

    async def remove(self, token: str) -> None:
        """Delete token; a single DELETE so two logouts cannot both succeed."""
        stmt = delete(RefreshToken).where(RefreshToken.token == token)
        async with self._translate_errors():
            result = await self.session.execute(stmt)
            await self.session.commit()
        if result.rowcount == 0:
            raise InvariantError(REFRESH_TOKEN_NOT_RECOGNIZED)

    async def contains(self, token: str) -> bool:
        """Check if token is still in the ledger."""
        stmt = select(RefreshToken.id).where(RefreshToken.token == token)
        async with self._translate_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none() is not None
