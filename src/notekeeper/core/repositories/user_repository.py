"""User repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select

from ..errors import USERNAME_TAKEN
from ..models.user import User
from .base import SQLRepository
from .interfaces import IUserRepository


class UserRepository(SQLRepository, IUserRepository):
    """Repository for user database operations."""

    async def create_user(self, user_data: dict) -> User:
        """Create new user; the unique constraint decides on duplicates."""
        user = User(**user_data)
        async with self._translate_errors(duplicate_message=USERNAME_TAKEN):
            self.session.add(user)
            await self.session.commit()
            await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        stmt = select(User).where(User.id == user_id)
        async with self._translate_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        stmt = select(User).where(User.username == username)
        async with self._translate_errors():
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()
