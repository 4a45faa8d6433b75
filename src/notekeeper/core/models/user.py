"""
User model for authentication.
"""

from sqlalchemy import CheckConstraint, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel, TimestampedMixin


class User(TimestampedMixin, BaseModel):
    """User account with username/password auth. Immutable once registered."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        # Enforce max lengths at DB level (SQLite compatible)
        CheckConstraint("length(username) <= 50", name="ck_users_username_len"),
        CheckConstraint("length(full_name) <= 100", name="ck_users_full_name_len"),
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"
