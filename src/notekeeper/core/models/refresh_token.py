# Revocation ledger for refresh tokens
from sqlalchemy import Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class RefreshToken(BaseModel):
    """A refresh token that has been issued and not yet logged out."""

    __tablename__ = "refresh_tokens"

    token: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (UniqueConstraint("token", name="uq_refresh_tokens_token"),)

    def __repr__(self) -> str:
        token_preview = f"{self.token[:8]}..." if self.token else "None"
        return f"<RefreshToken(token={token_preview})>"
