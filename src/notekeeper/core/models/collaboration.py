# Collaboration grants between notes and users
import uuid

from sqlalchemy import ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Collaboration(BaseModel):
    """Grants a user read/update access to a note they do not own."""

    __tablename__ = "collaborations"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        # a user is granted collaboration on a note at most once
        UniqueConstraint("note_id", "user_id", name="uq_collaborations_note_user"),
        Index("idx_collaborations_note_id", "note_id"),
        Index("idx_collaborations_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Collaboration(note_id={self.note_id}, user_id={self.user_id})>"
