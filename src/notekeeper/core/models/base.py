# Base model for database stuff
import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .types import GUID


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(DeclarativeBase):
    """Common base for all models."""

    __abstract__ = True

    # using UUIDs everywhere
    id: Mapped[uuid.UUID] = mapped_column(
        GUID(),
        primary_key=True,
        default=uuid.uuid4,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def __eq__(self, other: object) -> bool:
        """Equality by primary key if available and same mapped class.

        Lets tests compare a row loaded from the database with the instance
        that created it, and in-memory records with their stored copies.
        """
        if self is other:
            return True
        if not isinstance(other, self.__class__):
            return NotImplemented  # type: ignore[return-value]
        return getattr(self, "id", None) is not None and self.id == other.id

    __hash__ = object.__hash__


class TimestampedMixin:
    """Adds an ``updated_at`` column refreshed on every update."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
    )
