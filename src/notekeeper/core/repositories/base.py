"""Shared plumbing for SQLAlchemy-backed repositories."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import DuplicateEntryError, NotFoundError, StorageError

logger = logging.getLogger(__name__)

# driver messages: SQLite "UNIQUE constraint failed" / "FOREIGN KEY constraint failed",
# PostgreSQL "duplicate key value violates unique constraint" / "violates foreign key constraint"
_UNIQUE_MARKERS = ("unique constraint", "duplicate key")
_FOREIGN_KEY_MARKERS = ("foreign key",)


def _violation_kind(exc: IntegrityError) -> Optional[str]:
    """'unique', 'foreign_key' or None for other integrity failures."""
    text = str(exc.orig).lower()
    if any(marker in text for marker in _UNIQUE_MARKERS):
        return "unique"
    if any(marker in text for marker in _FOREIGN_KEY_MARKERS):
        return "foreign_key"
    return None


class SQLRepository:
    """Base class holding the session and translating driver errors."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _translate_errors(
        self,
        duplicate_message: Optional[str] = None,
        missing_message: Optional[str] = None,
    ) -> AsyncIterator[None]:
        """Roll back and re-raise store failures as core errors.

        A unique violation becomes DuplicateEntryError and a foreign key
        violation NotFoundError, each only when the caller names a message
        for it; anything else is a storage failure.
        """
        try:
            yield
        except IntegrityError as exc:
            await self.session.rollback()
            kind = _violation_kind(exc)
            if kind == "unique" and duplicate_message is not None:
                raise DuplicateEntryError(duplicate_message) from exc
            if kind == "foreign_key" and missing_message is not None:
                raise NotFoundError(missing_message) from exc
            logger.error(f"Integrity error in {self.__class__.__name__}: {exc}")
            raise StorageError() from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Database error in {self.__class__.__name__}: {exc}")
            raise StorageError() from exc
