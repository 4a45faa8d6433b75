"""
Error kinds raised by the core.

The core never talks HTTP: route handlers map these to status codes in
``notekeeper.api.errors``. Messages are safe to show to end users; driver
exceptions are chained but never copied into the message.
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """Base class for every error the core surfaces to callers."""

    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class AuthenticationError(NoteKeeperError):
    """Credentials invalid or no principal could be resolved."""

    default_message = "Invalid credentials"


class InvalidTokenError(NoteKeeperError):
    """Token malformed, expired, or signature fails verification."""

    default_message = "Invalid or expired token"


class InvariantError(NoteKeeperError):
    """A required precondition was violated."""

    default_message = "Precondition failed"


class DuplicateEntryError(InvariantError):
    """A store rejected an insert because of a uniqueness constraint."""

    default_message = "Entry already exists"


class AuthorizationError(NoteKeeperError):
    """Caller is known but lacks the permission required on the resource."""

    default_message = "Not allowed to perform this action"


class NotFoundError(NoteKeeperError):
    """Referenced note or user does not exist."""

    default_message = "Not found"


class StorageError(NoteKeeperError):
    """A backing store failed or is unreachable."""

    default_message = "Storage backend unavailable"


# Messages shared between stores and services
REFRESH_TOKEN_NOT_RECOGNIZED = "Refresh token not recognized"
USERNAME_TAKEN = "Username already taken"
ALREADY_COLLABORATOR = "User is already a collaborator on this note"
