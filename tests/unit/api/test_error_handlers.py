"""Unit tests for core error to HTTP status mapping (src/notekeeper/api/errors.py)."""

import pytest

from notekeeper.api.errors import status_code_for
from notekeeper.core.errors import (
    AuthenticationError,
    AuthorizationError,
    DuplicateEntryError,
    InvalidTokenError,
    InvariantError,
    NoteKeeperError,
    NotFoundError,
    StorageError,
)


@pytest.mark.parametrize(
    "error, expected",
    [
        (AuthenticationError(), 401),
        (InvalidTokenError(), 401),
        (AuthorizationError(), 403),
        (NotFoundError(), 404),
        (DuplicateEntryError(), 409),
        (InvariantError(), 400),
        (StorageError(), 503),
        (NoteKeeperError(), 500),
    ],
)
def test_status_code_for(error, expected):
    assert status_code_for(error) == expected


def test_default_messages():
    assert AuthenticationError().message == "Invalid credentials"
    assert NotFoundError("Note not found").message == "Note not found"
