"""Unit tests for CollaborationService (src/notekeeper/core/services/collaboration_service.py)."""

import uuid

import pytest

from notekeeper.core.errors import (
    AuthorizationError,
    DuplicateEntryError,
    InvariantError,
    NotFoundError,
)
from notekeeper.core.schemas.collaboration import CollaboratorRequest
from notekeeper.core.services import CollaborationService


@pytest.fixture
def service(stores):
    return CollaborationService(stores)


@pytest.fixture
async def setup(register_user, stores):
    people = {name: await register_user(name) for name in ("alice", "bob", "carol")}
    note = await stores.notes.create_note({"title": "Plan", "owner_id": people["alice"].id})
    return note, people


async def test_owner_adds_collaborator(service, setup, stores):
    note, people = setup
    grant = await service.add_collaborator(
        people["alice"].id, note.id, CollaboratorRequest(username="bob")
    )
    assert grant.user_id == people["bob"].id
    assert grant.username == "bob"
    assert grant.note_id == note.id
    assert await stores.collaborations.exists(note.id, people["bob"].id)


async def test_adding_same_collaborator_twice_fails(service, setup):
    note, people = setup
    request = CollaboratorRequest(username="bob")
    await service.add_collaborator(people["alice"].id, note.id, request)

    with pytest.raises(InvariantError) as exc_info:
        await service.add_collaborator(people["alice"].id, note.id, request)
    assert isinstance(exc_info.value, DuplicateEntryError)


async def test_collaborator_cannot_add_others(service, setup):
    note, people = setup
    await service.add_collaborator(people["alice"].id, note.id, CollaboratorRequest(username="bob"))
    with pytest.raises(AuthorizationError):
        await service.add_collaborator(
            people["bob"].id, note.id, CollaboratorRequest(username="carol")
        )


async def test_add_unknown_user(service, setup):
    note, people = setup
    with pytest.raises(NotFoundError):
        await service.add_collaborator(
            people["alice"].id, note.id, CollaboratorRequest(username="nobody")
        )


async def test_owner_cannot_be_collaborator(service, setup):
    note, people = setup
    with pytest.raises(InvariantError):
        await service.add_collaborator(
            people["alice"].id, note.id, CollaboratorRequest(username="alice")
        )


async def test_add_to_missing_note(service, setup):
    _, people = setup
    with pytest.raises(NotFoundError):
        await service.add_collaborator(
            people["alice"].id, uuid.uuid4(), CollaboratorRequest(username="bob")
        )


async def test_remove_collaborator(service, setup, stores):
    note, people = setup
    await service.add_collaborator(people["alice"].id, note.id, CollaboratorRequest(username="bob"))

    await service.remove_collaborator(people["alice"].id, note.id, people["bob"].id)
    assert not await stores.collaborations.exists(note.id, people["bob"].id)

    with pytest.raises(NotFoundError):
        await service.remove_collaborator(people["alice"].id, note.id, people["bob"].id)


async def test_collaborator_cannot_remove(service, setup, stores):
    note, people = setup
    for name in ("bob", "carol"):
        await service.add_collaborator(people["alice"].id, note.id, CollaboratorRequest(username=name))

    with pytest.raises(AuthorizationError):
        await service.remove_collaborator(people["bob"].id, note.id, people["carol"].id)
    assert await stores.collaborations.exists(note.id, people["carol"].id)


async def test_list_collaborators(service, setup):
    note, people = setup
    await service.add_collaborator(people["alice"].id, note.id, CollaboratorRequest(username="bob"))

    as_owner = await service.list_collaborators(people["alice"].id, note.id)
    as_member = await service.list_collaborators(people["bob"].id, note.id)
    assert [c.username for c in as_owner] == ["bob"]
    assert as_member == as_owner

    with pytest.raises(AuthorizationError):
        await service.list_collaborators(people["carol"].id, note.id)
