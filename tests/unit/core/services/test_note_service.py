"""Unit tests for NoteService (src/notekeeper/core/services/note_service.py)."""

import uuid

import pytest

from notekeeper.core.errors import AuthorizationError, NotFoundError
from notekeeper.core.schemas.notes import NoteCreate, NoteUpdate
from notekeeper.core.services import NoteService


@pytest.fixture
def note_service(stores):
    return NoteService(stores)


@pytest.fixture
async def people(register_user):
    return {name: await register_user(name) for name in ("alice", "bob", "carol")}


async def test_create_note(note_service, people):
    alice = people["alice"]
    note = await note_service.create_note(
        alice.id, NoteCreate(title="Groceries", body="milk", tags=["Home", "home", "todo"])
    )
    assert note.owner_id == alice.id
    assert note.is_owner
    assert note.tags == ["home", "todo"]
    assert note.body == "milk"


async def test_get_note_as_collaborator(note_service, stores, people):
    alice, bob = people["alice"], people["bob"]
    note = await note_service.create_note(alice.id, NoteCreate(title="Plan"))
    await stores.collaborations.create(note.id, bob.id)

    fetched = await note_service.get_note(note.id, bob.id)
    assert fetched.id == note.id
    assert not fetched.is_owner


async def test_get_note_as_stranger(note_service, people):
    note = await note_service.create_note(people["alice"].id, NoteCreate(title="Plan"))
    with pytest.raises(AuthorizationError):
        await note_service.get_note(note.id, people["carol"].id)


async def test_get_missing_note(note_service, people):
    with pytest.raises(NotFoundError):
        await note_service.get_note(uuid.uuid4(), people["alice"].id)


async def test_collaborator_can_update(note_service, stores, people):
    alice, bob = people["alice"], people["bob"]
    note = await note_service.create_note(alice.id, NoteCreate(title="Plan", body="v1"))
    await stores.collaborations.create(note.id, bob.id)

    updated = await note_service.update_note(note.id, bob.id, NoteUpdate(body="v2"))
    assert updated.body == "v2"
    assert updated.title == "Plan"
    assert updated.owner_id == alice.id
    assert updated.updated_at >= note.updated_at


async def test_stranger_cannot_update(note_service, people):
    note = await note_service.create_note(people["alice"].id, NoteCreate(title="Plan"))
    with pytest.raises(AuthorizationError):
        await note_service.update_note(note.id, people["carol"].id, NoteUpdate(title="Mine"))
    assert (await note_service.get_note(note.id, people["alice"].id)).title == "Plan"


async def test_collaborator_cannot_delete(note_service, stores, people):
    alice, bob = people["alice"], people["bob"]
    note = await note_service.create_note(alice.id, NoteCreate(title="Plan"))
    await stores.collaborations.create(note.id, bob.id)

    with pytest.raises(AuthorizationError):
        await note_service.delete_note(note.id, bob.id)
    assert await stores.notes.get_by_id(note.id) is not None


async def test_owner_delete_removes_collaborations(note_service, stores, people):
    alice, bob = people["alice"], people["bob"]
    note = await note_service.create_note(alice.id, NoteCreate(title="Plan"))
    await stores.collaborations.create(note.id, bob.id)

    await note_service.delete_note(note.id, alice.id)
    assert await stores.notes.get_by_id(note.id) is None
    assert not await stores.collaborations.exists(note.id, bob.id)
    with pytest.raises(NotFoundError):
        await note_service.get_note(note.id, alice.id)


async def test_list_notes_includes_shared_and_filters_by_tag(note_service, stores, people):
    alice, bob = people["alice"], people["bob"]
    own = await note_service.create_note(bob.id, NoteCreate(title="Mine", tags=["work"]))
    shared = await note_service.create_note(alice.id, NoteCreate(title="Shared", tags=["home"]))
    await note_service.create_note(alice.id, NoteCreate(title="Private"))
    await stores.collaborations.create(shared.id, bob.id)

    listing = await note_service.list_notes(bob.id)
    assert listing.total == 2
    assert {n.id for n in listing.items} == {own.id, shared.id}
    flags = {n.id: n.is_owner for n in listing.items}
    assert flags == {own.id: True, shared.id: False}

    by_tag = await note_service.list_notes(bob.id, tag="HOME")
    assert [n.id for n in by_tag.items] == [shared.id]


async def test_list_notes_pagination(note_service, people):
    alice = people["alice"]
    for i in range(5):
        await note_service.create_note(alice.id, NoteCreate(title=f"Note {i}"))

    page = await note_service.list_notes(alice.id, page=2, per_page=2)
    assert page.total == 5
    assert page.pages == 3
    assert len(page.items) == 2
    assert page.has_next and page.has_prev

    # oversized pages are capped, empty ones fall back to the default
    capped = await note_service.list_notes(alice.id, page=0, per_page=1000)
    assert capped.page == 1
    assert capped.per_page == 100
    assert len(capped.items) == 5

    fallback = await note_service.list_notes(alice.id, per_page=0)
    assert fallback.per_page == 20


async def test_check_note_access(note_service, stores, people):
    alice, bob = people["alice"], people["bob"]
    note = await note_service.create_note(alice.id, NoteCreate(title="Plan"))
    await stores.collaborations.create(note.id, bob.id)

    access = await note_service.check_note_access(note.id, bob.id)
    assert access.note_id == note.id
    assert access.can_update
    assert not access.can_delete
    assert not access.can_manage_collaborators


async def test_create_note_for_unknown_user(note_service, memory_storage):
    with pytest.raises(NotFoundError):
        await note_service.create_note(uuid.uuid4(), NoteCreate(title="Orphan"))
    assert memory_storage.notes == {}


async def test_create_note_for_unknown_user_sql(sql_stores):
    with pytest.raises(NotFoundError):
        await NoteService(sql_stores).create_note(uuid.uuid4(), NoteCreate(title="Orphan"))


async def test_list_notes_tag_filter_ignores_surrounding_spaces(note_service, people):
    alice = people["alice"]
    note = await note_service.create_note(alice.id, NoteCreate(title="Chores", tags=["home"]))

    listing = await note_service.list_notes(alice.id, tag="  Home ")
    assert [n.id for n in listing.items] == [note.id]
