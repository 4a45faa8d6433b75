"""Unit tests for the in-memory stores (src/notekeeper/core/repositories/memory.py)."""

import uuid

import pytest

from notekeeper.core.errors import DuplicateEntryError, InvariantError, NotFoundError


async def _user(stores, username):
    return await stores.users.create_user(
        {"username": username, "password_hash": "hashed", "full_name": username.title()}
    )


async def test_usernames_are_unique(stores):
    first = await _user(stores, "alice")
    with pytest.raises(DuplicateEntryError):
        await _user(stores, "alice")

    found = await stores.users.get_by_username("alice")
    assert found.id == first.id
    assert await stores.users.get_by_id(first.id) is first


async def test_unknown_user_lookups(stores):
    assert await stores.users.get_by_username("nobody") is None
    assert await stores.users.get_by_id(uuid.uuid4()) is None


async def test_note_create_normalizes_tags(stores):
    owner = await _user(stores, "alice")
    note = await stores.notes.create_note(
        {"title": "T", "tags": ["Work", "work", "ideas"], "owner_id": owner.id}
    )
    assert note.tags == ["ideas", "work"]
    assert note.body == ""
    assert note.created_at == note.updated_at


async def test_note_update_moves_updated_at(stores):
    owner = await _user(stores, "alice")
    note = await stores.notes.create_note({"title": "T", "owner_id": owner.id})
    before = note.updated_at

    updated = await stores.notes.update_note(note.id, {"body": "new"})
    assert updated.body == "new"
    assert updated.title == "T"
    assert updated.updated_at >= before

    assert await stores.notes.update_note(uuid.uuid4(), {"body": "x"}) is None


async def test_note_delete_cascades_collaborations(stores):
    owner = await _user(stores, "alice")
    member = await _user(stores, "bob")
    note = await stores.notes.create_note({"title": "T", "owner_id": owner.id})
    await stores.collaborations.create(note.id, member.id)

    assert await stores.notes.delete_note(note.id)
    assert await stores.notes.get_by_id(note.id) is None
    assert not await stores.collaborations.exists(note.id, member.id)
    assert not await stores.notes.delete_note(note.id)


async def test_collaboration_pair_is_unique(stores):
    owner = await _user(stores, "alice")
    member = await _user(stores, "bob")
    note = await stores.notes.create_note({"title": "T", "owner_id": owner.id})

    grant = await stores.collaborations.create(note.id, member.id)
    with pytest.raises(DuplicateEntryError) as exc_info:
        await stores.collaborations.create(note.id, member.id)
    # duplicates are a kind of invariant violation
    assert isinstance(exc_info.value, InvariantError)

    assert await stores.collaborations.get(note.id, member.id) is grant
    assert await stores.collaborations.list_for_note(note.id) == [grant]
    assert await stores.collaborations.delete(note.id, member.id)
    assert not await stores.collaborations.delete(note.id, member.id)


async def test_list_accessible_owned_and_shared(stores):
    alice = await _user(stores, "alice")
    bob = await _user(stores, "bob")
    own = await stores.notes.create_note({"title": "own", "owner_id": bob.id, "tags": ["x"]})
    shared = await stores.notes.create_note({"title": "shared", "owner_id": alice.id})
    await stores.notes.create_note({"title": "private", "owner_id": alice.id})
    await stores.collaborations.create(shared.id, bob.id)

    notes, total = await stores.notes.list_accessible(bob.id)
    assert total == 2
    assert {n.id for n in notes} == {own.id, shared.id}

    notes, total = await stores.notes.list_accessible(bob.id, tag="x")
    assert total == 1
    assert notes[0].id == own.id

    notes, total = await stores.notes.list_accessible(bob.id, page=2, per_page=1)
    assert total == 2
    assert len(notes) == 1


async def test_ledger_add_contains_remove(stores):
    ledger = stores.refresh_tokens
    await ledger.add("token-1")
    assert await ledger.contains("token-1")
    assert not await ledger.contains("token-2")

    with pytest.raises(DuplicateEntryError):
        await ledger.add("token-1")

    await ledger.remove("token-1")
    assert not await ledger.contains("token-1")


async def test_ledger_remove_absent_token_fails(stores):
    with pytest.raises(InvariantError):
        await stores.refresh_tokens.remove("never-issued")


async def test_clear_drops_everything(memory_storage, stores):
    await _user(stores, "alice")
    await stores.refresh_tokens.add("t")
    memory_storage.clear()
    assert await stores.users.get_by_username("alice") is None
    assert not await stores.refresh_tokens.contains("t")


async def test_note_for_missing_owner(stores, memory_storage):
    with pytest.raises(NotFoundError):
        await stores.notes.create_note({"title": "T", "owner_id": uuid.uuid4()})
    assert memory_storage.notes == {}


async def test_collaboration_references_must_exist(stores):
    owner = await _user(stores, "alice")
    member = await _user(stores, "bob")
    note = await stores.notes.create_note({"title": "T", "owner_id": owner.id})

    with pytest.raises(NotFoundError):
        await stores.collaborations.create(uuid.uuid4(), member.id)
    with pytest.raises(NotFoundError):
        await stores.collaborations.create(note.id, uuid.uuid4())
