"""Message Repository — CRUD and thread queries.

Tests:
    - insert/get round trip preserves every field
    - update is keyed by message id and leaves id/user_id alone
    - get_replies returns exactly a message's children, [] when none
    - get_by_author filters on user_id, optionally roots only
    - get_by_time_range is inclusive and optionally filtered by author
    - delete removes one row and leaves replies orphaned but readable
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.core import identity
from app.core.errors import ResourceNotFoundError
from app.models.message import Message

T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def _new_message(user_id, content="hello", parent_id=None) -> Message:
    return Message(user_id=user_id, content=content, parent_message_id=parent_id)


@pytest.fixture
def author():
    return identity.generate()


async def test_insert_then_get_preserves_fields(message_repo, author):
    parent = await message_repo.insert(_new_message(author, "root"))
    reply = await message_repo.insert(_new_message(author, "re: root", parent.id))

    fetched = await message_repo.get(reply.id)
    assert fetched.id == reply.id
    assert fetched.user_id == author
    assert fetched.content == "re: root"
    assert fetched.parent_message_id == parent.id
    assert fetched.created_at == reply.created_at
    assert fetched.updated_at == reply.updated_at


async def test_is_reply_tracks_parent(message_repo, author):
    root = await message_repo.insert(_new_message(author))
    reply = await message_repo.insert(_new_message(author, parent_id=root.id))
    assert root.is_reply is False
    assert reply.is_reply is True


async def test_insert_stamps_its_own_timestamps(message_repo, author):
    draft = _new_message(author)
    stale = datetime(2000, 1, 1, tzinfo=timezone.utc)
    draft.created_at = draft.updated_at = stale
    message = await message_repo.insert(draft)
    assert message.created_at > stale
    assert message.updated_at == message.created_at


async def test_get_unknown_id_raises_not_found(message_repo):
    with pytest.raises(ResourceNotFoundError):
        await message_repo.get(identity.generate())


async def test_update_changes_content_only(message_repo, author):
    message = await message_repo.insert(_new_message(author, "draft"))
    updated = await message_repo.update(message.id, "final")
    assert updated.id == message.id
    assert updated.user_id == author
    assert updated.content == "final"
    assert updated.updated_at >= message.updated_at
    assert (await message_repo.get(message.id)).content == "final"


async def test_update_by_author_id_does_not_match(message_repo, author):
    await message_repo.insert(_new_message(author, "draft"))
    with pytest.raises(ResourceNotFoundError):
        await message_repo.update(author, "hijacked")


async def test_get_replies_returns_exact_children(message_repo, author):
    root = await message_repo.insert(_new_message(author, "root"))
    other_root = await message_repo.insert(_new_message(author, "other"))
    r1 = await message_repo.insert(_new_message(author, "r1", root.id))
    r2 = await message_repo.insert(_new_message(identity.generate(), "r2", root.id))
    await message_repo.insert(_new_message(author, "elsewhere", other_root.id))
    await message_repo.insert(_new_message(author, "nested", r1.id))

    replies = await message_repo.get_replies(root.id)
    assert {m.id for m in replies} == {r1.id, r2.id}


async def test_get_replies_empty_is_list(message_repo, author):
    root = await message_repo.insert(_new_message(author))
    assert await message_repo.get_replies(root.id) == []


async def test_get_by_author_filters_on_user_id(message_repo, author):
    root = await message_repo.insert(_new_message(author, "mine"))
    reply = await message_repo.insert(_new_message(author, "mine too", root.id))
    await message_repo.insert(_new_message(identity.generate(), "theirs"))

    everything = await message_repo.get_by_author(author)
    roots = await message_repo.get_by_author(author, roots_only=True)
    assert {m.id for m in everything} == {root.id, reply.id}
    assert [m.id for m in roots] == [root.id]


async def test_get_by_author_does_not_confuse_author_with_parent(message_repo, author):
    # A message whose parent id happens to equal the author id must not show up.
    await message_repo.insert(_new_message(identity.generate(), "decoy", author))
    assert await message_repo.get_by_author(author) == []


async def test_time_range_is_inclusive(message_repo, seed_message, author):
    early = await seed_message(author, "early", T0)
    mid = await seed_message(author, "mid", T0 + timedelta(minutes=30))
    late = await seed_message(author, "late", T0 + timedelta(hours=1))
    await seed_message(author, "outside", T0 + timedelta(hours=2))

    found = await message_repo.get_by_time_range(None, T0, T0 + timedelta(hours=1))
    assert [m.id for m in found] == [early.id, mid.id, late.id]


async def test_time_range_filters_by_author(message_repo, seed_message, author):
    other = identity.generate()
    mine = await seed_message(author, "mine", T0)
    await seed_message(other, "theirs", T0)

    found = await message_repo.get_by_time_range(
        author, T0 - timedelta(minutes=1), T0 + timedelta(minutes=1),
    )
    assert [m.id for m in found] == [mine.id]


async def test_time_range_normalises_offsets_and_naive_bounds(message_repo, seed_message, author):
    message = await seed_message(author, created_at=T0)
    plus_two = timezone(timedelta(hours=2))
    after = (T0 - timedelta(seconds=1)).astimezone(plus_two)
    before = (T0 + timedelta(seconds=1)).replace(tzinfo=None)

    found = await message_repo.get_by_time_range(None, after, before)
    assert [m.id for m in found] == [message.id]


async def test_time_range_with_no_matches_is_empty_list(message_repo, seed_message, author):
    await seed_message(author, created_at=T0)
    found = await message_repo.get_by_time_range(
        None, T0 + timedelta(days=1), T0 + timedelta(days=2),
    )
    assert found == []


async def test_delete_returns_prior_contents_and_orphans_replies(message_repo, author):
    root = await message_repo.insert(_new_message(author, "root"))
    reply = await message_repo.insert(_new_message(author, "reply", root.id))

    deleted = await message_repo.delete(root.id)
    assert deleted.id == root.id
    assert deleted.content == "root"

    with pytest.raises(ResourceNotFoundError):
        await message_repo.get(root.id)
    orphan = await message_repo.get(reply.id)
    assert orphan.parent_message_id == root.id


async def test_delete_unknown_id_raises_not_found(message_repo):
    with pytest.raises(ResourceNotFoundError):
        await message_repo.delete(identity.generate())
