# test/pytest/test_assignment.py
from datetime import datetime

import pytest
from bson import ObjectId

from app.core.errors import Forbidden, InternalFailure, InvalidIdentifier, NotFound
from app.schemas.assignment import AssignmentCreate, AssignmentUpdate
from app.schemas.context import UserContext
from app.services.assignment_service import AssignmentService


@pytest.fixture
def owner():
    return UserContext(email="a@x.com")


@pytest.fixture
def stranger():
    return UserContext(email="b@x.com")


def _make_create(**overrides):
    base = dict(
        title="Linked lists",
        description="Implement a doubly linked list",
        difficulty="medium",
        dueDate="2026-11-01",
        marks=50,
        thumbnailUrl="https://img.example/ll.png",
        creatorEmail="a@x.com",
    )
    base.update(overrides)
    return AssignmentCreate(**base)


# --------------------------------- Tests --------------------------------------
@pytest.mark.asyncio
async def test_create_and_get(assignment_repo):
    res = await AssignmentService.create_assignment(_make_create(), assignment_repo)
    assert res.acknowledged
    saved = await AssignmentService.get_assignment(res.insertedId, assignment_repo)
    assert saved.title == "Linked lists"
    assert saved.creatorEmail == "a@x.com"
    assert saved.marks == 50


@pytest.mark.asyncio
async def test_create_keeps_extra_fields_and_legacy_creator_alias(assignment_repo):
    data = AssignmentCreate(title="Graphs", userEmail="a@x.com", tags=["bfs"])
    res = await AssignmentService.create_assignment(data, assignment_repo)
    stored = assignment_repo.items[res.insertedId]
    assert stored["creatorEmail"] == "a@x.com"
    assert stored["tags"] == ["bfs"]


@pytest.mark.asyncio
async def test_list_returns_everything(assignment_repo):
    await AssignmentService.create_assignment(_make_create(title="A"), assignment_repo)
    await AssignmentService.create_assignment(_make_create(title="B", creatorEmail="b@x.com"), assignment_repo)
    items = await AssignmentService.list_assignments(assignment_repo)
    assert {a.title for a in items} == {"A", "B"}


@pytest.mark.asyncio
async def test_get_missing_and_malformed_id(assignment_repo):
    with pytest.raises(NotFound):
        await AssignmentService.get_assignment(str(ObjectId()), assignment_repo)
    with pytest.raises(InvalidIdentifier):
        await AssignmentService.get_assignment("not-an-id", assignment_repo)
    assert assignment_repo.calls == ["find_one"]


@pytest.mark.asyncio
async def test_replace_unused_id_upserts(assignment_repo):
    new_id = str(ObjectId())
    res = await AssignmentService.replace_assignment(
        new_id, AssignmentUpdate(title="Fresh", creatorEmail="a@x.com"), assignment_repo
    )
    assert res.upsertedId == new_id
    assert res.matchedCount == 0
    saved = await AssignmentService.get_assignment(new_id, assignment_repo)
    assert saved.title == "Fresh"
    assert saved.creatorEmail == "a@x.com"


@pytest.mark.asyncio
async def test_replace_cannot_rewrite_creator(assignment_repo):
    res = await AssignmentService.create_assignment(_make_create(), assignment_repo)
    upd = await AssignmentService.replace_assignment(
        res.insertedId, AssignmentUpdate(title="Renamed", creatorEmail="b@x.com"), assignment_repo
    )
    assert upd.matchedCount == 1
    saved = await AssignmentService.get_assignment(res.insertedId, assignment_repo)
    assert saved.title == "Renamed"
    assert saved.creatorEmail == "a@x.com"


@pytest.mark.asyncio
async def test_replace_legacy_owner_key_cannot_be_rewritten(assignment_repo, owner):
    legacy_id = str(ObjectId())
    assignment_repo.items[legacy_id] = {"title": "Old", "userEmail": "a@x.com"}

    await AssignmentService.replace_assignment(
        legacy_id,
        AssignmentUpdate(**{"creatorEmail": "evil@x.com", "userEmail": "evil@x.com"}),
        assignment_repo,
    )
    assert assignment_repo.items[legacy_id] == {"title": "Old", "userEmail": "a@x.com"}

    with pytest.raises(Forbidden):
        await AssignmentService.delete_assignment(
            legacy_id, UserContext(email="evil@x.com"), assignment_repo
        )
    await AssignmentService.delete_assignment(legacy_id, owner, assignment_repo)
    assert legacy_id not in assignment_repo.items


@pytest.mark.asyncio
async def test_create_stores_values_as_sent(assignment_repo):
    res = await AssignmentService.create_assignment(
        _make_create(marks="50", creatorEmail="a@x.com", userEmail="b@x.com"), assignment_repo
    )
    stored = assignment_repo.items[res.insertedId]
    assert stored["marks"] == "50"
    assert stored["creatorEmail"] == "a@x.com"
    assert "userEmail" not in stored


@pytest.mark.asyncio
async def test_read_accepts_any_stored_value_types(assignment_repo):
    ref = ObjectId()
    aid = str(ObjectId())
    assignment_repo.items[aid] = {
        "title": "Dated",
        "dueDate": datetime(2025, 1, 1),
        "marks": "ten",
        "rubric": {"ref": ref},
        "creatorEmail": "a@x.com",
    }
    saved = await AssignmentService.get_assignment(aid, assignment_repo)
    assert saved.dueDate == datetime(2025, 1, 1)
    assert saved.marks == "ten"
    assert saved.rubric == {"ref": str(ref)}


@pytest.mark.asyncio
async def test_delete_by_owner(assignment_repo, owner):
    res = await AssignmentService.create_assignment(_make_create(), assignment_repo)
    await AssignmentService.delete_assignment(res.insertedId, owner, assignment_repo)
    with pytest.raises(NotFound):
        await AssignmentService.get_assignment(res.insertedId, assignment_repo)


@pytest.mark.asyncio
async def test_delete_by_other_user_is_forbidden(assignment_repo, stranger):
    res = await AssignmentService.create_assignment(_make_create(), assignment_repo)
    with pytest.raises(Forbidden):
        await AssignmentService.delete_assignment(res.insertedId, stranger, assignment_repo)
    assert res.insertedId in assignment_repo.items


@pytest.mark.asyncio
async def test_delete_owner_match_is_case_sensitive(assignment_repo):
    res = await AssignmentService.create_assignment(_make_create(), assignment_repo)
    with pytest.raises(Forbidden):
        await AssignmentService.delete_assignment(
            res.insertedId, UserContext(email="A@x.com"), assignment_repo
        )


@pytest.mark.asyncio
async def test_delete_claimed_email_must_match_credential(assignment_repo, owner):
    res = await AssignmentService.create_assignment(_make_create(), assignment_repo)
    with pytest.raises(Forbidden):
        await AssignmentService.delete_assignment(
            res.insertedId, owner, assignment_repo, claimed_email="b@x.com"
        )
    assert "delete" not in assignment_repo.calls


@pytest.mark.asyncio
async def test_delete_missing(assignment_repo, owner):
    with pytest.raises(NotFound):
        await AssignmentService.delete_assignment(str(ObjectId()), owner, assignment_repo)


@pytest.mark.asyncio
async def test_delete_reporting_nothing_removed_is_internal_failure(assignment_repo, owner):
    res = await AssignmentService.create_assignment(_make_create(), assignment_repo)

    async def _nothing_deleted(assignment_id):
        return False

    assignment_repo.delete = _nothing_deleted
    with pytest.raises(InternalFailure):
        await AssignmentService.delete_assignment(res.insertedId, owner, assignment_repo)
