import uuid

import pytest

from todo_api.core.exceptions import ResourceNotFoundError
from todo_api.models.user import User
from todo_api.schemas.todo import TodoCreate, TodoUpdate
from todo_api.services.todo_service import ensure_owner, todo_service


def _make_user(db, email):
    user = User(username=email.split("@")[0], email=email, password_hash="hash")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def owners(db):
    return _make_user(db, "a@example.com"), _make_user(db, "b@example.com")


def test_create_and_get(db, owners):
    alice, _ = owners
    todo = todo_service.create_todo(db, alice.id, TodoCreate(title="Buy milk", description="2L"))
    loaded = todo_service.get_todo(db, todo.id, alice.id)
    assert loaded.title == "Buy milk"
    assert loaded.completed is False
    assert loaded.user_id == alice.id


def test_list_only_own_todos(db, owners):
    alice, bob = owners
    todo_service.create_todo(db, alice.id, TodoCreate(title="a1"))
    todo_service.create_todo(db, alice.id, TodoCreate(title="a2"))
    todo_service.create_todo(db, bob.id, TodoCreate(title="b1"))

    titles = {t.title for t in todo_service.list_todos(db, alice.id)}
    assert titles == {"a1", "a2"}


def test_other_user_cannot_read_update_or_delete(db, owners):
    alice, bob = owners
    todo = todo_service.create_todo(db, alice.id, TodoCreate(title="private"))

    with pytest.raises(ResourceNotFoundError):
        todo_service.get_todo(db, todo.id, bob.id)
    with pytest.raises(ResourceNotFoundError):
        todo_service.update_todo(db, todo.id, bob.id, TodoUpdate(title="hacked"))
    with pytest.raises(ResourceNotFoundError):
        todo_service.delete_todo(db, todo.id, bob.id)

    assert todo_service.get_todo(db, todo.id, alice.id).title == "private"


def test_partial_update(db, owners):
    alice, _ = owners
    todo = todo_service.create_todo(db, alice.id, TodoCreate(title="t", description="d"))

    updated = todo_service.update_todo(db, todo.id, alice.id, TodoUpdate(completed=True))

    assert updated.completed is True
    assert updated.title == "t"
    assert updated.description == "d"


def test_delete_then_missing(db, owners):
    alice, _ = owners
    todo = todo_service.create_todo(db, alice.id, TodoCreate(title="t"))
    todo_service.delete_todo(db, todo.id, alice.id)
    with pytest.raises(ResourceNotFoundError):
        todo_service.get_todo(db, todo.id, alice.id)
    with pytest.raises(ResourceNotFoundError):
        todo_service.delete_todo(db, todo.id, alice.id)


def test_ensure_owner_same_error_for_missing_and_foreign(owners):
    alice, bob = owners

    class Record:
        user_id = alice.id

    with pytest.raises(ResourceNotFoundError) as missing:
        ensure_owner(None, alice.id)
    with pytest.raises(ResourceNotFoundError) as foreign:
        ensure_owner(Record(), bob.id)
    assert missing.value.message == foreign.value.message
    assert ensure_owner(Record(), alice.id).user_id == alice.id


def test_unknown_id(db, owners):
    alice, _ = owners
    with pytest.raises(ResourceNotFoundError):
        todo_service.get_todo(db, uuid.uuid4(), alice.id)
