"""Tests for to-do items and groups."""

from datetime import timedelta

import pytest

from conftest import T0, FailingStore
from quacktime.infra.storage.repositories import RepositoryFactory
from quacktime.models.todo import TodoGroup, TodoItem, TodoItemUpdate
from quacktime.services.todo.todo_service import (
    DEFAULT_GROUP_NAME,
    MAX_GROUPS,
    GroupLimitError,
    TodoService,
)


@pytest.fixture
def todos(repositories):
    return TodoService(repositories.todo_items, repositories.todo_groups)


@pytest.fixture
def group(todos):
    return todos.groups[0]


def test_default_group_created_once(todos, store):
    assert [g.name for g in todos.groups] == [DEFAULT_GROUP_NAME]

    factory = RepositoryFactory(store)
    again = TodoService(factory.todo_items, factory.todo_groups)
    assert [g.id for g in again.groups] == [todos.groups[0].id]


def test_add_item_newest_first_and_persisted(todos, group, store):
    first = todos.add_item(TodoItem(title="Read", group_id=group.id))
    second = todos.add_item(TodoItem(title="Write", group_id=group.id))

    assert [i.id for i in todos.items] == [second.id, first.id]
    assert store.get("SavedTodoItems")[0]["groupId"] == str(group.id)


def test_toggle_complete_moves_between_lists(todos, group):
    item = todos.add_item(TodoItem(title="Read", group_id=group.id))

    todos.toggle_complete(item.id)

    assert todos.pending_items(group.id) == []
    assert [i.id for i in todos.completed_items(group.id)] == [item.id]
    assert todos.all_pending_items() == []


def test_update_item_only_touches_given_fields(todos, group):
    item = todos.add_item(TodoItem(title="Read", group_id=group.id))

    updated = todos.update_item(item.id, TodoItemUpdate(title="Read chapter 3"))

    assert updated.title == "Read chapter 3"
    assert updated.is_completed is False
    assert updated.created_at == item.created_at


def test_unknown_ids_are_ignored(todos, group):
    missing = TodoItem(title="ghost", group_id=group.id).id

    assert todos.update_item(missing, TodoItemUpdate(title="x")) is None
    assert todos.toggle_complete(missing) is None
    todos.delete_item(missing)
    assert todos.items == []


def test_group_limit(todos):
    for n in range(MAX_GROUPS - 1):
        todos.add_group(TodoGroup(name=f"Group {n}"))

    assert not todos.can_add_more_groups
    with pytest.raises(GroupLimitError):
        todos.add_group(TodoGroup(name="One too many"))
    assert [g.order for g in todos.groups] == list(range(MAX_GROUPS))


def test_delete_group_removes_its_items(todos, group):
    other = todos.add_group(TodoGroup(name="Errands"))
    todos.add_item(TodoItem(title="Read", group_id=group.id))
    kept = todos.add_item(TodoItem(title="Groceries", group_id=other.id))

    todos.delete_group(group.id)

    assert [g.id for g in todos.groups] == [other.id]
    assert todos.items == [kept]


def test_update_group(todos, group):
    renamed = group.model_copy(update={"name": "Work", "color_name": "blue"})

    assert todos.update_group(renamed) == renamed
    assert todos.groups[0].name == "Work"
    assert todos.groups[0].color == "blue"


def test_today_items(todos, group, calendar):
    due_today = todos.add_item(TodoItem(title="Today", group_id=group.id, due_date=T0 + timedelta(hours=3)))
    todos.add_item(TodoItem(title="Tomorrow", group_id=group.id, due_date=T0 + timedelta(days=1)))
    todos.add_item(TodoItem(title="Undated", group_id=group.id))

    assert todos.today_items(T0, calendar) == [due_today]


def test_unreadable_store_still_yields_default_group():
    factory = RepositoryFactory(FailingStore())
    todos = TodoService(factory.todo_items, factory.todo_groups)

    assert [g.name for g in todos.groups] == [DEFAULT_GROUP_NAME]
    item = todos.add_item(TodoItem(title="Read", group_id=todos.groups[0].id))
    assert todos.items == [item]
