"""To-do repository"""
from typing import List

from quacktime.models.todo import TodoGroup, TodoItem

from ..client import KeyValueStore
from .base import BaseRepository

SAVED_TODO_ITEMS_KEY = "SavedTodoItems"
SAVED_TODO_GROUPS_KEY = "SavedTodoGroups"


class TodoItemRepository(BaseRepository[TodoItem]):
    """Repository for to-do items"""

    def __init__(self, store: KeyValueStore):
        super().__init__(store, SAVED_TODO_ITEMS_KEY, TodoItem)


class TodoGroupRepository(BaseRepository[TodoGroup]):
    """Repository for to-do groups"""

    def __init__(self, store: KeyValueStore):
        super().__init__(store, SAVED_TODO_GROUPS_KEY, TodoGroup)

    def find_all(self, key=None) -> List[TodoGroup]:
        """Groups ordered by their `order` field"""
        return sorted(super().find_all(key), key=lambda g: g.order)
