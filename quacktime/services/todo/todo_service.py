"""To-do service for items and their groups"""
import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from quacktime.infra.storage.client import StorageError
from quacktime.infra.storage.repositories.todos import TodoGroupRepository, TodoItemRepository
from quacktime.models.todo import TodoGroup, TodoItem, TodoItemUpdate
from quacktime.utils.datetime_helper import CalendarContext

logger = logging.getLogger(__name__)

MAX_GROUPS = 10
DEFAULT_GROUP_NAME = "My Tasks"


class GroupLimitError(ValueError):
    """Raised when adding a group past MAX_GROUPS"""


class TodoService:
    """Service for to-do list operations"""

    def __init__(self, item_repo: TodoItemRepository, group_repo: TodoGroupRepository):
        self.item_repo = item_repo
        self.group_repo = group_repo
        self.items: List[TodoItem] = self._load(item_repo.find_all, "to-do items")
        self.groups: List[TodoGroup] = self._load(group_repo.find_all, "to-do groups")

        if not self.groups:
            self.groups.append(TodoGroup(name=DEFAULT_GROUP_NAME, icon="checkmark.circle.fill", color_name="orange", order=0))
            self._save_groups()

    # ============================================================================
    # ITEMS
    # ============================================================================

    def add_item(self, item: TodoItem) -> TodoItem:
        self.items.insert(0, item)
        self._save_items()
        return item

    def update_item(self, item_id: UUID, update: TodoItemUpdate) -> Optional[TodoItem]:
        """
        Apply the fields set on update to an item.

        Returns:
            The updated item, or None if no item has that id
        """
        index = self._item_index(item_id)
        if index is None:
            return None

        changes = update.model_dump(exclude_unset=True)
        if not changes:
            return self.items[index]

        self.items[index] = self.items[index].model_copy(update=changes)
        self._save_items()
        return self.items[index]

    def delete_item(self, item_id: UUID) -> None:
        self.items = [i for i in self.items if i.id != item_id]
        self._save_items()

    def toggle_complete(self, item_id: UUID) -> Optional[TodoItem]:
        index = self._item_index(item_id)
        if index is None:
            return None

        item = self.items[index]
        self.items[index] = item.model_copy(update={"is_completed": not item.is_completed})
        self._save_items()
        return self.items[index]

    def items_for_group(self, group_id: UUID) -> List[TodoItem]:
        return [i for i in self.items if i.group_id == group_id]

    def pending_items(self, group_id: UUID) -> List[TodoItem]:
        return [i for i in self.items if i.group_id == group_id and not i.is_completed]

    def completed_items(self, group_id: UUID) -> List[TodoItem]:
        return [i for i in self.items if i.group_id == group_id and i.is_completed]

    def all_pending_items(self) -> List[TodoItem]:
        return [i for i in self.items if not i.is_completed]

    def today_items(self, now: datetime, calendar: CalendarContext) -> List[TodoItem]:
        """Pending items due on the same calendar day as now"""
        today = calendar.day_of(now)
        return [
            i for i in self.items
            if i.due_date is not None and not i.is_completed and calendar.day_of(i.due_date) == today
        ]

    # ============================================================================
    # GROUPS
    # ============================================================================

    @property
    def can_add_more_groups(self) -> bool:
        return len(self.groups) < MAX_GROUPS

    def add_group(self, group: TodoGroup) -> TodoGroup:
        """
        Append a group at the end of the ordering.

        Raises:
            GroupLimitError: MAX_GROUPS already exist
        """
        if not self.can_add_more_groups:
            raise GroupLimitError(f"At most {MAX_GROUPS} groups are allowed")

        group = group.model_copy(update={"order": len(self.groups)})
        self.groups.append(group)
        self._save_groups()
        return group

    def update_group(self, group: TodoGroup) -> Optional[TodoGroup]:
        for index, existing in enumerate(self.groups):
            if existing.id == group.id:
                self.groups[index] = group
                self._save_groups()
                return group
        return None

    def delete_group(self, group_id: UUID) -> None:
        """Delete a group together with all of its items"""
        self.items = [i for i in self.items if i.group_id != group_id]
        self.groups = [g for g in self.groups if g.id != group_id]
        self._save_items()
        self._save_groups()
        logger.info(f"Deleted to-do group {group_id}")

    def _item_index(self, item_id: UUID) -> Optional[int]:
        for index, item in enumerate(self.items):
            if item.id == item_id:
                return index
        return None

    @staticmethod
    def _load(find_all, label: str) -> list:
        try:
            return find_all()
        except StorageError as e:
            logger.error(f"Could not load {label}, starting empty: {e}")
            return []

    def _save_items(self) -> None:
        try:
            self.item_repo.save_all(self.items)
        except StorageError as e:
            logger.error(f"Could not save to-do items: {e}")

    def _save_groups(self) -> None:
        try:
            self.group_repo.save_all(self.groups)
        except StorageError as e:
            logger.error(f"Could not save to-do groups: {e}")
