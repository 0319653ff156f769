"""To-do services"""
from .todo_service import MAX_GROUPS, GroupLimitError, TodoService

__all__ = ['MAX_GROUPS', 'GroupLimitError', 'TodoService']
