"""Data models."""

from .board import Board, BoardSnapshot, sort_tasks
from .enums import STATUS_ORDER, Priority, SortOrder, TaskStatus
from .item import Item
from .sticky import StickyNote
from .task import Task, TaskDraft
from .todo_list import TodoList
from .user import User

__all__ = [
    "STATUS_ORDER",
    "Board",
    "BoardSnapshot",
    "Item",
    "Priority",
    "SortOrder",
    "StickyNote",
    "Task",
    "TaskDraft",
    "TaskStatus",
    "TodoList",
    "User",
    "sort_tasks",
]
