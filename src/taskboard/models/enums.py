"""Enums for task status, priority and view ordering."""

from enum import Enum


class TaskStatus(str, Enum):
    """Board column a task belongs to."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


class Priority(str, Enum):
    """Priority levels for tasks."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SortOrder(str, Enum):
    """Ordering of tasks inside a column by creation time."""

    NEWEST = "newest"
    OLDEST = "oldest"

    def toggled(self) -> "SortOrder":
        return SortOrder.OLDEST if self is SortOrder.NEWEST else SortOrder.NEWEST


_STATUS_LABELS = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}

# Column order on the board, left to right
STATUS_ORDER: tuple[TaskStatus, ...] = (
    TaskStatus.TODO,
    TaskStatus.IN_PROGRESS,
    TaskStatus.DONE,
)
