"""Board state models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .enums import STATUS_ORDER, SortOrder, TaskStatus
from .task import Task
from .todo_list import TodoList
from .user import User


class BoardSnapshot(BaseModel):
    """Complete board state: every task, list and user plus the active list.

    Snapshots are never mutated; each board operation builds the next one.
    """

    model_config = ConfigDict(frozen=True)

    version: int = 1
    tasks: tuple[Task, ...] = ()
    lists: tuple[TodoList, ...] = ()
    users: tuple[User, ...] = ()
    active_list_id: str | None = None

    def get_task(self, task_id: str) -> Task | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def get_list(self, list_id: str | None) -> TodoList | None:
        return next((lst for lst in self.lists if lst.id == list_id), None)

    def get_user(self, user_id: str | None) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def has_list(self, list_id: str | None) -> bool:
        return self.get_list(list_id) is not None

    def has_user(self, user_id: str | None) -> bool:
        return self.get_user(user_id) is not None


def sort_tasks(tasks: list[Task] | tuple[Task, ...], order: SortOrder) -> list[Task]:
    """Return tasks sorted by creation time without touching the input."""
    return sorted(tasks, key=lambda t: t.created_at, reverse=order is SortOrder.NEWEST)


class Board(BaseModel):
    """Active list with its tasks grouped by status column."""

    todo_list: TodoList | None = None
    sort_order: SortOrder = SortOrder.NEWEST
    columns: dict[TaskStatus, list[Task]] = Field(default_factory=dict)

    @classmethod
    def from_tasks(
        cls,
        tasks: list[Task],
        todo_list: TodoList | None = None,
        sort_order: SortOrder = SortOrder.NEWEST,
    ) -> Board:
        """Partition tasks into the three status columns and sort each one."""
        columns: dict[TaskStatus, list[Task]] = {status: [] for status in STATUS_ORDER}
        for task in tasks:
            columns[task.status].append(task)
        return cls(
            todo_list=todo_list,
            sort_order=sort_order,
            columns={status: sort_tasks(items, sort_order) for status, items in columns.items()},
        )

    def get_column(self, status: TaskStatus) -> list[Task]:
        return self.columns.get(status, [])

    @property
    def todo(self) -> list[Task]:
        return self.get_column(TaskStatus.TODO)

    @property
    def in_progress(self) -> list[Task]:
        return self.get_column(TaskStatus.IN_PROGRESS)

    @property
    def done(self) -> list[Task]:
        return self.get_column(TaskStatus.DONE)

    @property
    def task_count(self) -> int:
        return sum(len(tasks) for tasks in self.columns.values())

    def get_visible_columns(self) -> list[tuple[TaskStatus, str, list[Task]]]:
        """Columns in display order as (status, title, tasks)."""
        return [(status, status.label, self.get_column(status)) for status in STATUS_ORDER]
