"""Task domain model."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Priority, TaskStatus


class Task(BaseModel):
    """A single card on the board.

    Tasks are immutable: edits produce a copy via ``model_copy`` and the
    board service swaps the copy in for the stored record.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    priority: Priority = Priority.MEDIUM
    tags: tuple[str, ...] = ()
    assigned_to: str | None = None  # User id, None when unassigned
    created_at: datetime
    list_id: str

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        """Naive timestamps are read as UTC."""
        return value.replace(tzinfo=UTC) if value.tzinfo is None else value

    @property
    def is_assigned(self) -> bool:
        return self.assigned_to is not None


class TaskDraft(BaseModel):
    """Editable fields of a task, as collected by the create/edit dialog."""

    title: str = ""
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    priority: Priority = Priority.MEDIUM
    tags: list[str] = Field(default_factory=list)
    assigned_to: str | None = None

    @classmethod
    def from_task(cls, task: Task) -> "TaskDraft":
        """Start a draft from an existing task."""
        return cls(
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            tags=list(task.tags),
            assigned_to=task.assigned_to,
        )

    def apply_to(self, task: Task) -> Task:
        """Build the full replacement record for ``task`` from this draft."""
        return task.model_copy(
            update={
                "title": self.title.strip(),
                "description": self.description.strip(),
                "status": self.status,
                "priority": self.priority,
                "tags": tuple(self.tags),
                "assigned_to": self.assigned_to,
            }
        )
