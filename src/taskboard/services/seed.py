"""Initial board contents for a fresh repository."""

from datetime import UTC, datetime

from ..models import BoardSnapshot, Priority, Task, TaskStatus, TodoList, User
from ..models.palette import DEFAULT_LIST_COLOR, DEFAULT_LIST_ICON, DEFAULT_LIST_NAME
from ..utils import generate_id


def default_list() -> TodoList:
    """The list created when a board would otherwise have none."""
    return TodoList(
        id=generate_id(),
        name=DEFAULT_LIST_NAME,
        icon=DEFAULT_LIST_ICON,
        color=DEFAULT_LIST_COLOR,
    )


def default_snapshot() -> BoardSnapshot:
    """A board with a single empty list and no users."""
    todo_list = default_list()
    return BoardSnapshot(lists=(todo_list,), active_list_id=todo_list.id)


def demo_snapshot() -> BoardSnapshot:
    """A board with sample users, lists and tasks to explore the UI with."""
    john = User(id=generate_id(), name="John Doe", color="#93c5fd")
    jane = User(id=generate_id(), name="Jane Smith", color="#f9a8d4")
    mike = User(id=generate_id(), name="Mike Johnson", color="#86efac")

    work = TodoList(id=generate_id(), name="Work Projects", icon="💼", color="#c4b5fd")
    family = TodoList(id=generate_id(), name="Family Tasks", icon="🏠", color="#fda4af")
    personal = TodoList(id=generate_id(), name="Personal Goals", icon="🎯", color="#6ee7b7")

    def _task(title, description, status, priority, tags, created, todo_list, assignee=None):
        return Task(
            id=generate_id(),
            title=title,
            description=description,
            status=status,
            priority=priority,
            tags=tags,
            assigned_to=assignee.id if assignee else None,
            created_at=datetime(2024, 10, created, tzinfo=UTC),
            list_id=todo_list.id,
        )

    tasks = (
        _task(
            "Design new landing page",
            "Create mockups for the new landing page with updated branding",
            TaskStatus.IN_PROGRESS,
            Priority.HIGH,
            ("design", "urgent"),
            28,
            work,
        ),
        _task(
            "Update documentation",
            "Add examples and improve clarity in the API docs",
            TaskStatus.TODO,
            Priority.MEDIUM,
            ("docs",),
            29,
            work,
        ),
        _task(
            "Fix login bug",
            "Users report issues with OAuth login on mobile",
            TaskStatus.TODO,
            Priority.HIGH,
            ("bug", "urgent"),
            30,
            work,
        ),
        _task(
            "Grocery shopping",
            "Buy groceries for the week",
            TaskStatus.TODO,
            Priority.MEDIUM,
            ("shopping",),
            29,
            family,
            assignee=john,
        ),
        _task(
            "Clean garage",
            "Organize and clean the garage this weekend",
            TaskStatus.IN_PROGRESS,
            Priority.LOW,
            ("chores",),
            27,
            family,
            assignee=jane,
        ),
        _task(
            "Learn Spanish",
            "Practice Spanish for 30 minutes daily",
            TaskStatus.IN_PROGRESS,
            Priority.MEDIUM,
            ("learning",),
            26,
            personal,
        ),
    )

    return BoardSnapshot(
        tasks=tasks,
        lists=(work, family, personal),
        users=(john, jane, mike),
        active_list_id=work.id,
    )
