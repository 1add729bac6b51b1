"""Kanban column widget."""

from collections.abc import Callable

from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task, TaskStatus, User
from .task_card import TaskCard


class TaskListScroll(VerticalScroll):
    """Scroll container for task lists.

    Raises SkipAction for navigation keys so they bubble up to the App
    for task navigation instead of being handled as scroll actions.
    """

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()

    def action_page_up(self) -> None:
        raise SkipAction()

    def action_page_down(self) -> None:
        raise SkipAction()


class EmptyColumnMessage(Static):
    """Displayed when a column has no tasks."""

    pass


class KanbanColumn(Widget):
    """A single status column in the kanban board."""

    def __init__(
        self,
        title: str,
        status: TaskStatus,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.title = title
        self.status = status
        self._tasks: list[Task] = []
        self._user_lookup: Callable[[str | None], User | None] = lambda _user_id: None

    @property
    def css_key(self) -> str:
        """CSS-safe key for this column's status (already hyphenated)."""
        return self.status.value

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield Static(self._header_text, classes="column-header", id=f"header-{self.css_key}")
        yield TaskListScroll(classes="column-content", id=f"content-{self.css_key}")

    def on_mount(self) -> None:
        """Refresh tasks when column is mounted."""
        if self._tasks:
            self.call_after_refresh(self._refresh_tasks)

    @property
    def _header_text(self) -> str:
        """Header text with styled task count."""
        return f"{self.title} [dim]({len(self._tasks)})[/]"

    def set_tasks(
        self,
        tasks: list[Task],
        user_lookup: Callable[[str | None], User | None] | None = None,
    ) -> None:
        """Set the tasks for this column.

        Args:
            tasks: Tasks to display, already sorted
            user_lookup: Resolves a task's assignee id to a User
        """
        self._tasks = tasks
        if user_lookup is not None:
            self._user_lookup = user_lookup
        # Use call_after_refresh to ensure DOM is ready
        self.call_after_refresh(self._refresh_tasks)

    async def _refresh_tasks(self) -> None:
        """Refresh the task cards in this column."""
        content_id = f"#content-{self.css_key}"
        try:
            content = self.query_one(content_id, TaskListScroll)
        except Exception as e:
            self.log.error(f"Cannot find {content_id}: {e}")
            return

        # Remove existing task cards and wait for removal to complete
        await content.remove_children()

        if not self._tasks:
            await content.mount(EmptyColumnMessage(f"No {self.title.lower()} tasks"))
        else:
            for task in self._tasks:
                card = TaskCard(
                    task,
                    assignee=self._user_lookup(task.assigned_to),
                    id=f"task-{task.id}",
                )
                await content.mount(card)

        try:
            header = self.query_one(f"#header-{self.css_key}", Static)
            header.update(self._header_text)
        except Exception:
            pass

    @property
    def tasks(self) -> list[Task]:
        """Get the tasks in this column."""
        return self._tasks

    @property
    def task_count(self) -> int:
        """Get the number of tasks in this column."""
        return len(self._tasks)

    def focus_task(self, index: int) -> bool:
        """
        Focus the task at the given index.

        Returns:
            True if a task was focused, False otherwise
        """
        if not self._tasks or index < 0 or index >= len(self._tasks):
            return False

        task = self._tasks[index]
        try:
            card = self.query_one(f"#task-{task.id}", TaskCard)
            card.focus()
            card.scroll_visible()
            return True
        except Exception:
            return False

    def get_task(self, index: int) -> Task | None:
        """Get task at index."""
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None

    def index_of(self, task_id: str) -> int:
        """Position of a task in this column, or -1."""
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return -1
