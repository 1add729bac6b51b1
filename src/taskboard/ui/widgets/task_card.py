"""Task card widget."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task, User
from ...models.palette import PRIORITY_COLORS


class TaskCard(Widget, can_focus=True):
    """A task card displayed in a column."""

    MAX_TAGS = 3

    def __init__(
        self,
        task_data: Task,
        assignee: User | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data
        self._assignee = assignee

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this card."""
        return self._task_data

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(escape(self._truncate(self._task_data.title, 40)), classes="task-title")

        if self._task_data.description:
            yield Static(
                escape(self._truncate(self._task_data.description, 50)),
                classes="task-preview",
            )

        with Horizontal(classes="task-meta"):
            yield Static(self._format_priority(), classes="task-priority")
            if self._assignee:
                yield Static(self._format_assignee(), classes="task-assignee")

        if self._task_data.tags:
            yield Static(self._format_tags(), classes="task-tags")

    def _format_priority(self) -> str:
        """Format priority with its color."""
        priority = self._task_data.priority.value
        color = PRIORITY_COLORS.get(priority, "white")
        return f"[{color}]●[/] {priority}"

    def _format_assignee(self) -> str:
        """Avatar initial in the user's color, with the name."""
        user = self._assignee
        return f"[bold {user.color}]({user.initial})[/] {escape(user.name)}"

    def _format_tags(self) -> str:
        """Format tags for display as chips."""
        tags = self._task_data.tags[: self.MAX_TAGS]
        formatted = " ".join(f"[dim]#{escape(tag)}[/]" for tag in tags)

        if len(self._task_data.tags) > self.MAX_TAGS:
            extra = len(self._task_data.tags) - self.MAX_TAGS
            formatted += f" [dim]+{extra}[/]"

        return formatted

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text to its first line, with ellipsis."""
        text = text.splitlines()[0] if text else ""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"
