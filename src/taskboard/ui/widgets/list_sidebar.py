"""Sidebar showing the todo lists."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import TodoList


class ListSidebar(Widget):
    """Lists in creation order with the active one highlighted."""

    DEFAULT_CSS = """
    ListSidebar {
        width: 28;
        height: 100%;
        padding: 0 1;
        border-right: solid $primary-darken-2;
    }

    ListSidebar .sidebar-title {
        text-style: bold;
        padding-bottom: 1;
    }

    ListSidebar .sidebar-hint {
        color: $text-muted;
        padding-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("My Lists", classes="sidebar-title")
        yield Static("", id="sidebar-lists")
        yield Static("[ / ] switch  a add  x delete", classes="sidebar-hint", markup=False)

    def set_lists(self, lists: tuple[TodoList, ...], active_list_id: str | None) -> None:
        """Render the lists, marking the active one."""
        lines = []
        for todo_list in lists:
            label = escape(todo_list.label)
            if todo_list.id == active_list_id:
                lines.append(f"[reverse {todo_list.color}] {label} [/]")
            else:
                lines.append(f" [{todo_list.color}]{label}[/]")
        try:
            self.query_one("#sidebar-lists", Static).update("\n".join(lines))
        except Exception:
            pass
