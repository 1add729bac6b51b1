"""Main kanban board screen."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import STATUS_ORDER, SortOrder, Task, TaskStatus
from ..widgets.column import KanbanColumn
from ..widgets.list_sidebar import ListSidebar


class BoardScreen(Screen):
    """Active list's tasks in three status columns, with the list sidebar."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_task = 0
        # Pending focus state for deferred focus after refresh
        self._pending_focus_id: str | None = None
        self._pending_column = 0
        self._pending_task = 0

    @property
    def column_count(self) -> int:
        return len(STATUS_ORDER)

    def compose(self) -> ComposeResult:
        yield Header()

        with Horizontal(id="board-layout"):
            yield ListSidebar(id="list-sidebar")
            with Vertical(id="board-main"):
                yield Static("", id="board-header")
                with Container(id="board-container"), Horizontal(id="columns"):
                    for status in STATUS_ORDER:
                        yield KanbanColumn(
                            title=status.label,
                            status=status,
                            id=f"column-{status.value}",
                        )

        yield Footer()

    def on_mount(self) -> None:
        """Load tasks when screen mounts."""
        self.load_tasks()
        self.call_after_refresh(self._initial_focus)

    def _initial_focus(self) -> None:
        self._update_focus()

    def on_screen_resume(self) -> None:
        """Pick up changes made while another screen was on top."""
        if self.is_mounted:
            self.refresh_board()

    def load_tasks(self) -> None:
        """Populate the sidebar, header and columns from the board service."""
        service = self.app.board_service  # pyrefly: ignore[missing-attribute]
        sort_order: SortOrder = self.app.sort_order  # pyrefly: ignore[missing-attribute]
        board = service.load_board(sort_order)

        try:
            self.query_one(ListSidebar).set_lists(service.lists, service.active_list_id)
        except Exception as e:
            self.log.error(f"Failed to update sidebar: {e}")

        self._update_header(board.todo_list, board.task_count, sort_order)

        for status, _title, tasks in board.get_visible_columns():
            column = self._get_column(STATUS_ORDER.index(status))
            if column is None:
                self.log.error(f"Missing column for {status.value}")
                continue
            column.set_tasks(tasks, user_lookup=service.get_user)

    def _update_header(self, todo_list, task_count: int, sort_order: SortOrder) -> None:
        if todo_list is not None:
            title = f"[bold {todo_list.color}]{escape(todo_list.label)}[/]"
        else:
            title = "[dim]No list selected[/]"
        noun = "task" if task_count == 1 else "tasks"
        sort_label = "Newest first" if sort_order is SortOrder.NEWEST else "Oldest first"
        text = f"{title}  [dim]{task_count} {noun}  ·  {sort_label} (s)[/]"
        try:
            self.query_one("#board-header", Static).update(text)
        except Exception:
            pass

    def refresh_board(self, focus_task_id: str | None = None) -> None:
        """
        Refresh the board display.

        Args:
            focus_task_id: If provided, focus this task after refresh.
                           If None, preserves current position.
        """
        saved_column = self._current_column
        saved_task = self._current_task

        self.load_tasks()

        self._pending_focus_id = focus_task_id
        self._pending_column = saved_column
        self._pending_task = saved_task

        # Double-defer so the columns finish rebuilding first
        self.call_after_refresh(self._schedule_pending_focus)

    def _schedule_pending_focus(self) -> None:
        self.call_after_refresh(self._apply_pending_focus)

    def _find_task_position(self, task_id: str) -> tuple[int, int] | None:
        """Find a task's (column_index, task_index) by id."""
        for col_idx in range(self.column_count):
            column = self._get_column(col_idx)
            if column is None:
                continue
            task_idx = column.index_of(task_id)
            if task_idx >= 0:
                return (col_idx, task_idx)
        return None

    def _apply_pending_focus(self) -> None:
        """Apply pending focus after refresh completes."""
        if self._pending_focus_id:
            position = self._find_task_position(self._pending_focus_id)
            if position:
                self._current_column, self._current_task = position
                self._update_focus()
                return

        # Fallback: restore previous position (clamped to valid range)
        self._current_column = min(self._pending_column, self.column_count - 1)
        column = self._get_column(self._current_column)
        if column and column.task_count > 0:
            self._current_task = min(self._pending_task, column.task_count - 1)
        else:
            self._current_task = 0

        self._update_focus()

    def navigate_column(self, delta: int) -> None:
        """Navigate between columns."""
        new_column = max(0, min(self._current_column + delta, self.column_count - 1))

        if new_column != self._current_column:
            self._current_column = new_column
            column = self._get_column(new_column)
            if column and column.task_count > 0:
                self._current_task = min(self._current_task, column.task_count - 1)
            else:
                self._current_task = 0
            self._update_focus()

    def navigate_task(self, delta: int) -> None:
        """Navigate between tasks in current column."""
        column = self._get_column(self._current_column)
        if column is None or column.task_count == 0:
            return

        new_task = max(0, min(self._current_task + delta, column.task_count - 1))

        if new_task != self._current_task:
            self._current_task = new_task
            self._update_focus()

    def navigate_to_task(self, index: int) -> None:
        """Navigate to specific task index (-1 for last)."""
        column = self._get_column(self._current_column)
        if column is None or column.task_count == 0:
            return

        index = column.task_count - 1 if index < 0 else min(index, column.task_count - 1)

        self._current_task = index
        self._update_focus()

    def _get_column(self, index: int) -> KanbanColumn | None:
        if index < 0 or index >= self.column_count:
            return None
        try:
            return self.query_one(f"#column-{STATUS_ORDER[index].value}", KanbanColumn)
        except Exception:
            return None

    def _update_focus(self) -> None:
        column = self._get_column(self._current_column)
        if column:
            column.focus_task(self._current_task)

    def get_current_task(self) -> Task | None:
        """Get the currently focused task."""
        column = self._get_column(self._current_column)
        if column:
            return column.get_task(self._current_task)
        return None

    @property
    def current_column_status(self) -> TaskStatus:
        """Status of the column that has the cursor."""
        if 0 <= self._current_column < self.column_count:
            return STATUS_ORDER[self._current_column]
        return TaskStatus.TODO
