"""taskboard TUI Application."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from textual.app import App
from textual.binding import Binding

from .config import Settings
from .errors import BoardStorageError
from .models import TaskDraft
from .repositories import BoardRepositoryProtocol, InMemoryRepository, YamlBoardRepository
from .services import BoardService, StickyTodoService, default_snapshot, demo_snapshot
from .ui.screens import BoardScreen, HelpScreen, StickyTodoScreen
from .ui.widgets import (
    ConfirmModal,
    ListNameModal,
    ListPickerModal,
    TaskFormModal,
    UserManagementModal,
)

logger = logging.getLogger(__name__)


class TaskboardApp(App):
    """taskboard - Terminal kanban board."""

    TITLE = "taskboard"

    CSS = """
    #board-layout {
        height: 1fr;
    }

    #board-main {
        width: 1fr;
    }

    #board-header {
        height: 1;
        padding: 0 1;
    }

    #board-container {
        height: 1fr;
    }

    #columns {
        height: 100%;
    }

    KanbanColumn {
        width: 1fr;
        height: 100%;
        margin: 0 1;
        border: round $primary-darken-2;
    }

    KanbanColumn .column-header {
        height: 1;
        text-style: bold;
        padding: 0 1;
        background: $boost;
    }

    KanbanColumn .column-content {
        height: 1fr;
    }

    EmptyColumnMessage {
        color: $text-muted;
        text-align: center;
        padding: 1 0;
    }

    TaskCard {
        height: auto;
        padding: 0 1;
        margin: 0 0 1 0;
        background: $panel;
        border-left: thick $primary-darken-3;
    }

    TaskCard:focus {
        background: $boost;
        border-left: thick $accent;
    }

    TaskCard .task-title {
        text-style: bold;
    }

    TaskCard .task-preview {
        color: $text-muted;
    }

    TaskCard .task-meta {
        height: 1;
    }

    TaskCard .task-priority {
        width: auto;
        margin-right: 2;
    }

    TaskCard .task-assignee {
        width: auto;
    }
    """

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        # Jump navigation
        Binding("g", "nav_first", "First", show=False),
        Binding("G", "nav_last", "Last", show=False),
        # Task actions
        Binding("n", "new_task", "New", show=True),
        Binding("e", "edit_task", "Edit", show=True),
        Binding("enter", "edit_task", "Edit", show=False),
        Binding("d", "delete_task", "Delete", show=True),
        Binding("H", "move_task_left", "Move ←", show=False),
        Binding("L", "move_task_right", "Move →", show=False),
        Binding("shift+left", "move_task_left", "Move ←", show=False),
        Binding("shift+right", "move_task_right", "Move →", show=False),
        Binding("space", "cycle_status", "Status", show=False),
        Binding("s", "toggle_sort", "Sort", show=True),
        # Lists and users
        Binding("left_square_bracket", "prev_list", "Prev list", show=False),
        Binding("right_square_bracket", "next_list", "Next list", show=False),
        Binding("a", "add_list", "Add list", show=True),
        Binding("x", "delete_list", "Delete list", show=False),
        Binding("u", "manage_users", "Users", show=True),
        Binding("t", "sticky", "Sticky", show=True),
    ]

    SCREENS = {
        "board": BoardScreen,
        "sticky": StickyTodoScreen,
    }

    def __init__(self, settings: Settings | None = None, start_screen: str = "board") -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.start_screen = start_screen
        self.sort_order = self.settings.sort_order
        self._init_services()

    def _init_services(self) -> None:
        """Initialize repository and services."""
        if self.settings.state_file is not None:
            self.repository: BoardRepositoryProtocol = YamlBoardRepository(self.settings.state_file)
        else:
            self.repository = InMemoryRepository()

        initial_state = demo_snapshot if self.settings.seed_demo else default_snapshot
        self.board_service = BoardService(self.repository, initial_state=initial_state)
        self.sticky_service = StickyTodoService()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(self.start_screen)

    @contextmanager
    def storage_errors(self) -> Iterator[None]:
        """Report storage failures as a notification instead of crashing."""
        try:
            yield
        except BoardStorageError as e:
            logger.error("Failed to save board: %s", e)
            self.notify(f"Could not save board: {e}", severity="error", timeout=5)

    def _board_screen(self) -> BoardScreen | None:
        screen = self.screen
        return screen if isinstance(screen, BoardScreen) else None

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    def action_sticky(self) -> None:
        """Switch to the sticky to-do list."""
        if self._board_screen() is not None:
            self.switch_screen("sticky")

    def switch_to_board(self) -> None:
        """Return from the sticky to-do list to the board."""
        self.switch_screen("board")

    # Navigation actions
    def action_nav_left(self) -> None:
        """Navigate to previous column."""
        screen = self._board_screen()
        if screen:
            screen.navigate_column(-1)

    def action_nav_right(self) -> None:
        """Navigate to next column."""
        screen = self._board_screen()
        if screen:
            screen.navigate_column(1)

    def action_nav_up(self) -> None:
        """Navigate to previous task."""
        screen = self._board_screen()
        if screen:
            screen.navigate_task(-1)

    def action_nav_down(self) -> None:
        """Navigate to next task."""
        screen = self._board_screen()
        if screen:
            screen.navigate_task(1)

    def action_nav_first(self) -> None:
        screen = self._board_screen()
        if screen:
            screen.navigate_to_task(0)

    def action_nav_last(self) -> None:
        screen = self._board_screen()
        if screen:
            screen.navigate_to_task(-1)

    # Task actions
    def action_new_task(self) -> None:
        """Open the task form for a new task in the current column."""
        screen = self._board_screen()
        if screen is None:
            return

        draft = TaskDraft(status=screen.current_column_status)
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            TaskFormModal(draft, self.board_service.users),
            callback=self._handle_new_task,
        )

    def _handle_new_task(self, draft: TaskDraft | None) -> None:
        screen = self._board_screen()
        if draft is None or screen is None:
            return

        task = None
        with self.storage_errors():
            task = self.board_service.create_task(
                title=draft.title,
                description=draft.description,
                status=draft.status,
                priority=draft.priority,
                assigned_to=draft.assigned_to,
                tags=draft.tags,
            )
        if task is None:
            return
        screen.refresh_board(focus_task_id=task.id)
        self.notify("Task created", timeout=2)

    def action_edit_task(self) -> None:
        """Open the task form for the focused task."""
        screen = self._board_screen()
        if screen is None:
            return

        task = screen.get_current_task()
        if task is None:
            return

        task_id = task.id

        def handle_edit(draft: TaskDraft | None) -> None:
            if draft is None:
                return
            current = self.board_service.get_task(task_id)
            if current is None:
                return
            with self.storage_errors():
                self.board_service.update_task(draft.apply_to(current))
            screen.refresh_board(focus_task_id=task_id)

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            TaskFormModal(TaskDraft.from_task(task), self.board_service.users, editing=True),
            callback=handle_edit,
        )

    def action_delete_task(self) -> None:
        """Delete the current task (with confirmation)."""
        screen = self._board_screen()
        if screen is None:
            return

        task = screen.get_current_task()
        if task is None:
            return

        task_id = task.id

        def handle_confirm(confirmed: bool) -> None:
            if not confirmed:
                return
            with self.storage_errors():
                if self.board_service.delete_task(task_id):
                    self.notify("Task deleted", timeout=2)
            screen.refresh_board()

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ConfirmModal(f"Delete '{task.title}'?"),
            callback=handle_confirm,
        )

    def action_move_task_left(self) -> None:
        """Move current task to previous column."""
        self._move_current(self.board_service.move_task_left)

    def action_move_task_right(self) -> None:
        """Move current task to next column."""
        self._move_current(self.board_service.move_task_right)

    def action_cycle_status(self) -> None:
        """Advance the current task one column, wrapping from done to todo."""
        self._move_current(self.board_service.cycle_task_status)

    def _move_current(self, move) -> None:
        screen = self._board_screen()
        if screen is None:
            return

        task = screen.get_current_task()
        if task is None:
            return

        result = None
        with self.storage_errors():
            result = move(task.id)
        if result and result.status != task.status:
            # Focus follows task to its new column
            screen.refresh_board(focus_task_id=task.id)
            self.notify(f"Moved to {result.status.label}", timeout=2)

    def action_toggle_sort(self) -> None:
        """Switch between newest-first and oldest-first."""
        screen = self._board_screen()
        if screen is None:
            return
        self.sort_order = self.sort_order.toggled()
        screen.refresh_board()

    # List actions
    def action_prev_list(self) -> None:
        self._select_adjacent_list(-1)

    def action_next_list(self) -> None:
        self._select_adjacent_list(1)

    def _select_adjacent_list(self, delta: int) -> None:
        screen = self._board_screen()
        if screen is None:
            return
        with self.storage_errors():
            self.board_service.select_adjacent_list(delta)
        screen.refresh_board()

    def action_add_list(self) -> None:
        """Ask for a name and create a new active list."""
        if self._board_screen() is None:
            return
        self.push_screen(ListNameModal(), callback=self._handle_list_name)  # pyrefly: ignore[no-matching-overload]

    def _handle_list_name(self, name: str | None) -> None:
        screen = self._board_screen()
        if not name or screen is None:
            return
        with self.storage_errors():
            todo_list = self.board_service.create_list(name)
            self.notify(f"List '{todo_list.name}' created", timeout=2)
        screen.refresh_board()

    def action_delete_list(self) -> None:
        """Pick a list, then delete it and its tasks (with confirmation)."""
        screen = self._board_screen()
        if screen is None:
            return
        if len(self.board_service.lists) <= 1:
            self.notify("Cannot delete the last list", severity="warning", timeout=3)
            return

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ListPickerModal(
                self.board_service.lists,
                "Delete which list?",
                highlighted_id=self.board_service.active_list_id,
            ),
            callback=self._confirm_delete_list,
        )

    def _confirm_delete_list(self, list_id: str | None) -> None:
        screen = self._board_screen()
        todo_list = self.board_service.get_list(list_id) if list_id else None
        if screen is None or todo_list is None:
            return
        task_count = sum(1 for t in self.board_service.tasks if t.list_id == todo_list.id)

        def handle_confirm(confirmed: bool) -> None:
            if not confirmed:
                return
            with self.storage_errors():
                if self.board_service.delete_list(todo_list.id):
                    self.notify(f"List '{todo_list.name}' deleted", timeout=2)
            screen.refresh_board()

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ConfirmModal(
                f"Delete list '{todo_list.name}'?",
                detail=f"{task_count} task(s) in this list will be deleted too.",
            ),
            callback=handle_confirm,
        )

    # User actions
    def action_manage_users(self) -> None:
        """Open the user management dialog."""
        screen = self._board_screen()
        if screen is None:
            return

        def handle_close(_result: None) -> None:
            screen.refresh_board()

        self.push_screen(UserManagementModal(self.board_service), callback=handle_close)


def run(settings: Settings | None = None, start_screen: str = "board") -> None:
    """Run the taskboard application."""
    app = TaskboardApp(settings, start_screen=start_screen)
    app.run()
