"""Dialog for adding, renaming and removing users."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static

from ...models import User
from ...models.palette import USER_COLORS

if TYPE_CHECKING:
    from ...services import BoardService


def _swatch(color: str) -> Text:
    """Select prompt showing a color block next to its hex value."""
    return Text.assemble(("■ ", color), color)


class UserRow(Horizontal):
    """One user with an inline rename field and a delete button."""

    def __init__(self, user: User) -> None:
        super().__init__(classes="user-row")
        self.user = user

    def compose(self) -> ComposeResult:
        yield Static(f"[bold {self.user.color}]({escape(self.user.initial)})[/]", classes="user-badge")
        yield Input(value=self.user.name, classes="user-name")
        yield Button("Delete", variant="error", classes="user-delete")


class UserManagementModal(ModalScreen[None]):
    """Edits users in place through the board service.

    Renames are applied when the name field is submitted; blank names are
    ignored. Deleting a user unassigns their tasks.
    """

    DEFAULT_CSS = """
    UserManagementModal {
        align: center middle;
    }

    UserManagementModal > Vertical {
        width: 70;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    UserManagementModal .form-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    UserManagementModal #user-rows {
        height: auto;
        max-height: 15;
    }

    UserManagementModal .user-row {
        height: auto;
    }

    UserManagementModal .user-badge {
        width: 5;
        padding: 1 0;
    }

    UserManagementModal .user-name {
        width: 1fr;
    }

    UserManagementModal .empty-users {
        color: $text-muted;
    }

    UserManagementModal .add-row {
        height: auto;
        margin-top: 1;
    }

    UserManagementModal #new-user-name {
        width: 1fr;
    }

    UserManagementModal #new-user-color {
        width: 20;
    }

    UserManagementModal .hint {
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
    ]

    def __init__(self, board_service: BoardService) -> None:
        super().__init__()
        self.board_service = board_service

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("Manage Users", classes="form-title")
            yield VerticalScroll(id="user-rows")
            with Horizontal(classes="add-row"):
                yield Input(placeholder="New user name", id="new-user-name")
                yield Select(
                    [(_swatch(color), color) for color in USER_COLORS],
                    value=USER_COLORS[0],
                    allow_blank=False,
                    id="new-user-color",
                )
                yield Button("Add", id="add-user", variant="primary")
            yield Static("Enter renames a user  Esc closes", classes="hint")

    def on_mount(self) -> None:
        self.call_later(self._render_users)
        self.query_one("#new-user-name", Input).focus()

    async def _render_users(self) -> None:
        rows = self.query_one("#user-rows", VerticalScroll)
        await rows.remove_children()
        users = self.board_service.users
        if users:
            await rows.mount_all([UserRow(user) for user in users])
        else:
            await rows.mount(Static("No users yet", classes="empty-users"))

    @on(Button.Pressed, "#add-user")
    def _add_pressed(self) -> None:
        self._add_user()

    @on(Input.Submitted, "#new-user-name")
    def _new_name_submitted(self) -> None:
        self._add_user()

    @on(Input.Submitted, ".user-name")
    def _rename_submitted(self, event: Input.Submitted) -> None:
        row = event.input.parent
        if isinstance(row, UserRow):
            self.rename_user(row.user, event.value)

    @on(Button.Pressed, ".user-delete")
    def _delete_pressed(self, event: Button.Pressed) -> None:
        row = event.button.parent
        if isinstance(row, UserRow):
            self.remove_user(row.user)

    def rename_user(self, user: User, name: str) -> None:
        """Rename ``user``; blank or unchanged names are ignored."""
        name = name.strip()
        if not name or name == user.name:
            return
        with self.app.storage_errors():  # pyrefly: ignore[missing-attribute]
            if self.board_service.update_user(user.model_copy(update={"name": name})):
                self.notify(f"Renamed to {name}", timeout=2)
        self.call_later(self._render_users)

    def remove_user(self, user: User) -> None:
        with self.app.storage_errors():  # pyrefly: ignore[missing-attribute]
            if self.board_service.delete_user(user.id):
                self.notify(f"Removed {user.name}", timeout=2)
        self.call_later(self._render_users)

    def _add_user(self) -> None:
        name_input = self.query_one("#new-user-name", Input)
        name = name_input.value.strip()
        if not name:
            return
        color = self.query_one("#new-user-color", Select).value
        with self.app.storage_errors():  # pyrefly: ignore[missing-attribute]
            self.board_service.create_user(name, str(color))
            name_input.value = ""
        self.call_later(self._render_users)

    def action_close(self) -> None:
        self.dismiss(None)
