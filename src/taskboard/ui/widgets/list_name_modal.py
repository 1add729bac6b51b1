"""Dialog asking for a new list's name."""

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label


class ListNameModal(ModalScreen[str | None]):
    """Prompt for a list name. Dismisses with the trimmed name or None."""

    DEFAULT_CSS = """
    ListNameModal {
        align: center middle;
    }

    ListNameModal > Vertical {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    ListNameModal Label {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    ListNameModal .buttons {
        height: auto;
        align: right middle;
        margin-top: 1;
    }

    ListNameModal .buttons Button {
        margin-left: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("New List")
            yield Input(placeholder="List name", id="list-name")
            with Horizontal(classes="buttons"):
                yield Button("Cancel", id="cancel")
                yield Button("Create", id="create", variant="primary", disabled=True)

    def on_mount(self) -> None:
        self.query_one("#list-name", Input).focus()

    @on(Input.Changed, "#list-name")
    def _name_changed(self, event: Input.Changed) -> None:
        self.query_one("#create", Button).disabled = not event.value.strip()

    @on(Input.Submitted, "#list-name")
    def _name_submitted(self) -> None:
        self._submit()

    @on(Button.Pressed, "#create")
    def _create_pressed(self) -> None:
        self._submit()

    @on(Button.Pressed, "#cancel")
    def _cancel_pressed(self) -> None:
        self.action_cancel()

    def _submit(self) -> None:
        name = self.query_one("#list-name", Input).value.strip()
        if name:
            self.dismiss(name)

    def action_cancel(self) -> None:
        self.dismiss(None)
