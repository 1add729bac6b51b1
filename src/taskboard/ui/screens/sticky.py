"""Sticky to-do screen."""

from rich.markup import escape
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Static

from ...models import StickyNote


class StickyNoteCard(Vertical):
    """A single note with edit, done and delete buttons."""

    DEFAULT_CSS = """
    StickyNoteCard {
        height: auto;
        margin: 0 0 1 0;
        padding: 0 1;
        color: #1f2937;
    }

    StickyNoteCard .note-text {
        padding: 1 0 0 0;
    }

    StickyNoteCard.-done .note-text {
        text-style: strike;
        color: #6b7280;
    }

    StickyNoteCard .note-actions {
        height: auto;
        align: right middle;
    }

    StickyNoteCard .note-actions Button {
        min-width: 8;
        margin-left: 1;
    }
    """

    def __init__(self, note: StickyNote, index: int) -> None:
        super().__init__(classes="-done" if note.done else "")
        self.note = note
        self.index = index
        self.styles.background = note.color

    def compose(self) -> ComposeResult:
        yield Static(escape(self.note.text), classes="note-text")
        with Horizontal(classes="note-actions"):
            yield Button("Edit", classes="note-edit")
            yield Button("Done", classes="note-done", disabled=self.note.done)
            yield Button("Delete", variant="error", classes="note-delete")


class StickyTodoScreen(Screen):
    """Free-form notes kept alongside the board for the current session."""

    DEFAULT_CSS = """
    StickyTodoScreen #sticky-form {
        height: auto;
        padding: 1 2;
    }

    StickyTodoScreen #sticky-input {
        width: 1fr;
    }

    StickyTodoScreen #sticky-notes {
        padding: 0 2;
    }

    StickyTodoScreen .empty-notes {
        color: $text-muted;
        text-align: center;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Board"),
    ]

    @property
    def sticky_service(self):
        return self.app.sticky_service  # pyrefly: ignore[missing-attribute]

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="sticky-form"):
            yield Input(placeholder="Write a note", id="sticky-input")
            yield Button("Add", id="sticky-submit", variant="primary")
        yield VerticalScroll(id="sticky-notes")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_notes()
        self.query_one("#sticky-input", Input).focus()

    def on_screen_resume(self) -> None:
        if self.is_mounted:
            self.refresh_notes()

    def refresh_notes(self) -> None:
        """Rebuild the note cards and sync the submit button label."""
        self.query_one("#sticky-submit", Button).label = (
            "Update" if self.sticky_service.is_editing else "Add"
        )
        self.call_later(self._render_notes)

    async def _render_notes(self) -> None:
        container = self.query_one("#sticky-notes", VerticalScroll)
        await container.remove_children()
        notes = self.sticky_service.notes
        if notes:
            await container.mount_all([StickyNoteCard(note, i) for i, note in enumerate(notes)])
        else:
            await container.mount(Static("No notes yet", classes="empty-notes"))

    @on(Input.Submitted, "#sticky-input")
    def _input_submitted(self) -> None:
        self._submit()

    @on(Button.Pressed, "#sticky-submit")
    def _submit_pressed(self) -> None:
        self._submit()

    def _submit(self) -> None:
        note_input = self.query_one("#sticky-input", Input)
        if self.sticky_service.submit(note_input.value) is not None:
            note_input.value = ""
            self.refresh_notes()

    @on(Button.Pressed, ".note-edit")
    def _edit_pressed(self, event: Button.Pressed) -> None:
        card = self._card_for(event.button)
        if card is None:
            return
        text = self.sticky_service.begin_edit(card.index)
        if text is not None:
            note_input = self.query_one("#sticky-input", Input)
            note_input.value = text
            note_input.focus()
            self.refresh_notes()

    @on(Button.Pressed, ".note-done")
    def _done_pressed(self, event: Button.Pressed) -> None:
        card = self._card_for(event.button)
        if card is not None and self.sticky_service.mark_done(card.index):
            self.refresh_notes()

    @on(Button.Pressed, ".note-delete")
    def _delete_pressed(self, event: Button.Pressed) -> None:
        card = self._card_for(event.button)
        if card is None:
            return
        was_editing = self.sticky_service.is_editing
        if self.sticky_service.delete(card.index):
            if was_editing and not self.sticky_service.is_editing:
                self.query_one("#sticky-input", Input).value = ""
            self.refresh_notes()

    def _card_for(self, button: Button) -> StickyNoteCard | None:
        for ancestor in button.ancestors:
            if isinstance(ancestor, StickyNoteCard):
                return ancestor
        return None

    def action_close(self) -> None:
        """Cancel any edit and return to the board."""
        if self.sticky_service.is_editing:
            self.sticky_service.cancel_edit()
            self.query_one("#sticky-input", Input).value = ""
            self.refresh_notes()
            return
        self.app.switch_to_board()  # pyrefly: ignore[missing-attribute]
