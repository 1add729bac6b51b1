"""Create/edit task dialog."""

from rich.markup import escape
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static, TextArea

from ...models import STATUS_ORDER, Priority, TaskDraft, TaskStatus, User
from ...utils import add_tag, remove_tag

UNASSIGNED = "__unassigned__"


class TaskFormModal(ModalScreen[TaskDraft | None]):
    """Form for a task's title, description, priority, status, assignee and tags.

    Dismisses with the completed draft, or None when cancelled. Saving is
    disabled while the title is blank.
    """

    DEFAULT_CSS = """
    TaskFormModal {
        align: center middle;
    }

    TaskFormModal > Vertical {
        width: 70;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    TaskFormModal .form-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    TaskFormModal .field-label {
        color: $text-muted;
        margin-top: 1;
    }

    TaskFormModal TextArea {
        height: 5;
    }

    TaskFormModal .row {
        height: auto;
    }

    TaskFormModal .row Select {
        width: 1fr;
    }

    TaskFormModal #tag-input {
        width: 1fr;
    }

    TaskFormModal #tag-chips {
        height: auto;
        min-height: 1;
    }

    TaskFormModal #tag-chips Button {
        min-width: 6;
        height: 1;
        border: none;
        margin-right: 1;
    }

    TaskFormModal .buttons {
        height: auto;
        align: right middle;
        margin-top: 1;
    }

    TaskFormModal .buttons Button {
        margin-left: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "save", "Save", show=False),
    ]

    def __init__(self, draft: TaskDraft, users: tuple[User, ...], editing: bool = False) -> None:
        """Initialize the form.

        Args:
            draft: Initial field values
            users: Users offered as assignees
            editing: True when editing an existing task
        """
        super().__init__()
        self._draft = draft.model_copy(deep=True)
        self._users = users
        self._editing = editing

    def compose(self) -> ComposeResult:
        draft = self._draft
        assignees = [("Unassigned", UNASSIGNED)] + [(user.name, user.id) for user in self._users]
        known_ids = {user.id for user in self._users}

        with Vertical():
            yield Label("Edit Task" if self._editing else "New Task", classes="form-title")

            yield Static("Title", classes="field-label")
            yield Input(value=draft.title, placeholder="What needs to be done?", id="title-input")

            yield Static("Description", classes="field-label")
            yield TextArea(draft.description, id="description-input")

            with Horizontal(classes="row"):
                yield Select(
                    [(p.value.capitalize(), p.value) for p in Priority],
                    value=draft.priority.value,
                    allow_blank=False,
                    id="priority-select",
                )
                yield Select(
                    [(s.label, s.value) for s in STATUS_ORDER],
                    value=draft.status.value,
                    allow_blank=False,
                    id="status-select",
                )

            yield Static("Assign to", classes="field-label")
            yield Select(
                assignees,
                value=draft.assigned_to if draft.assigned_to in known_ids else UNASSIGNED,
                allow_blank=False,
                id="assignee-select",
            )

            yield Static("Tags", classes="field-label")
            with Horizontal(classes="row"):
                yield Input(placeholder="Add a tag and press Enter", id="tag-input")
                yield Button("Add", id="add-tag")
            yield Horizontal(id="tag-chips")

            with Horizontal(classes="buttons"):
                yield Button("Cancel", id="cancel")
                yield Button(
                    "Save" if self._editing else "Create",
                    id="save",
                    variant="primary",
                    disabled=not draft.title.strip(),
                )

    def on_mount(self) -> None:
        self.call_later(self._render_tags)
        self.query_one("#title-input", Input).focus()

    @on(Input.Changed, "#title-input")
    def _title_changed(self, event: Input.Changed) -> None:
        self._draft.title = event.value
        self.query_one("#save", Button).disabled = not event.value.strip()

    @on(Input.Submitted, "#title-input")
    def _title_submitted(self) -> None:
        self.action_save()

    @on(Input.Submitted, "#tag-input")
    def _tag_submitted(self) -> None:
        self._add_tag_from_input()

    @on(Button.Pressed)
    def _button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "save":
            self.action_save()
        elif button_id == "cancel":
            self.action_cancel()
        elif button_id == "add-tag":
            self._add_tag_from_input()
        elif event.button.has_class("tag-chip") and event.button.name:
            self._draft.tags = remove_tag(self._draft.tags, event.button.name)
            self.call_later(self._render_tags)

    def _add_tag_from_input(self) -> None:
        tag_input = self.query_one("#tag-input", Input)
        self._draft.tags = add_tag(self._draft.tags, tag_input.value)
        tag_input.value = ""
        self.call_later(self._render_tags)

    async def _render_tags(self) -> None:
        """Rebuild the removable tag chips."""
        chips = self.query_one("#tag-chips", Horizontal)
        await chips.remove_children()
        await chips.mount_all(
            [Button(f"#{escape(tag)} \u00d7", name=tag, classes="tag-chip") for tag in self._draft.tags]
        )

    def collect(self) -> TaskDraft:
        """Read the current field values into a draft."""
        draft = self._draft.model_copy(deep=True)
        draft.title = self.query_one("#title-input", Input).value
        draft.description = self.query_one("#description-input", TextArea).text
        draft.priority = Priority(self.query_one("#priority-select", Select).value)
        draft.status = TaskStatus(self.query_one("#status-select", Select).value)
        assignee = self.query_one("#assignee-select", Select).value
        draft.assigned_to = None if assignee == UNASSIGNED else assignee
        return draft

    def action_save(self) -> None:
        """Dismiss with the draft unless the title is blank."""
        draft = self.collect()
        if not draft.title.strip():
            return
        self.dismiss(draft)

    def action_cancel(self) -> None:
        self.dismiss(None)
