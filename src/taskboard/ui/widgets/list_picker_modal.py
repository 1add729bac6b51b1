"""Dialog for choosing which list to delete."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option

from ...models import TodoList


class ListPickerModal(ModalScreen[str | None]):
    """Pick one list. Dismisses with the list id or None."""

    DEFAULT_CSS = """
    ListPickerModal {
        align: center middle;
    }

    ListPickerModal > Vertical {
        width: 44;
        height: auto;
        max-height: 80%;
        padding: 1 2;
        background: $surface;
        border: solid $error;
    }

    ListPickerModal Label {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
        text-style: bold;
    }

    ListPickerModal OptionList {
        height: auto;
        max-height: 12;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, lists: tuple[TodoList, ...], title: str, highlighted_id: str | None = None) -> None:
        """Initialize the picker.

        Args:
            lists: Lists to offer, in display order
            title: Heading shown above the options
            highlighted_id: List highlighted when the dialog opens
        """
        super().__init__()
        self.lists = lists
        self.title_text = title
        self.highlighted_id = highlighted_id

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.title_text)
            yield OptionList(
                *(
                    Option(f"[{lst.color}]{lst.icon}[/] {escape(lst.name)}", id=lst.id)
                    for lst in self.lists
                ),
                id="list-options",
            )

    def on_mount(self) -> None:
        option_list = self.query_one(OptionList)
        index = next(
            (i for i, lst in enumerate(self.lists) if lst.id == self.highlighted_id),
            0,
        )
        if self.lists:
            option_list.highlighted = index
        option_list.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(event.option.id)

    def action_cancel(self) -> None:
        self.dismiss(None)
