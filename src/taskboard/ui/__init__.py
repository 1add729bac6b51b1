"""UI components."""

from .screens.board import BoardScreen
from .screens.sticky import StickyTodoScreen
from .widgets.column import KanbanColumn
from .widgets.task_card import TaskCard

__all__ = [
    "BoardScreen",
    "KanbanColumn",
    "StickyTodoScreen",
    "TaskCard",
]
