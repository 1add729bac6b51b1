"""Screen components."""

from .board import BoardScreen
from .help import HelpScreen
from .sticky import StickyTodoScreen

__all__ = [
    "BoardScreen",
    "HelpScreen",
    "StickyTodoScreen",
]
