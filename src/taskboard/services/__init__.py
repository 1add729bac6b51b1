"""Service layer for business logic."""

from .board_service import BoardService
from .seed import default_snapshot, demo_snapshot
from .sticky_service import StickyTodoService

__all__ = [
    "BoardService",
    "StickyTodoService",
    "default_snapshot",
    "demo_snapshot",
]
