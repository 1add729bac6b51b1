"""In-memory board repository."""

from ..models import BoardSnapshot


class InMemoryRepository:
    """Keeps the latest snapshot in memory for the process lifetime."""

    def __init__(self, snapshot: BoardSnapshot | None = None) -> None:
        self._snapshot = snapshot

    def load(self) -> BoardSnapshot | None:
        return self._snapshot

    def save(self, snapshot: BoardSnapshot) -> None:
        self._snapshot = snapshot
