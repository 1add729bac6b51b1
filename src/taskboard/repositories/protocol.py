"""Repository protocol for board state storage backends."""

from typing import Protocol

from ..models import BoardSnapshot


class BoardRepositoryProtocol(Protocol):
    """Interface for board storage backends.

    The board is stored as a whole: repositories load and save complete
    ``BoardSnapshot`` values, never individual records. Implementations:
    - In-memory (default, state lives for the process lifetime)
    - YAML file (state survives restarts)
    """

    def load(self) -> BoardSnapshot | None:
        """Load the stored board.

        Returns:
            The stored snapshot, or None when nothing has been saved yet.
        """
        ...

    def save(self, snapshot: BoardSnapshot) -> None:
        """Replace the stored board with ``snapshot``.

        Args:
            snapshot: The complete board state to persist.
        """
        ...
