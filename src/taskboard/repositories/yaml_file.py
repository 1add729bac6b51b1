"""YAML file repository for board state."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..errors import BoardStorageError
from ..models import BoardSnapshot

logger = logging.getLogger(__name__)


class YamlBoardRepository:
    """
    Repository storing the whole board in a single YAML file.

    The file is rewritten on every save; a missing file means an empty
    repository.
    """

    HEADER = "# Auto-generated by taskboard - do not edit while the app is running\n"

    def __init__(self, path: Path) -> None:
        """
        Initialize repository.

        Args:
            path: Path to the state file (e.g., ~/.taskboard/board.yaml)
        """
        self.path = path

    def load(self) -> BoardSnapshot | None:
        """Read the state file, or None if it does not exist yet."""
        if not self.path.exists():
            logger.debug("No state file at %s", self.path)
            return None

        try:
            with self.path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise BoardStorageError(f"Cannot read {self.path}: {e}") from e

        if data is None:
            logger.warning("State file %s is empty", self.path)
            return None

        try:
            snapshot = BoardSnapshot.model_validate(data)
        except ValidationError as e:
            raise BoardStorageError(f"Invalid board state in {self.path}: {e}") from e

        logger.info(
            "Loaded board from %s (%d lists, %d tasks, %d users)",
            self.path,
            len(snapshot.lists),
            len(snapshot.tasks),
            len(snapshot.users),
        )
        return snapshot

    def save(self, snapshot: BoardSnapshot) -> None:
        """Write the snapshot to the state file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        data = snapshot.model_dump(mode="json")
        try:
            with self.path.open("w", encoding="utf-8") as f:
                f.write(self.HEADER)
                yaml.safe_dump(
                    data,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                )
        except OSError as e:
            raise BoardStorageError(f"Cannot write {self.path}: {e}") from e
