"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from ..models import SortOrder


class Settings(BaseSettings):
    """Application settings."""

    state_file: Path | None = Field(
        default=None,
        description="YAML file holding the board; in-memory only when unset",
    )

    seed_demo: bool = Field(
        default=True,
        description="Seed a new board with sample lists, users and tasks",
    )

    sort_order: SortOrder = Field(
        default=SortOrder.NEWEST,
        description="Initial task ordering inside columns",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    items_db: Path = Field(
        default=Path.home() / ".local" / "share" / "taskboard" / "items.db",
        description="SQLite database for the item service",
    )

    items_host: str = Field(
        default="127.0.0.1",
        description="Bind address for the item service",
    )

    items_port: int = Field(
        default=3000,
        description="Port for the item service",
    )

    model_config = {
        "env_prefix": "TASKBOARD_",
    }
