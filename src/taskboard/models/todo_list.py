"""Todo list (board) model."""

from pydantic import BaseModel, ConfigDict


class TodoList(BaseModel):
    """A named board that owns tasks."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str  # display glyph
    color: str  # hex accent color

    @property
    def label(self) -> str:
        return f"{self.icon} {self.name}"
