"""User model."""

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """Someone tasks can be assigned to."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    color: str  # hex avatar color

    @property
    def initial(self) -> str:
        """First letter of the name, upper-cased, for avatar display."""
        return self.name[:1].upper() or "?"
