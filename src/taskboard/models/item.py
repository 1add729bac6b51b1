"""Item model for the item CRUD service."""

from pydantic import BaseModel


class Item(BaseModel):
    """Row of the ``items`` table."""

    id: int
    title: str | None = None

    @classmethod
    def from_row(cls, row) -> "Item":
        """Create an Item from a ``sqlite3.Row``."""
        return cls(id=row["id"], title=row["title"])
