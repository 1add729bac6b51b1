"""Sticky to-do note model."""

from pydantic import BaseModel


class StickyNote(BaseModel):
    """One note on the sticky to-do list."""

    text: str
    color: str
    done: bool = False
