"""Service for the sticky to-do list."""

from __future__ import annotations

import logging
import random

from ..models import StickyNote
from ..models.palette import STICKY_COLORS

logger = logging.getLogger(__name__)


class StickyTodoService:
    """
    A minimal to-do list of colored sticky notes.

    Notes are addressed by position. One note at a time can be in edit
    mode; submitting text then replaces that note instead of adding one.
    Out-of-range positions are ignored.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._notes: list[StickyNote] = []
        self._edit_index: int | None = None

    @property
    def notes(self) -> list[StickyNote]:
        """Copy of the notes in display order."""
        return list(self._notes)

    @property
    def edit_index(self) -> int | None:
        return self._edit_index

    @property
    def is_editing(self) -> bool:
        return self._edit_index is not None

    def submit(self, text: str) -> StickyNote | None:
        """
        Add a note, or update the note being edited.

        Blank text is ignored. Returns the added or updated note.
        """
        if not text.strip():
            return None

        if self._edit_index is not None:
            index = self._edit_index
            note = self._notes[index].model_copy(update={"text": text})
            self._notes[index] = note
            self._edit_index = None
            logger.debug("Sticky note %d updated", index)
            return note

        note = StickyNote(text=text, color=self._rng.choice(STICKY_COLORS))
        self._notes.append(note)
        logger.debug("Sticky note added (%d total)", len(self._notes))
        return note

    def begin_edit(self, index: int) -> str | None:
        """Put a note in edit mode and return its text for the input box."""
        if not self._valid(index):
            return None
        self._edit_index = index
        return self._notes[index].text

    def cancel_edit(self) -> None:
        self._edit_index = None

    def mark_done(self, index: int) -> bool:
        """Mark a note as done. Returns False for an unknown position."""
        if not self._valid(index):
            return False
        self._notes[index] = self._notes[index].model_copy(update={"done": True})
        return True

    def delete(self, index: int) -> bool:
        """Remove a note, keeping the edit position pointed at the same note."""
        if not self._valid(index):
            return False

        del self._notes[index]
        if self._edit_index is not None:
            if self._edit_index == index:
                self._edit_index = None
            elif self._edit_index > index:
                self._edit_index -= 1
        logger.debug("Sticky note %d deleted", index)
        return True

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._notes)
