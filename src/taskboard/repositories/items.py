"""
Item storage backend (SQLite).

Single ``items`` table keyed by an auto-increment integer id with one text
column. Every public method runs exactly one SQL statement.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from ..models import Item

logger = logging.getLogger(__name__)


def _connect(db_path: str) -> sqlite3.Connection:
    """Open a connection that returns rows addressable by column name."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


class ItemRepository:
    """SQLite-backed store for items.

    Errors from sqlite3 propagate to the caller.
    """

    def __init__(self, db_path: str | Path) -> None:
        """Initialize store and create the table if needed."""
        self.db_path = str(db_path)
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _init_schema(self) -> None:
        """Create the items table if it doesn't exist."""
        with _connect(self.db_path) as conn:
            # AUTOINCREMENT keeps new ids above every id ever issued
            conn.execute("""
                CREATE TABLE IF NOT EXISTS items (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT
                )
            """)
        conn.close()

    def list_all(self) -> list[Item]:
        """All items ordered by id ascending."""
        with _connect(self.db_path) as conn:
            rows = conn.execute("SELECT id, title FROM items ORDER BY id ASC").fetchall()
        conn.close()
        return [Item.from_row(row) for row in rows]

    def add(self, title: str) -> int:
        """Insert an item and return its new id."""
        with _connect(self.db_path) as conn:
            cursor = conn.execute("INSERT INTO items (title) VALUES (?)", (title,))
            item_id = cursor.lastrowid
        conn.close()
        logger.info("Item added: %s", item_id)
        return item_id

    def update(self, item_id: int, title: str) -> bool:
        """Change an item's title. Returns False if no row matched."""
        with _connect(self.db_path) as conn:
            cursor = conn.execute("UPDATE items SET title = ? WHERE id = ?", (title, item_id))
            changed = cursor.rowcount > 0
        conn.close()
        logger.info("Item updated: %s (matched=%s)", item_id, changed)
        return changed

    def delete(self, item_id: int) -> bool:
        """Delete an item. Returns False if no row matched."""
        with _connect(self.db_path) as conn:
            cursor = conn.execute("DELETE FROM items WHERE id = ?", (item_id,))
            deleted = cursor.rowcount > 0
        conn.close()
        logger.info("Item deleted: %s (matched=%s)", item_id, deleted)
        return deleted
