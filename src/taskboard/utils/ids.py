"""Identifier generation."""

import uuid


def generate_id() -> str:
    """Return a new unique record identifier (UUID4 hex)."""
    return uuid.uuid4().hex
