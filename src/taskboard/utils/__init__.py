"""Utility functions."""

from .datetime import now_utc
from .ids import generate_id
from .tags import add_tag, dedupe_tags, remove_tag

__all__ = [
    "add_tag",
    "dedupe_tags",
    "generate_id",
    "now_utc",
    "remove_tag",
]
