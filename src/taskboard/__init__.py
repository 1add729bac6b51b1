"""taskboard - kanban board, sticky to-do list and item service."""

__version__ = "0.1.0"
