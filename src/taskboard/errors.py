"""Exceptions raised by taskboard."""


class TaskboardError(Exception):
    """Base exception for taskboard errors."""

    pass


class BoardStorageError(TaskboardError):
    """Board state could not be read from or written to storage."""

    pass


class ItemValidationError(TaskboardError):
    """Item input was rejected before reaching the database."""

    pass
