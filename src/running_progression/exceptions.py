"""Custom exception hierarchy for the progression engine."""

from __future__ import annotations


class ProgressionError(Exception):
    """Base exception for all running_progression errors."""


class ValidationError(ProgressionError):
    """Malformed or out-of-range input (distance, duration, exertion, ...)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(ProgressionError):
    """The schedule entry id does not exist for the student."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Schedule entry not found: {entry_id}")
        self.entry_id = entry_id


class InvalidStateError(ProgressionError):
    """The schedule entry is already COMPLETED."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Schedule entry already completed: {entry_id}")
        self.entry_id = entry_id


class StorageError(ProgressionError):
    """The schedule repository could not read or write its backing store."""


class ConfigurationError(ProgressionError):
    """Invalid settings or an inconsistent rule set."""
