"""Adaptive running-workout progression engine."""

from running_progression.engine import ProgressionEngine, apply_adjustment
from running_progression.exceptions import (
    ConfigurationError,
    InvalidStateError,
    NotFoundError,
    ProgressionError,
    StorageError,
    ValidationError,
)
from running_progression.feedback import FeedbackRecorder
from running_progression.service import ProgressionService

__all__ = [
    "ConfigurationError",
    "FeedbackRecorder",
    "InvalidStateError",
    "NotFoundError",
    "ProgressionEngine",
    "ProgressionError",
    "ProgressionService",
    "StorageError",
    "ValidationError",
    "apply_adjustment",
]
