"""Feedback recorder — validates a session report and completes the entry."""

from __future__ import annotations

import logging
import math

from running_progression.engine import ProgressionEngine
from running_progression.exceptions import InvalidStateError, ValidationError
from running_progression.math.effort import classify_effort
from running_progression.math.pace import format_pace
from running_progression.models.decision_trace import FeedbackOutcome
from running_progression.models.entry import SessionFeedback
from running_progression.models.enums import (
    MAX_PERCEIVED_EXERTION,
    MIN_PERCEIVED_EXERTION,
)
from running_progression.models.feedback_request import FeedbackRequest
from running_progression.schedule.store import ScheduleStore

logger = logging.getLogger(__name__)


def _require_positive_number(value: object, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{field} must be a number, got {value!r}", field=field
        )
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{field} must be > 0, got {value}", field=field)


def validate_feedback(request: FeedbackRequest) -> None:
    """Raise ValidationError unless every field of *request* is in range."""
    if not request.entry_id:
        raise ValidationError("entry_id is required", field="entry_id")

    _require_positive_number(request.actual_distance_km, "actual_distance_km")
    _require_positive_number(request.actual_duration_min, "actual_duration_min")

    rpe = request.perceived_exertion
    if (
        isinstance(rpe, bool)
        or not isinstance(rpe, int)
        or not MIN_PERCEIVED_EXERTION <= rpe <= MAX_PERCEIVED_EXERTION
    ):
        raise ValidationError(
            f"perceived_exertion must be an integer in "
            f"{MIN_PERCEIVED_EXERTION}..{MAX_PERCEIVED_EXERTION}, got {rpe!r}",
            field="perceived_exertion",
        )


def build_feedback(request: FeedbackRequest) -> SessionFeedback:
    """Derive pace and effort band from a validated request."""
    return SessionFeedback(
        perceived_exertion=request.perceived_exertion,
        actual_distance_km=request.actual_distance_km,
        actual_duration_min=request.actual_duration_min,
        pace=format_pace(request.actual_distance_km, request.actual_duration_min),
        effort_band=classify_effort(request.perceived_exertion),
        notes=request.notes,
    )


class FeedbackRecorder:
    """Completes one schedule entry and triggers the progression engine.

    Validation and state checks run before anything changes, so a
    rejected submission leaves the schedule exactly as it was.
    """

    def __init__(self, engine: ProgressionEngine | None = None) -> None:
        self.engine = engine or ProgressionEngine()

    def record(self, store: ScheduleStore, request: FeedbackRequest) -> FeedbackOutcome:
        """Record *request* against *store*.

        Raises:
            ValidationError: malformed or out-of-range input.
            NotFoundError: the entry id is not in the schedule.
            InvalidStateError: the entry is already COMPLETED.
        """
        validate_feedback(request)
        entry = store.get(request.entry_id)
        if not entry.is_pending:
            raise InvalidStateError(entry.id)

        completed = entry.complete(build_feedback(request))
        logger.info(
            "Completed %s (%s): %.2f km in %.1f min, pace %s, RPE %d",
            completed.id,
            completed.workout_type.name,
            request.actual_distance_km,
            request.actual_duration_min,
            completed.feedback.pace,
            request.perceived_exertion,
        )

        updated, adjusted, trace = self.engine.adjust_next(
            store.replace_by_id(completed), completed
        )
        return FeedbackOutcome(
            completed_entry=completed,
            adjusted_entry=adjusted,
            schedule=updated.entries,
            trace=trace,
        )
