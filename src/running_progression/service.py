"""ProgressionService — one transaction per schedule operation.

Each call loads the student's whole schedule from the repository,
computes the new state, and writes the whole schedule back. Nothing is
saved when validation or state checks fail.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from running_progression.feedback import FeedbackRecorder
from running_progression.models.decision_trace import FeedbackOutcome
from running_progression.models.entry import RunningWorkoutEntry
from running_progression.models.enums import DEFAULT_SCHEDULE_WEEKS
from running_progression.models.feedback_request import FeedbackRequest
from running_progression.schedule.generator import IdFactory, generate_schedule
from running_progression.schedule.repository import ScheduleRepository
from running_progression.schedule.store import ScheduleStore
from running_progression.serialization.json_codec import (
    outcome_to_dict,
    parse_feedback_request,
)

logger = logging.getLogger(__name__)


class ProgressionService:
    """Facade combining persistence, generation, feedback and progression."""

    def __init__(
        self,
        repository: ScheduleRepository,
        recorder: FeedbackRecorder | None = None,
        clock: Callable[[], date] = date.today,
        id_factory: IdFactory | None = None,
        default_weeks: int = DEFAULT_SCHEDULE_WEEKS,
    ) -> None:
        self.repository = repository
        self.recorder = recorder or FeedbackRecorder()
        self.clock = clock
        self.id_factory = id_factory
        self.default_weeks = default_weeks

    def create_schedule(
        self,
        student_id: str,
        weeks: int | None = None,
        start_date: date | None = None,
    ) -> tuple[RunningWorkoutEntry, ...]:
        """Generate and persist a fresh schedule starting today (or *start_date*)."""
        start = start_date or self.clock()
        if weeks is None:
            weeks = self.default_weeks
        entries = generate_schedule(start, weeks, id_factory=self.id_factory)
        self.repository.save_schedule(student_id, entries)
        logger.info(
            "Generated %d sessions for student %s starting %s",
            len(entries),
            student_id,
            start.isoformat(),
        )
        return entries

    def get_schedule(self, student_id: str) -> ScheduleStore:
        return ScheduleStore.of(self.repository.load_schedule(student_id))

    def record_feedback(
        self,
        student_id: str,
        entry_id: str,
        actual_distance_km: float,
        actual_duration_min: float,
        perceived_exertion: int,
        notes: str = "",
    ) -> FeedbackOutcome:
        """Record a completed session and adjust the next one of its type."""
        request = FeedbackRequest(
            entry_id=entry_id,
            actual_distance_km=actual_distance_km,
            actual_duration_min=actual_duration_min,
            perceived_exertion=perceived_exertion,
            notes=notes,
        )
        return self._apply(student_id, request)

    def submit_feedback(self, student_id: str, payload: dict) -> dict:
        """JSON-in/JSON-out variant of :meth:`record_feedback`."""
        outcome = self._apply(student_id, parse_feedback_request(payload))
        return outcome_to_dict(outcome)

    def _apply(self, student_id: str, request: FeedbackRequest) -> FeedbackOutcome:
        store = self.get_schedule(student_id)
        outcome = self.recorder.record(store, request)
        self.repository.save_schedule(student_id, outcome.schedule)
        return outcome
