"""Shared test fixtures: schedules, entries, feedback and engine instances."""

from __future__ import annotations

from datetime import date
from typing import Callable

import pytest

from running_progression.engine import ProgressionEngine
from running_progression.feedback import FeedbackRecorder
from running_progression.math.effort import classify_effort
from running_progression.math.pace import format_pace
from running_progression.models.entry import RunningWorkoutEntry, SessionFeedback
from running_progression.models.enums import EntryStatus, WorkoutType
from running_progression.models.feedback_request import FeedbackRequest
from running_progression.schedule.generator import generate_schedule
from running_progression.schedule.repository import InMemoryScheduleRepository
from running_progression.schedule.store import ScheduleStore
from running_progression.service import ProgressionService


@pytest.fixture
def monday() -> date:
    """Monday 1 Dec 2025 — start of the default generated plan."""
    return date(2025, 12, 1)


@pytest.fixture
def four_week_schedule(monday: date) -> tuple[RunningWorkoutEntry, ...]:
    """16 pending sessions: 4 weeks x (INTERVAL, BASE_RUN, FARTLEK, TEMPO)."""
    return generate_schedule(monday, 4)


@pytest.fixture
def four_week_store(four_week_schedule) -> ScheduleStore:
    return ScheduleStore.of(four_week_schedule)


@pytest.fixture
def make_entry() -> Callable[..., RunningWorkoutEntry]:
    """Factory for a single pending entry with sensible defaults."""

    def _make(
        entry_id: str,
        workout_type: WorkoutType = WorkoutType.BASE_RUN,
        day: int = 1,
        distance_km: float = 4.0,
        duration_min: int = 30,
        status: EntryStatus = EntryStatus.PENDING,
    ) -> RunningWorkoutEntry:
        entry = RunningWorkoutEntry(
            id=entry_id,
            workout_type=workout_type,
            title=f"{workout_type.name} {entry_id}",
            scheduled_date=date(2025, 1, day),
            target_distance_km=distance_km,
            target_duration_min=duration_min,
            main_text="Corrida contínua em Z2.",
        )
        if status == EntryStatus.COMPLETED:
            entry = entry.complete(make_feedback(5))
        return entry

    return _make


def make_feedback(
    rpe: int, distance_km: float = 5.0, duration_min: float = 30.0
) -> SessionFeedback:
    """Feedback as the recorder would build it."""
    return SessionFeedback(
        perceived_exertion=rpe,
        actual_distance_km=distance_km,
        actual_duration_min=duration_min,
        pace=format_pace(distance_km, duration_min),
        effort_band=classify_effort(rpe),
    )


@pytest.fixture
def feedback_for() -> Callable[..., SessionFeedback]:
    return make_feedback


@pytest.fixture
def make_request() -> Callable[..., FeedbackRequest]:
    def _make(
        entry_id: str,
        distance_km: float = 5.0,
        duration_min: float = 30.0,
        rpe: int = 5,
        notes: str = "",
    ) -> FeedbackRequest:
        return FeedbackRequest(
            entry_id=entry_id,
            actual_distance_km=distance_km,
            actual_duration_min=duration_min,
            perceived_exertion=rpe,
            notes=notes,
        )

    return _make


@pytest.fixture
def engine() -> ProgressionEngine:
    return ProgressionEngine()


@pytest.fixture
def recorder(engine: ProgressionEngine) -> FeedbackRecorder:
    return FeedbackRecorder(engine)


@pytest.fixture
def repository() -> InMemoryScheduleRepository:
    return InMemoryScheduleRepository()


@pytest.fixture
def service(repository: InMemoryScheduleRepository, monday: date) -> ProgressionService:
    """Service with a fixed clock so generated dates are deterministic."""
    return ProgressionService(repository, clock=lambda: monday)
