"""Schedule entry and session feedback value types."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date

from running_progression.models.enums import EffortBand, EntryStatus, WorkoutType


def format_distance_label(distance_km: float) -> str:
    """Display label for a distance target. e.g. 5.0 -> '5km', 5.3 -> '5.3km'."""
    return f"{distance_km:g}km"


def format_duration_label(duration_min: int) -> str:
    """Display label for a duration target. e.g. 32 -> '32min'."""
    return f"{duration_min}min"


@dataclass(frozen=True)
class SessionFeedback:
    """What the student reported after completing a session."""

    perceived_exertion: int
    actual_distance_km: float
    actual_duration_min: float
    pace: str
    effort_band: EffortBand
    notes: str = ""


@dataclass(frozen=True)
class RunningWorkoutEntry:
    """One scheduled running session.

    Entries are immutable values; every change produces a new entry
    through :meth:`complete` or :meth:`with_targets`. Labels are always
    derived from the numeric targets.
    """

    id: str
    workout_type: WorkoutType
    title: str
    scheduled_date: date
    target_distance_km: float
    target_duration_min: int
    warmup_text: str = ""
    main_text: str = ""
    cooldown_text: str = ""
    status: EntryStatus = EntryStatus.PENDING
    feedback: SessionFeedback | None = None

    @property
    def target_distance_label(self) -> str:
        return format_distance_label(self.target_distance_km)

    @property
    def target_duration_label(self) -> str:
        return format_duration_label(self.target_duration_min)

    @property
    def is_pending(self) -> bool:
        return self.status == EntryStatus.PENDING

    def complete(self, feedback: SessionFeedback) -> RunningWorkoutEntry:
        """Return a COMPLETED copy carrying *feedback*."""
        return dataclasses.replace(
            self, status=EntryStatus.COMPLETED, feedback=feedback
        )

    def with_targets(
        self, distance_km: float, duration_min: int, main_text: str
    ) -> RunningWorkoutEntry:
        """Return a copy with new targets and main-set text."""
        return dataclasses.replace(
            self,
            target_distance_km=distance_km,
            target_duration_min=duration_min,
            main_text=main_text,
        )
