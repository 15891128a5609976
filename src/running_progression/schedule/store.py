"""Schedule store — one student's ordered sequence of running sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Iterator

from running_progression.exceptions import NotFoundError
from running_progression.models.entry import RunningWorkoutEntry
from running_progression.models.enums import EntryStatus, WorkoutType


@dataclass(frozen=True)
class ScheduleSummary:
    """Completion totals for a schedule."""

    total_sessions: int
    completed_sessions: int
    planned_distance_km: float
    completed_distance_km: float

    @property
    def completion_fraction(self) -> float:
        if self.total_sessions == 0:
            return 0.0
        return self.completed_sessions / self.total_sessions


@dataclass(frozen=True)
class ScheduleStore:
    """Immutable ordered collection of schedule entries.

    Stored order is insertion order (the generated calendar order) and is
    never changed. The only mutation is :meth:`replace_by_id`, which
    returns a new store of the same length.
    """

    entries: tuple[RunningWorkoutEntry, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, entries: Iterable[RunningWorkoutEntry]) -> ScheduleStore:
        return cls(entries=tuple(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RunningWorkoutEntry]:
        return iter(self.entries)

    def get(self, entry_id: str) -> RunningWorkoutEntry:
        """Return the entry with *entry_id* or raise NotFoundError."""
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        raise NotFoundError(entry_id)

    def filter(
        self,
        status: EntryStatus | None = None,
        workout_type: WorkoutType | None = None,
        after: date | None = None,
    ) -> list[RunningWorkoutEntry]:
        """Entries matching every given criterion, in stored order.

        ``after`` is strict: only entries scheduled later than that date.
        """
        return [
            e for e in self.entries
            if (status is None or e.status == status)
            and (workout_type is None or e.workout_type == workout_type)
            and (after is None or e.scheduled_date > after)
        ]

    def replace_by_id(self, entry: RunningWorkoutEntry) -> ScheduleStore:
        """Return a new store with the entry of the same id swapped in place."""
        replaced = False
        updated: list[RunningWorkoutEntry] = []
        for existing in self.entries:
            if existing.id == entry.id:
                updated.append(entry)
                replaced = True
            else:
                updated.append(existing)
        if not replaced:
            raise NotFoundError(entry.id)
        return ScheduleStore(entries=tuple(updated))

    def display_order(self) -> list[RunningWorkoutEntry]:
        """Pending sessions first, then completed; each group by date."""
        return sorted(
            self.entries,
            key=lambda e: (e.status != EntryStatus.PENDING, e.scheduled_date),
        )

    def summary(self) -> ScheduleSummary:
        completed = [e for e in self.entries if e.status == EntryStatus.COMPLETED]
        return ScheduleSummary(
            total_sessions=len(self.entries),
            completed_sessions=len(completed),
            planned_distance_km=round(
                sum(e.target_distance_km for e in self.entries), 1
            ),
            completed_distance_km=round(
                sum(e.feedback.actual_distance_km for e in completed if e.feedback), 1
            ),
        )
