"""Decision trace — audit trail of how a feedback submission was handled."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import auto, IntEnum

from running_progression.models.adjustment import LoadAdjustment
from running_progression.models.entry import RunningWorkoutEntry


class RuleStatus(IntEnum):
    """Whether a rule fired or was skipped."""

    FIRED = auto()
    SKIPPED = auto()


@dataclass(frozen=True)
class RuleResult:
    """Record of a single rule's evaluation."""

    rule_id: str
    status: RuleStatus
    adjustment: LoadAdjustment | None = None
    explanation: str = ""


@dataclass(frozen=True)
class DecisionTrace:
    """Every rule's outcome plus the selected adjustment and target."""

    rule_results: tuple[RuleResult, ...] = field(default_factory=tuple)
    adjustment: LoadAdjustment | None = None
    target_notes: str = ""


@dataclass(frozen=True)
class FeedbackOutcome:
    """Result of one feedback submission.

    ``adjusted_entry`` is None when no pending session of the same type
    exists after the completed one — a no-op, not a failure.
    """

    completed_entry: RunningWorkoutEntry
    adjusted_entry: RunningWorkoutEntry | None
    schedule: tuple[RunningWorkoutEntry, ...]
    trace: DecisionTrace

    @property
    def adjusted_entry_id(self) -> str | None:
        return self.adjusted_entry.id if self.adjusted_entry is not None else None
