"""Data models for the progression engine."""

from running_progression.models.adjustment import LoadAdjustment
from running_progression.models.decision_trace import (
    DecisionTrace,
    FeedbackOutcome,
    RuleResult,
    RuleStatus,
)
from running_progression.models.entry import RunningWorkoutEntry, SessionFeedback
from running_progression.models.feedback_request import FeedbackRequest
from running_progression.models.enums import (
    EffortBand,
    EntryStatus,
    Priority,
    TargetOrder,
    WorkoutType,
)

__all__ = [
    "DecisionTrace",
    "EffortBand",
    "EntryStatus",
    "FeedbackOutcome",
    "FeedbackRequest",
    "LoadAdjustment",
    "Priority",
    "RuleResult",
    "RuleStatus",
    "RunningWorkoutEntry",
    "SessionFeedback",
    "TargetOrder",
    "WorkoutType",
]
