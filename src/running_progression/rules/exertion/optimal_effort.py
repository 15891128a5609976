"""PROGRESSION rule: optimal effort (RPE 4-7) — steady 5% load increase."""

from __future__ import annotations

from running_progression.models.adjustment import LoadAdjustment
from running_progression.models.entry import SessionFeedback
from running_progression.models.enums import (
    EASY_EXERTION_MAX,
    HARD_EXERTION_MIN,
    OPTIMAL_LOAD_FACTOR,
    EffortBand,
    Priority,
)
from running_progression.rules.base import ProgressionRule


class OptimalEffortRule(ProgressionRule):
    """Steady progression when exertion sits in the target band."""

    rule_id = "optimal_effort"
    version = "1.0.0"
    priority = Priority.PROGRESSION

    def evaluate(self, feedback: SessionFeedback) -> LoadAdjustment | None:
        rpe = feedback.perceived_exertion
        if not EASY_EXERTION_MAX < rpe < HARD_EXERTION_MIN:
            return None

        return LoadAdjustment(
            rule_id=self.rule_id,
            rule_version=self.version,
            priority=self.priority,
            effort_band=EffortBand.OPTIMAL,
            factor=OPTIMAL_LOAD_FACTOR,
            explanation=(
                f"RPE {rpe} in optimal band: standard progressive overload "
                f"+{OPTIMAL_LOAD_FACTOR - 1:.0%}."
            ),
        )
