"""SAFETY rule: session felt overly hard (RPE 8-10) — reduce load 5%."""

from __future__ import annotations

from running_progression.models.adjustment import LoadAdjustment
from running_progression.models.entry import SessionFeedback
from running_progression.models.enums import (
    HARD_EXERTION_MIN,
    TOO_HARD_LOAD_FACTOR,
    EffortBand,
    Priority,
)
from running_progression.rules.base import ProgressionRule


class TooHardRule(ProgressionRule):
    """Backs the next session off when exertion is near maximal."""

    rule_id = "too_hard"
    version = "1.0.0"
    priority = Priority.SAFETY

    def evaluate(self, feedback: SessionFeedback) -> LoadAdjustment | None:
        rpe = feedback.perceived_exertion
        if rpe < HARD_EXERTION_MIN:
            return None

        return LoadAdjustment(
            rule_id=self.rule_id,
            rule_version=self.version,
            priority=self.priority,
            effort_band=EffortBand.TOO_HARD,
            factor=TOO_HARD_LOAD_FACTOR,
            explanation=(
                f"RPE {rpe} >= {HARD_EXERTION_MIN}: session too hard, "
                f"next load -{1 - TOO_HARD_LOAD_FACTOR:.0%}."
            ),
        )
