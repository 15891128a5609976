"""PROGRESSION rule: session felt too easy (RPE 1-3) — increase load 10%."""

from __future__ import annotations

from running_progression.models.adjustment import LoadAdjustment
from running_progression.models.entry import SessionFeedback
from running_progression.models.enums import (
    EASY_EXERTION_MAX,
    TOO_EASY_LOAD_FACTOR,
    EffortBand,
    Priority,
)
from running_progression.rules.base import ProgressionRule


class TooEasyRule(ProgressionRule):
    """Large step up when the athlete reports very low exertion."""

    rule_id = "too_easy"
    version = "1.0.0"
    priority = Priority.PROGRESSION

    def evaluate(self, feedback: SessionFeedback) -> LoadAdjustment | None:
        rpe = feedback.perceived_exertion
        if rpe > EASY_EXERTION_MAX:
            return None

        return LoadAdjustment(
            rule_id=self.rule_id,
            rule_version=self.version,
            priority=self.priority,
            effort_band=EffortBand.TOO_EASY,
            factor=TOO_EASY_LOAD_FACTOR,
            explanation=(
                f"RPE {rpe} <= {EASY_EXERTION_MAX}: session too easy, "
                f"next load +{TOO_EASY_LOAD_FACTOR - 1:.0%}."
            ),
        )
