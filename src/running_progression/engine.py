"""ProgressionEngine — adjusts the next session after a completed one."""

from __future__ import annotations

import logging

from running_progression.exceptions import ValidationError
from running_progression.math.load import adjustment_note, scale_distance, scale_duration
from running_progression.models.adjustment import LoadAdjustment
from running_progression.models.decision_trace import (
    DecisionTrace,
    RuleResult,
    RuleStatus,
)
from running_progression.models.entry import RunningWorkoutEntry, SessionFeedback
from running_progression.models.enums import EntryStatus, TargetOrder
from running_progression.registry import RuleRegistry, exertion_sample
from running_progression.schedule.store import ScheduleStore

logger = logging.getLogger(__name__)


def apply_adjustment(entry: RunningWorkoutEntry, factor: float) -> RunningWorkoutEntry:
    """Return *entry* with distance/duration scaled by *factor*.

    Distance rounds half-up to one decimal, duration rounds up to a whole
    minute, and the main-set text gets a note with the signed percentage.
    Labels follow from the new numbers.
    """
    percent = round((factor - 1.0) * 100)
    return entry.with_targets(
        distance_km=scale_distance(entry.target_distance_km, factor),
        duration_min=scale_duration(entry.target_duration_min, factor),
        main_text=entry.main_text + adjustment_note(percent),
    )


class ProgressionEngine:
    """Evaluates progression rules and applies the winning load factor.

    Usage:
        engine = ProgressionEngine()
        store, adjusted, trace = engine.adjust_next(store, completed_entry)
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        target_order: TargetOrder = TargetOrder.STORED,
    ) -> None:
        self.registry = registry or RuleRegistry()
        self.target_order = target_order

        # Auto-discover rules if using default registry
        if registry is None:
            self.registry.discover_rules()
            self.registry.check_coverage()

    def evaluate_rules(
        self, feedback: SessionFeedback
    ) -> tuple[LoadAdjustment | None, tuple[RuleResult, ...]]:
        """Run every rule in priority order; the first that fires wins.

        Returns:
            The winning LoadAdjustment (or None) and one RuleResult per rule.
        """
        winner: LoadAdjustment | None = None
        results: list[RuleResult] = []

        for rule in self.registry.get_all_rules():
            adjustment = rule.evaluate(feedback)
            if adjustment is not None and winner is None:
                winner = adjustment
                results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.FIRED,
                        adjustment=adjustment,
                        explanation=adjustment.explanation,
                    )
                )
            else:
                results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.SKIPPED,
                        explanation=(
                            "Superseded by a higher-priority rule."
                            if adjustment is not None
                            else "Rule returned no adjustment."
                        ),
                    )
                )

        return winner, tuple(results)

    def factor_for_exertion(self, perceived_exertion: int) -> float:
        """Load factor the rules assign to a 1-10 exertion rating."""
        adjustment, _ = self.evaluate_rules(exertion_sample(perceived_exertion))
        return adjustment.factor if adjustment is not None else 1.0

    def find_target(
        self, store: ScheduleStore, completed: RunningWorkoutEntry
    ) -> RunningWorkoutEntry | None:
        """Next PENDING entry of the same type scheduled after *completed*.

        With TargetOrder.STORED the first match in stored order is
        returned; with CHRONOLOGICAL the earliest scheduled date wins.
        """
        candidates = store.filter(
            status=EntryStatus.PENDING,
            workout_type=completed.workout_type,
            after=completed.scheduled_date,
        )
        if not candidates:
            return None
        if self.target_order == TargetOrder.CHRONOLOGICAL:
            return min(candidates, key=lambda e: e.scheduled_date)
        return candidates[0]

    def adjust_next(
        self, store: ScheduleStore, completed: RunningWorkoutEntry
    ) -> tuple[ScheduleStore, RunningWorkoutEntry | None, DecisionTrace]:
        """Adjust at most one future session of the completed entry's type.

        Args:
            store: Schedule that already holds *completed* as COMPLETED.
            completed: The entry that just received feedback.

        Returns:
            (updated store, adjusted entry or None, decision trace). No
            eligible target is a no-op: the store is returned unchanged.

        Raises:
            ValidationError: *completed* has no feedback yet.
        """
        if completed.feedback is None:
            raise ValidationError(
                f"Entry {completed.id} has no feedback; only a completed "
                "session can drive an adjustment",
                field="feedback",
            )

        adjustment, results = self.evaluate_rules(completed.feedback)
        if adjustment is None:
            logger.info("No rule fired for entry %s; schedule unchanged", completed.id)
            return store, None, DecisionTrace(
                rule_results=results, target_notes="No adjustment selected."
            )

        target = self.find_target(store, completed)
        if target is None:
            logger.info(
                "No pending %s session after %s; nothing to adjust",
                completed.workout_type.name,
                completed.scheduled_date.isoformat(),
            )
            return store, None, DecisionTrace(
                rule_results=results,
                adjustment=adjustment,
                target_notes=(
                    f"No pending {completed.workout_type.name} session after "
                    f"{completed.scheduled_date.isoformat()}."
                ),
            )

        adjusted = apply_adjustment(target, adjustment.factor)
        logger.info(
            "Adjusted %s by %+d%%: %s/%s -> %s/%s",
            adjusted.id,
            adjustment.percent_change,
            target.target_distance_label,
            target.target_duration_label,
            adjusted.target_distance_label,
            adjusted.target_duration_label,
        )
        return store.replace_by_id(adjusted), adjusted, DecisionTrace(
            rule_results=results,
            adjustment=adjustment,
            target_notes=(
                f"Adjusted {adjusted.id} ({adjusted.scheduled_date.isoformat()}) "
                f"by {adjustment.percent_change:+d}%."
            ),
        )
