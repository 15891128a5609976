"""Tests for ProgressionEngine — factor selection, target choice and adjustment."""

from __future__ import annotations

import pytest

from running_progression.engine import ProgressionEngine, apply_adjustment
from running_progression.exceptions import ValidationError
from running_progression.models.decision_trace import RuleStatus
from running_progression.models.enums import EntryStatus, TargetOrder, WorkoutType
from running_progression.registry import RuleRegistry
from running_progression.schedule.store import ScheduleStore


class TestFactorSelection:
    @pytest.mark.parametrize(
        "rpe, factor",
        [
            (1, 1.10),
            (2, 1.10),
            (3, 1.10),
            (4, 1.05),
            (5, 1.05),
            (7, 1.05),
            (8, 0.95),
            (9, 0.95),
            (10, 0.95),
        ],
    )
    def test_factor_for_exertion(self, engine: ProgressionEngine, rpe: int, factor: float) -> None:
        assert engine.factor_for_exertion(rpe) == pytest.approx(factor)

    def test_exactly_one_rule_fires(self, engine: ProgressionEngine, feedback_for) -> None:
        adjustment, results = engine.evaluate_rules(feedback_for(5))
        fired = [r for r in results if r.status == RuleStatus.FIRED]
        assert len(fired) == 1
        assert fired[0].rule_id == "optimal_effort"
        assert adjustment is fired[0].adjustment

    def test_empty_registry_means_no_adjustment(self, feedback_for) -> None:
        engine = ProgressionEngine(registry=RuleRegistry())
        adjustment, results = engine.evaluate_rules(feedback_for(5))
        assert adjustment is None
        assert results == ()
        assert engine.factor_for_exertion(5) == 1.0


class TestApplyAdjustment:
    def test_scales_targets_and_regenerates_labels(self, make_entry) -> None:
        entry = make_entry("a", distance_km=5.0, duration_min=30)
        adjusted = apply_adjustment(entry, 1.05)
        assert adjusted.target_distance_km == 5.3
        assert adjusted.target_duration_min == 32
        assert adjusted.target_distance_label == "5.3km"
        assert adjusted.target_duration_label == "32min"

    def test_ten_percent_of_thirty_minutes_is_thirty_three(self, make_entry) -> None:
        # 30 * 1.10 evaluates to 33.000000000000004; a plain ceil would give 34
        entry = make_entry("a", distance_km=5.0, duration_min=30)
        adjusted = apply_adjustment(entry, 1.10)
        assert adjusted.target_duration_min == 33
        assert adjusted.target_duration_label == "33min"
        assert adjusted.target_distance_km == 5.5

    def test_appends_signed_note(self, make_entry) -> None:
        entry = make_entry("a")
        assert apply_adjustment(entry, 1.10).main_text.endswith(
            "(Carga ajustada +10% pela IA)"
        )
        assert apply_adjustment(entry, 0.95).main_text.endswith(
            "(Carga ajustada -5% pela IA)"
        )

    def test_returns_new_value(self, make_entry) -> None:
        entry = make_entry("a", distance_km=4.0, duration_min=30)
        adjusted = apply_adjustment(entry, 1.05)
        assert entry.target_distance_km == 4.0
        assert entry.target_duration_min == 30
        assert adjusted is not entry
        assert adjusted.id == entry.id
        assert adjusted.scheduled_date == entry.scheduled_date
        assert adjusted.status == EntryStatus.PENDING


class TestAdjustNext:
    def _completed(self, make_entry, feedback_for, rpe: int = 5, day: int = 3):
        return make_entry("done", WorkoutType.BASE_RUN, day=day).complete(feedback_for(rpe))

    def test_only_first_matching_entry_is_adjusted(
        self, engine: ProgressionEngine, make_entry, feedback_for
    ) -> None:
        a = make_entry("A", WorkoutType.BASE_RUN, day=10)
        b = make_entry("B", WorkoutType.BASE_RUN, day=17)
        c = make_entry("C", WorkoutType.TEMPO, day=12)
        done = self._completed(make_entry, feedback_for)
        store = ScheduleStore.of([done, a, b, c])

        updated, adjusted, trace = engine.adjust_next(store, done)

        assert adjusted is not None and adjusted.id == "A"
        assert updated.get("A").target_distance_km == 4.2
        assert updated.get("A").target_duration_min == 32
        assert updated.get("B") == b
        assert updated.get("C") == c
        assert len(updated) == len(store)
        assert trace.adjustment is not None
        assert trace.adjustment.rule_id == "optimal_effort"

    def test_entries_on_or_before_completed_date_are_ignored(
        self, engine: ProgressionEngine, make_entry, feedback_for
    ) -> None:
        same_day = make_entry("same", WorkoutType.BASE_RUN, day=3)
        earlier = make_entry("earlier", WorkoutType.BASE_RUN, day=1)
        later = make_entry("later", WorkoutType.BASE_RUN, day=20)
        done = self._completed(make_entry, feedback_for)
        store = ScheduleStore.of([earlier, same_day, done, later])

        _, adjusted, _ = engine.adjust_next(store, done)

        assert adjusted is not None and adjusted.id == "later"

    def test_completed_entries_are_never_targets(
        self, engine: ProgressionEngine, make_entry, feedback_for
    ) -> None:
        already = make_entry(
            "already", WorkoutType.BASE_RUN, day=10, status=EntryStatus.COMPLETED
        )
        pending = make_entry("pending", WorkoutType.BASE_RUN, day=17)
        done = self._completed(make_entry, feedback_for)
        store = ScheduleStore.of([done, already, pending])

        _, adjusted, _ = engine.adjust_next(store, done)

        assert adjusted is not None and adjusted.id == "pending"

    def test_no_target_is_a_noop(
        self, engine: ProgressionEngine, make_entry, feedback_for
    ) -> None:
        other_type = make_entry("tempo", WorkoutType.TEMPO, day=10)
        done = self._completed(make_entry, feedback_for)
        store = ScheduleStore.of([done, other_type])

        updated, adjusted, trace = engine.adjust_next(store, done)

        assert adjusted is None
        assert updated == store
        assert trace.adjustment is not None
        assert "No pending BASE_RUN" in trace.target_notes

    def test_stored_order_picks_first_positional_match(
        self, make_entry, feedback_for
    ) -> None:
        later_first = make_entry("late", WorkoutType.BASE_RUN, day=17)
        earlier_second = make_entry("early", WorkoutType.BASE_RUN, day=10)
        done = self._completed(make_entry, feedback_for)
        store = ScheduleStore.of([done, later_first, earlier_second])

        engine = ProgressionEngine(target_order=TargetOrder.STORED)
        _, adjusted, _ = engine.adjust_next(store, done)

        assert adjusted.id == "late"

    def test_chronological_order_picks_earliest_date(
        self, make_entry, feedback_for
    ) -> None:
        later_first = make_entry("late", WorkoutType.BASE_RUN, day=17)
        earlier_second = make_entry("early", WorkoutType.BASE_RUN, day=10)
        done = self._completed(make_entry, feedback_for)
        store = ScheduleStore.of([done, later_first, earlier_second])

        engine = ProgressionEngine(target_order=TargetOrder.CHRONOLOGICAL)
        _, adjusted, _ = engine.adjust_next(store, done)

        assert adjusted.id == "early"

    def test_hard_session_reduces_next_load(
        self, engine: ProgressionEngine, make_entry, feedback_for
    ) -> None:
        nxt = make_entry("next", WorkoutType.BASE_RUN, day=10, distance_km=5.0, duration_min=30)
        done = self._completed(make_entry, feedback_for, rpe=9)
        store = ScheduleStore.of([done, nxt])

        _, adjusted, _ = engine.adjust_next(store, done)

        assert adjusted.target_distance_km == 4.8
        assert adjusted.target_duration_min == 29
        assert adjusted.main_text.endswith("(Carga ajustada -5% pela IA)")

    def test_pending_entry_cannot_drive_an_adjustment(
        self, engine: ProgressionEngine, make_entry
    ) -> None:
        pending = make_entry("pending", WorkoutType.BASE_RUN, day=3)
        nxt = make_entry("next", WorkoutType.BASE_RUN, day=10)
        store = ScheduleStore.of([pending, nxt])

        with pytest.raises(ValidationError) as exc_info:
            engine.adjust_next(store, pending)
        assert exc_info.value.field == "feedback"
