"""Tests for RuleRegistry — auto-discovery of rules from subdirectories."""

from __future__ import annotations

import pytest

from running_progression.exceptions import ConfigurationError
from running_progression.models.adjustment import LoadAdjustment
from running_progression.models.entry import SessionFeedback
from running_progression.models.enums import Priority
from running_progression.registry import RuleRegistry
from running_progression.rules.base import ProgressionRule
from running_progression.rules.exertion.too_easy import TooEasyRule


class TestRuleRegistry:
    def test_discover_finds_exertion_rules(self) -> None:
        registry = RuleRegistry()
        registry.discover_rules()
        assert set(registry.rule_ids) == {"too_easy", "optimal_effort", "too_hard"}

    def test_get_all_sorted_by_priority(self) -> None:
        registry = RuleRegistry()
        registry.discover_rules()
        priorities = [r.priority for r in registry.get_all_rules()]
        assert priorities == sorted(priorities)

    def test_safety_rules_first(self) -> None:
        registry = RuleRegistry()
        registry.discover_rules()
        assert registry.get_all_rules()[0].priority == Priority.SAFETY

    def test_get_nonexistent_returns_none(self) -> None:
        registry = RuleRegistry()
        assert registry.get("nonexistent_rule") is None

    def test_register_custom_rule(self) -> None:
        class DummyRule(ProgressionRule):
            rule_id = "dummy_test"
            version = "0.1"
            priority = Priority.PREFERENCE

            def evaluate(self, feedback: SessionFeedback) -> LoadAdjustment | None:
                return None

        registry = RuleRegistry()
        registry.register(DummyRule())
        assert registry.get("dummy_test") is not None


class _AlwaysFires(ProgressionRule):
    """Claims every rating at the tier given by the subclass."""

    version = "0.1"

    def evaluate(self, feedback: SessionFeedback) -> LoadAdjustment | None:
        return LoadAdjustment(
            rule_id=self.rule_id,
            rule_version=self.version,
            priority=self.priority,
            effort_band=feedback.effort_band,
        )


class _ProgressionCatchAll(_AlwaysFires):
    rule_id = "progression_catch_all"
    priority = Priority.PROGRESSION


class _PreferenceCatchAll(_AlwaysFires):
    rule_id = "preference_catch_all"
    priority = Priority.PREFERENCE


class TestExertionCoverage:
    def setup_method(self) -> None:
        self.registry = RuleRegistry()
        self.registry.discover_rules()

    def test_each_rating_has_one_rule(self) -> None:
        coverage = self.registry.exertion_coverage()
        assert sorted(coverage) == list(range(1, 11))
        assert coverage[1] == ["too_easy"]
        assert coverage[3] == ["too_easy"]
        assert coverage[4] == ["optimal_effort"]
        assert coverage[7] == ["optimal_effort"]
        assert coverage[8] == ["too_hard"]
        assert coverage[10] == ["too_hard"]

    def test_discovered_rules_pass(self) -> None:
        self.registry.check_coverage()

    def test_gap_is_rejected(self) -> None:
        registry = RuleRegistry()
        registry.register(TooEasyRule())
        with pytest.raises(ConfigurationError, match=r"\[4, 5, 6, 7, 8, 9, 10\]"):
            registry.check_coverage()

    def test_empty_registry_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            RuleRegistry().check_coverage()

    def test_same_tier_overlap_is_rejected(self) -> None:
        self.registry.register(_ProgressionCatchAll())
        with pytest.raises(ConfigurationError, match="PROGRESSION"):
            self.registry.check_coverage()

    def test_lower_tier_overlap_is_allowed(self) -> None:
        self.registry.register(_PreferenceCatchAll())
        self.registry.check_coverage()
        assert self.registry.exertion_coverage()[5] == [
            "optimal_effort",
            "preference_catch_all",
        ]

    def test_duplicate_rule_id_from_other_class_is_rejected(self) -> None:
        class Impostor(_AlwaysFires):
            rule_id = "too_easy"
            priority = Priority.PREFERENCE

        with pytest.raises(ConfigurationError, match="too_easy"):
            self.registry.register(Impostor())

    def test_rediscovery_is_idempotent(self) -> None:
        self.registry.discover_rules()
        assert sorted(self.registry.rule_ids) == [
            "optimal_effort",
            "too_easy",
            "too_hard",
        ]
