"""Rule registry: discovery and exertion-scale coverage checks."""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil

from running_progression.exceptions import ConfigurationError
from running_progression.math.effort import classify_effort
from running_progression.math.pace import ZERO_PACE
from running_progression.models.entry import SessionFeedback
from running_progression.models.enums import (
    MAX_PERCEIVED_EXERTION,
    MIN_PERCEIVED_EXERTION,
)
from running_progression.rules.base import ProgressionRule

logger = logging.getLogger(__name__)


def exertion_sample(perceived_exertion: int) -> SessionFeedback:
    """Feedback carrying only an exertion rating, for asking rules about it."""
    return SessionFeedback(
        perceived_exertion=perceived_exertion,
        actual_distance_km=0.0,
        actual_duration_min=0.0,
        pace=ZERO_PACE,
        effort_band=classify_effort(perceived_exertion),
    )


class RuleRegistry:
    """Holds the progression rules the engine evaluates.

    :meth:`discover_rules` registers every concrete ProgressionRule defined
    under the rules/ package, so a new band rule only needs a module
    there. :meth:`check_coverage` then verifies that the rule set answers
    every rating of the exertion scale without ambiguity: each rating is
    claimed by at least one rule, and never by two rules of the same
    priority tier (ties across tiers are settled by priority).
    """

    def __init__(self) -> None:
        self._rules: dict[str, ProgressionRule] = {}

    def discover_rules(self) -> None:
        import running_progression.rules as rules_pkg

        for module_info in pkgutil.walk_packages(
            rules_pkg.__path__, prefix=rules_pkg.__name__ + "."
        ):
            module = importlib.import_module(module_info.name)
            for _name, cls in inspect.getmembers(module, inspect.isclass):
                if (
                    cls.__module__ == module.__name__
                    and issubclass(cls, ProgressionRule)
                    and not inspect.isabstract(cls)
                ):
                    self.register(cls())

        logger.debug("Discovered rules: %s", ", ".join(self.rule_ids))

    def register(self, rule: ProgressionRule) -> None:
        """Register *rule*; a rule_id may only belong to one rule class."""
        existing = self._rules.get(rule.rule_id)
        if existing is not None and type(existing) is not type(rule):
            raise ConfigurationError(
                f"Duplicate rule_id {rule.rule_id!r}: "
                f"{type(existing).__name__} and {type(rule).__name__}"
            )
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> ProgressionRule | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[ProgressionRule]:
        """All rules in evaluation order: priority, then rule_id."""
        return sorted(self._rules.values(), key=lambda r: (r.priority, r.rule_id))

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules.keys())

    def exertion_coverage(self) -> dict[int, list[str]]:
        """Ids of the rules that fire at each rating, in evaluation order."""
        rules = self.get_all_rules()
        return {
            rpe: [r.rule_id for r in rules if r.evaluate(exertion_sample(rpe)) is not None]
            for rpe in range(MIN_PERCEIVED_EXERTION, MAX_PERCEIVED_EXERTION + 1)
        }

    def check_coverage(self) -> None:
        """Raise ConfigurationError on a gap or a same-tier overlap."""
        coverage = self.exertion_coverage()

        unclaimed = [rpe for rpe, ids in coverage.items() if not ids]
        if unclaimed:
            raise ConfigurationError(
                f"No rule handles perceived exertion {unclaimed}"
            )

        for rpe, ids in coverage.items():
            tiers = [self._rules[rule_id].priority for rule_id in ids]
            shared = sorted({t.name for t in tiers if tiers.count(t) > 1})
            if shared:
                raise ConfigurationError(
                    f"Rules {ids} overlap at perceived exertion {rpe} "
                    f"within priority {', '.join(shared)}"
                )
