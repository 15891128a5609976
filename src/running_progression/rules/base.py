"""Abstract base class for all progression rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from running_progression.models.adjustment import LoadAdjustment
from running_progression.models.entry import SessionFeedback
from running_progression.models.enums import Priority


class ProgressionRule(ABC):
    """Base class for rules that turn session feedback into a load factor.

    Each rule encapsulates one band of the exertion scale. Rules are
    discovered automatically by the RuleRegistry and evaluated by the
    ProgressionEngine in priority order; the first rule that fires
    decides the adjustment.

    Subclasses must define:
        rule_id: unique identifier (e.g. "optimal_effort")
        version: semantic version string
        priority: Priority tier (SAFETY, PROGRESSION, PREFERENCE)
        evaluate(): the rule's decision logic
    """

    rule_id: str
    version: str
    priority: Priority

    @abstractmethod
    def evaluate(self, feedback: SessionFeedback) -> LoadAdjustment | None:
        """Evaluate this rule against a session's feedback.

        Returns a LoadAdjustment if the rule applies, or None.
        """
        ...
