"""Load adjustment — what a single progression rule recommends."""

from __future__ import annotations

from dataclasses import dataclass

from running_progression.models.enums import EffortBand, Priority


@dataclass(frozen=True)
class LoadAdjustment:
    """A rule's recommendation for the next session of the same type.

    ``factor`` scales both the distance and the duration target
    (1.05 = +5%, 0.95 = -5%).
    """

    rule_id: str
    rule_version: str
    priority: Priority
    effort_band: EffortBand
    factor: float = 1.0
    explanation: str = ""

    @property
    def percent_change(self) -> int:
        """Signed whole-percent change, e.g. 1.05 -> 5, 0.95 -> -5."""
        return round((self.factor - 1.0) * 100)
