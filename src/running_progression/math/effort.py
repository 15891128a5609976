"""Perceived exertion classification."""

from __future__ import annotations

from running_progression.models.enums import (
    EASY_EXERTION_MAX,
    HARD_EXERTION_MIN,
    EffortBand,
)


def classify_effort(perceived_exertion: int) -> EffortBand:
    """Classify a 1-10 exertion rating: 1-3 too easy, 4-7 optimal, 8-10 too hard."""
    if perceived_exertion <= EASY_EXERTION_MAX:
        return EffortBand.TOO_EASY
    elif perceived_exertion >= HARD_EXERTION_MIN:
        return EffortBand.TOO_HARD
    else:
        return EffortBand.OPTIMAL
