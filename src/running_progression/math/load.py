"""Target load scaling for the next session of a workout type."""

from __future__ import annotations

from running_progression.math.rounding import ceil_clean, round_half_up
from running_progression.models.enums import DISTANCE_DECIMALS


def scale_distance(distance_km: float, factor: float) -> float:
    """Scale a distance target and round half-up to one decimal.

    5.0 km x 1.05 = 5.25 -> 5.3 km.
    """
    return round_half_up(distance_km * factor, DISTANCE_DECIMALS)


def scale_duration(duration_min: float, factor: float) -> int:
    """Scale a duration target, always rounding up to a whole minute.

    30 min x 1.05 = 31.5 -> 32 min.
    """
    return ceil_clean(duration_min * factor)


def adjustment_note(percent_change: int) -> str:
    """Suffix appended to the main-set text of an adjusted session."""
    return f" (Carga ajustada {percent_change:+d}% pela IA)"
