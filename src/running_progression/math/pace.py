"""Pace calculation from a completed session's distance and duration."""

from __future__ import annotations

import math

from running_progression.math.rounding import round_half_up

# Distances at or below this are treated as zero (no meaningful pace)
_MIN_DISTANCE_KM = 1e-9

ZERO_PACE = "0:00"


def pace_min_per_km(distance_km: float, duration_min: float) -> float:
    """Decimal minutes per km. Returns 0.0 for a zero distance."""
    if distance_km <= _MIN_DISTANCE_KM:
        return 0.0
    return duration_min / distance_km


def pace_parts(distance_km: float, duration_min: float) -> tuple[int, int]:
    """Split pace into whole minutes and rounded seconds.

    Seconds are rounded half-up; 60 seconds carry into the next minute.

    Args:
        distance_km: Actual distance covered in km.
        duration_min: Actual session duration in minutes.

    Returns:
        A (minutes, seconds) tuple, e.g. 25.5 min over 4 km -> (6, 23).
    """
    pace = pace_min_per_km(distance_km, duration_min)
    minutes = math.floor(pace)
    seconds = int(round_half_up((pace - minutes) * 60))
    if seconds == 60:
        minutes += 1
        seconds = 0
    return minutes, seconds


def format_pace(distance_km: float, duration_min: float) -> str:
    """Format pace as 'M:SS /km'. e.g. 5 km in 30 min -> '6:00 /km'.

    A zero distance yields '0:00' instead of dividing by zero.
    """
    if distance_km <= _MIN_DISTANCE_KM:
        return ZERO_PACE
    minutes, seconds = pace_parts(distance_km, duration_min)
    return f"{minutes}:{seconds:02d} /km"
