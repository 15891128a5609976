"""Enumerations and progression constants for the running engine.

Load factors follow the classic progressive-overload guidance of
keeping week-over-week increases at or below 10%.
"""

from enum import IntEnum, auto


class Priority(IntEnum):
    """Rule priority tiers — lower value = evaluated first."""

    SAFETY = 0
    PROGRESSION = 1
    PREFERENCE = 2


class WorkoutType(IntEnum):
    """Running session types of the generated schedule, in weekly order."""

    INTERVAL = auto()
    BASE_RUN = auto()
    FARTLEK = auto()
    TEMPO = auto()


class EntryStatus(IntEnum):
    """Lifecycle of a schedule entry. PENDING → COMPLETED only."""

    PENDING = auto()
    COMPLETED = auto()


class EffortBand(IntEnum):
    """Perceived exertion classification of a completed session."""

    TOO_EASY = auto()
    OPTIMAL = auto()
    TOO_HARD = auto()


class TargetOrder(IntEnum):
    """How the next session to adjust is picked among eligible entries."""

    STORED = auto()          # First eligible entry in stored order
    CHRONOLOGICAL = auto()   # Earliest eligible scheduled date


# ---------------------------------------------------------------------------
# Perceived exertion (Borg CR-10 style, 1-10)
# ---------------------------------------------------------------------------
MIN_PERCEIVED_EXERTION = 1
MAX_PERCEIVED_EXERTION = 10

# Upper bound of the "too easy" band, inclusive
EASY_EXERTION_MAX = 3
# Lower bound of the "too hard" band, inclusive
HARD_EXERTION_MIN = 8

# ---------------------------------------------------------------------------
# Load adjustment factors applied to the next session of the same type
# ---------------------------------------------------------------------------
TOO_EASY_LOAD_FACTOR = 1.10   # +10%
OPTIMAL_LOAD_FACTOR = 1.05    # +5% standard progressive overload
TOO_HARD_LOAD_FACTOR = 0.95   # -5%

# Distance targets keep one decimal place
DISTANCE_DECIMALS = 1

# ---------------------------------------------------------------------------
# Schedule layout — day offsets inside one week block
# ---------------------------------------------------------------------------
WEEKLY_ORDER = (
    WorkoutType.INTERVAL,
    WorkoutType.BASE_RUN,
    WorkoutType.FARTLEK,
    WorkoutType.TEMPO,
)
DAYS_BETWEEN_SESSIONS = 2
DAYS_TO_NEXT_BLOCK = 1
DEFAULT_SCHEDULE_WEEKS = 4
