"""Environment-variable-based configuration for the CLI and the Streamlit app."""

from __future__ import annotations

import os
from pathlib import Path

from running_progression.exceptions import ConfigurationError
from running_progression.models.enums import DEFAULT_SCHEDULE_WEEKS, TargetOrder


def parse_target_order(raw: str) -> TargetOrder:
    try:
        return TargetOrder[raw.strip().upper()]
    except KeyError:
        allowed = ", ".join(o.name.lower() for o in TargetOrder)
        raise ConfigurationError(
            f"PROGRESSION_TARGET_ORDER must be one of {allowed}; got {raw!r}"
        ) from None


def parse_schedule_weeks(raw: str) -> int:
    try:
        weeks = int(raw)
    except ValueError:
        weeks = 0
    if weeks < 1:
        raise ConfigurationError(
            f"PROGRESSION_SCHEDULE_WEEKS must be a whole number >= 1; got {raw!r}"
        )
    return weeks


STORE_PATH: Path = Path(
    os.environ.get("PROGRESSION_STORE_PATH", "~/.running_progression/schedules.json")
).expanduser()
SCHEDULE_WEEKS: int = parse_schedule_weeks(
    os.environ.get("PROGRESSION_SCHEDULE_WEEKS", str(DEFAULT_SCHEDULE_WEEKS))
)
TARGET_ORDER: TargetOrder = parse_target_order(
    os.environ.get("PROGRESSION_TARGET_ORDER", "stored")
)
LOG_LEVEL: str = os.environ.get("PROGRESSION_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
