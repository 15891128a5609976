"""Schedule generator — the initial multi-week running plan for a student."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable

from running_progression.exceptions import ValidationError
from running_progression.models.entry import RunningWorkoutEntry
from running_progression.models.enums import (
    DAYS_BETWEEN_SESSIONS,
    DAYS_TO_NEXT_BLOCK,
    WEEKLY_ORDER,
)
from running_progression.schedule.templates import get_template

# (week_index, slot) -> entry id; slot is 1-based within the week
IdFactory = Callable[[int, int], str]


def default_entry_id(week: int, slot: int) -> str:
    """Default entry id, e.g. week 0 slot 1 -> 'run_week0_1'."""
    return f"run_week{week}_{slot}"


def session_dates(start_date: date, weeks: int) -> list[date]:
    """Calendar dates for every session, in schedule order.

    Each week block puts sessions on day 0, +2, +4, +6 and the next block
    starts one day after the last session (start + 7).
    """
    dates: list[date] = []
    current = start_date
    for _ in range(weeks):
        for slot in range(len(WEEKLY_ORDER)):
            if slot > 0:
                current += timedelta(days=DAYS_BETWEEN_SESSIONS)
            dates.append(current)
        current += timedelta(days=DAYS_TO_NEXT_BLOCK)
    return dates


def generate_schedule(
    start_date: date,
    weeks: int,
    id_factory: IdFactory | None = None,
) -> tuple[RunningWorkoutEntry, ...]:
    """Generate ``4 * weeks`` PENDING entries, one per type per week.

    Args:
        start_date: Date of the first INTERVAL session.
        weeks: Number of week blocks to generate.
        id_factory: Optional (week, slot) -> id callable. Ids must be
            unique within one call.

    Returns:
        Entries in calendar order: INTERVAL, BASE_RUN, FARTLEK, TEMPO per week.
    """
    if weeks < 1:
        raise ValidationError(f"weeks must be >= 1, got {weeks}", field="weeks")

    make_id = id_factory or default_entry_id
    dates = iter(session_dates(start_date, weeks))

    entries: list[RunningWorkoutEntry] = []
    for week in range(weeks):
        for slot, workout_type in enumerate(WEEKLY_ORDER, start=1):
            template = get_template(workout_type)
            entries.append(
                RunningWorkoutEntry(
                    id=make_id(week, slot),
                    workout_type=workout_type,
                    title=template.title,
                    scheduled_date=next(dates),
                    target_distance_km=template.distance_km,
                    target_duration_min=template.duration_min,
                    warmup_text=template.warmup_text,
                    main_text=template.main_text,
                    cooldown_text=template.cooldown_text,
                )
            )

    ids = {e.id for e in entries}
    if len(ids) != len(entries):
        raise ValidationError("id_factory produced duplicate entry ids", field="id")

    return tuple(entries)
