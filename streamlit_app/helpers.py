"""Utility helpers bridging the Streamlit UI and the progression engine.

Pure functions for formatting and tabular views of a schedule.
"""

from __future__ import annotations

from datetime import timedelta

import pandas as pd

from running_progression.models.entry import RunningWorkoutEntry
from running_progression.models.enums import (
    EASY_EXERTION_MAX,
    HARD_EXERTION_MIN,
    EffortBand,
    WorkoutType,
)
from running_progression.schedule.store import ScheduleStore

# ---------------------------------------------------------------------------
# Color maps and labels
# ---------------------------------------------------------------------------

TYPE_COLORS: dict[WorkoutType, str] = {
    WorkoutType.INTERVAL: "#E74C3C",   # red
    WorkoutType.BASE_RUN: "#82E0AA",   # green
    WorkoutType.FARTLEK: "#F5B041",    # orange
    WorkoutType.TEMPO: "#3498DB",      # blue
}

TYPE_LABELS: dict[WorkoutType, str] = {
    WorkoutType.INTERVAL: "Tiros",
    WorkoutType.BASE_RUN: "Rodagem",
    WorkoutType.FARTLEK: "Fartlek",
    WorkoutType.TEMPO: "Ritmo",
}

EFFORT_COLORS: dict[EffortBand, str] = {
    EffortBand.TOO_EASY: "#2ECC71",
    EffortBand.OPTIMAL: "#F1C40F",
    EffortBand.TOO_HARD: "#C0392B",
}

EFFORT_LABELS: dict[EffortBand, str] = {
    EffortBand.TOO_EASY: "Muito Leve",
    EffortBand.OPTIMAL: "Moderado",
    EffortBand.TOO_HARD: "Exaustivo",
}

RPE_SCALE_HINT = (
    f"1-{EASY_EXERTION_MAX}: leve (+10%) · "
    f"{EASY_EXERTION_MAX + 1}-{HARD_EXERTION_MIN - 1}: ideal (+5%) · "
    f"{HARD_EXERTION_MIN}-10: exaustivo (-5%)"
)


# ---------------------------------------------------------------------------
# Tabular views
# ---------------------------------------------------------------------------


def schedule_frame(entries: list[RunningWorkoutEntry]) -> pd.DataFrame:
    """One row per entry, in the order given."""
    rows = []
    for e in entries:
        rows.append({
            "Data": e.scheduled_date,
            "Treino": e.title,
            "Tipo": TYPE_LABELS.get(e.workout_type, e.workout_type.name),
            "Distância (km)": e.target_distance_km,
            "Duração (min)": e.target_duration_min,
            "Status": "CONCLUÍDO" if not e.is_pending else "PENDENTE",
            "Pace": e.feedback.pace if e.feedback else "",
            "RPE": e.feedback.perceived_exertion if e.feedback else None,
        })
    return pd.DataFrame(rows)


def weekly_volume_frame(store: ScheduleStore) -> pd.DataFrame:
    """Planned vs. completed km per week, keyed by the week's Monday."""
    if len(store) == 0:
        return pd.DataFrame(columns=["Semana", "Planejado (km)", "Realizado (km)"])

    df = pd.DataFrame([
        {
            "Semana": e.scheduled_date - timedelta(days=e.scheduled_date.weekday()),
            "Planejado (km)": e.target_distance_km,
            "Realizado (km)": e.feedback.actual_distance_km if e.feedback else 0.0,
        }
        for e in store
    ])
    return df.groupby("Semana", as_index=False).sum().round(1)


def format_date_badge(entry: RunningWorkoutEntry) -> tuple[int, str]:
    """Day number and short month for the calendar badge, e.g. (3, 'DEZ')."""
    months = ("JAN", "FEV", "MAR", "ABR", "MAI", "JUN",
              "JUL", "AGO", "SET", "OUT", "NOV", "DEZ")
    return entry.scheduled_date.day, months[entry.scheduled_date.month - 1]
