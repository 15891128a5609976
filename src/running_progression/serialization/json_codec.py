"""JSON serialization for schedule entries, feedback requests and outcomes.

Entries use a camelCase wire shape. Loading also accepts the records
written by the earlier browser app (Portuguese type codes, ``*Num``
numeric fields, ``warmup``/``main``/``cooldown`` text, ``rpe``) and
fills in missing fields, so old stores migrate on first read.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
import math
import re
from datetime import date
from typing import Any, Iterable

from running_progression.exceptions import ValidationError
from running_progression.math.effort import classify_effort
from running_progression.math.rounding import ceil_clean
from running_progression.models.decision_trace import FeedbackOutcome
from running_progression.models.entry import RunningWorkoutEntry, SessionFeedback
from running_progression.models.enums import EffortBand, EntryStatus, WorkoutType
from running_progression.models.feedback_request import FeedbackRequest
from running_progression.schedule.templates import get_template

# Type codes used by the earlier app's stored records
_LEGACY_TYPE_CODES: dict[str, WorkoutType] = {
    "TIRO": WorkoutType.INTERVAL,
    "RODAGEM": WorkoutType.BASE_RUN,
    "FARTLEK": WorkoutType.FARTLEK,
    "RITMO": WorkoutType.TEMPO,
}

_LABEL_NUMBER = re.compile(r"^\s*(\d+(?:[.,]\d+)?)")


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------


def feedback_to_dict(feedback: SessionFeedback) -> dict:
    return {
        "perceivedExertion": feedback.perceived_exertion,
        "actualDistanceKm": feedback.actual_distance_km,
        "actualDurationMin": feedback.actual_duration_min,
        "pace": feedback.pace,
        "effortBand": feedback.effort_band.name,
        "notes": feedback.notes,
    }


def entry_to_dict(entry: RunningWorkoutEntry) -> dict:
    """Convert an entry to its JSON-compatible dict."""
    return {
        "id": entry.id,
        "type": entry.workout_type.name,
        "title": entry.title,
        "scheduledDate": entry.scheduled_date.isoformat(),
        "targetDistanceKm": entry.target_distance_km,
        "targetDistanceLabel": entry.target_distance_label,
        "targetDurationMin": entry.target_duration_min,
        "targetDurationLabel": entry.target_duration_label,
        "warmupText": entry.warmup_text,
        "mainText": entry.main_text,
        "cooldownText": entry.cooldown_text,
        "status": entry.status.name,
        "feedback": feedback_to_dict(entry.feedback) if entry.feedback else None,
    }


def feedback_from_dict(data: dict) -> SessionFeedback:
    rpe = _require(data, "perceivedExertion", "rpe")
    distance = float(_require(data, "actualDistanceKm", "actualDistance"))
    duration = float(_require(data, "actualDurationMin", "actualDuration"))
    band_name = data.get("effortBand")
    band = (
        _parse_enum(EffortBand, band_name, "effortBand")
        if band_name
        else classify_effort(int(rpe))
    )
    return SessionFeedback(
        perceived_exertion=int(rpe),
        actual_distance_km=distance,
        actual_duration_min=duration,
        pace=str(data.get("pace", "")),
        effort_band=band,
        notes=str(data.get("notes", "")),
    )


def entry_from_dict(data: dict) -> RunningWorkoutEntry:
    """Build an entry from current or legacy stored JSON.

    Raises:
        ValidationError: if id, type or scheduledDate is missing or invalid.
    """
    entry_id = str(_require(data, "id"))
    workout_type = _parse_workout_type(_require(data, "type"))
    scheduled = _parse_date(_require(data, "scheduledDate"))
    template = get_template(workout_type)

    distance = _first_number(
        data, ("targetDistanceKm", "targetDistanceNum"), "targetDistance"
    )
    duration = _first_number(
        data, ("targetDurationMin", "targetDurationNum"), "targetDuration"
    )

    status_raw = str(data.get("status", EntryStatus.PENDING.name))
    status = _parse_enum(EntryStatus, status_raw.upper(), "status")
    feedback_raw = data.get("feedback")
    feedback = feedback_from_dict(feedback_raw) if feedback_raw else None
    if status == EntryStatus.COMPLETED and feedback is None:
        raise ValidationError(
            f"Completed entry {entry_id} has no feedback", field="feedback"
        )

    return RunningWorkoutEntry(
        id=entry_id,
        workout_type=workout_type,
        title=str(data.get("title") or template.title),
        scheduled_date=scheduled,
        target_distance_km=distance if distance is not None else template.distance_km,
        target_duration_min=(
            _as_minutes(duration) if duration is not None else template.duration_min
        ),
        warmup_text=str(data.get("warmupText", data.get("warmup", ""))),
        main_text=str(data.get("mainText", data.get("main", ""))),
        cooldown_text=str(data.get("cooldownText", data.get("cooldown", ""))),
        status=status,
        feedback=feedback if status == EntryStatus.COMPLETED else None,
    )


def schedule_to_json_string(entries: Iterable[RunningWorkoutEntry], indent: int = 2) -> str:
    """Serialize a whole schedule to a JSON string."""
    return json.dumps([entry_to_dict(e) for e in entries], indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Feedback requests and outcomes
# ---------------------------------------------------------------------------


def parse_feedback_request(payload: dict) -> FeedbackRequest:
    """Parse a feedback request body.

    Expected shape::

        {"entryId": str, "actualDistanceKm": number,
         "actualDurationMin": number, "perceivedExertion": int, "notes"?: str}

    Presence and JSON types are checked here; value ranges are checked
    by the recorder.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Feedback request must be a JSON object")

    entry_id = _require(payload, "entryId")
    if not isinstance(entry_id, str) or not entry_id:
        raise ValidationError("entryId must be a non-empty string", field="entryId")

    distance = _require_number(payload, "actualDistanceKm")
    duration = _require_number(payload, "actualDurationMin")

    rpe = _require(payload, "perceivedExertion")
    if isinstance(rpe, bool) or not isinstance(rpe, int):
        raise ValidationError(
            "perceivedExertion must be an integer", field="perceivedExertion"
        )

    notes = payload.get("notes", "")
    if not isinstance(notes, str):
        raise ValidationError("notes must be a string", field="notes")

    return FeedbackRequest(
        entry_id=entry_id,
        actual_distance_km=float(distance),
        actual_duration_min=float(duration),
        perceived_exertion=rpe,
        notes=notes,
    )


def outcome_to_dict(outcome: FeedbackOutcome) -> dict:
    """Response body for a processed feedback submission."""
    adjustment = outcome.trace.adjustment
    return {
        "completedEntry": entry_to_dict(outcome.completed_entry),
        "adjustedEntryId": outcome.adjusted_entry_id,
        "adjustedEntry": (
            entry_to_dict(outcome.adjusted_entry) if outcome.adjusted_entry else None
        ),
        "pace": outcome.completed_entry.feedback.pace,
        "factor": adjustment.factor if adjustment else None,
        "percentChange": adjustment.percent_change if adjustment else None,
        "ruleId": adjustment.rule_id if adjustment else None,
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _require(data: dict, key: str, *aliases: str) -> Any:
    for name in (key, *aliases):
        if data.get(name) is not None:
            return data[name]
    raise ValidationError(f"Missing required field: {key}", field=key)


def _require_number(data: dict, key: str) -> float:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{key} must be a number", field=key)
    return value


def _parse_enum(enum_cls, name: str, field: str):
    try:
        return enum_cls[name]
    except KeyError:
        raise ValidationError(f"Unknown {field}: {name!r}", field=field) from None


def _parse_workout_type(raw: Any) -> WorkoutType:
    code = str(raw).upper()
    if code in _LEGACY_TYPE_CODES:
        return _LEGACY_TYPE_CODES[code]
    return _parse_enum(WorkoutType, code, "type")


def _parse_date(raw: Any) -> date:
    try:
        # Accept full ISO timestamps by keeping only the date part
        return date.fromisoformat(str(raw)[:10])
    except ValueError:
        raise ValidationError(
            f"Invalid scheduledDate: {raw!r}", field="scheduledDate"
        ) from None


def _first_number(data: dict, keys: tuple[str, ...], label_key: str) -> float | None:
    """First numeric value among *keys*, else the number in a '5km' style label."""
    for key in keys:
        value = data.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    label = data.get(label_key) or data.get(label_key + "Label")
    if isinstance(label, str):
        match = _LABEL_NUMBER.match(label)
        if match:
            return float(match.group(1).replace(",", "."))
    return None


def _as_minutes(value: float) -> int:
    if math.isclose(value, round(value)):
        return int(round(value))
    return ceil_clean(value)
