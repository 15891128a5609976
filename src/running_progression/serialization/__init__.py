"""Serialization module — JSON shapes for schedules and feedback."""

from running_progression.serialization.json_codec import (
    entry_from_dict,
    entry_to_dict,
    outcome_to_dict,
    parse_feedback_request,
    schedule_to_json_string,
)

__all__ = [
    "entry_from_dict",
    "entry_to_dict",
    "outcome_to_dict",
    "parse_feedback_request",
    "schedule_to_json_string",
]
