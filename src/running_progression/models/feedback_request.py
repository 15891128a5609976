"""Feedback request — a student's post-session report for one entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FeedbackRequest:
    """Input to the feedback recorder.

    Values are not range-checked here; the recorder validates before it
    mutates anything.
    """

    entry_id: str
    actual_distance_km: float
    actual_duration_min: float
    perceived_exertion: int
    notes: str = ""
