"""Command-line interface for running schedules.

Usage:
    running-progression generate <student> [--weeks 4] [--start 2025-12-01]
    running-progression show <student> [--json]
    running-progression feedback <student> <entry_id> --distance 5 --duration 30 --rpe 6
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from running_progression import config
from running_progression.engine import ProgressionEngine
from running_progression.exceptions import ProgressionError
from running_progression.feedback import FeedbackRecorder
from running_progression.models.decision_trace import FeedbackOutcome
from running_progression.schedule.repository import JsonFileScheduleRepository
from running_progression.schedule.store import ScheduleStore
from running_progression.serialization.json_codec import schedule_to_json_string
from running_progression.service import ProgressionService

logger = logging.getLogger(__name__)


def build_service(store_path: str | None = None) -> ProgressionService:
    """Service wired from configuration."""
    repository = JsonFileScheduleRepository(store_path or config.STORE_PATH)
    engine = ProgressionEngine(target_order=config.TARGET_ORDER)
    return ProgressionService(
        repository,
        recorder=FeedbackRecorder(engine),
        default_weeks=config.SCHEDULE_WEEKS,
    )


def format_schedule(store: ScheduleStore) -> str:
    """Plain-text table of a schedule in display order."""
    lines = []
    for e in store.display_order():
        line = (
            f"{e.scheduled_date.isoformat()}  {e.id:<14} {e.workout_type.name:<9} "
            f"{e.target_distance_label:>7} {e.target_duration_label:>6}  {e.status.name}"
        )
        if e.feedback is not None:
            line += f"  pace {e.feedback.pace}  RPE {e.feedback.perceived_exertion}"
        lines.append(line)
    summary = store.summary()
    lines.append(
        f"{summary.completed_sessions}/{summary.total_sessions} sessions completed, "
        f"{summary.completed_distance_km:g} km run"
    )
    return "\n".join(lines)


def format_outcome(outcome: FeedbackOutcome) -> str:
    completed = outcome.completed_entry
    lines = [f"Completed {completed.id}: pace {completed.feedback.pace}"]
    if outcome.adjusted_entry is not None:
        adjusted = outcome.adjusted_entry
        lines.append(
            f"Next {adjusted.workout_type.name} ({adjusted.id}, "
            f"{adjusted.scheduled_date.isoformat()}): "
            f"{adjusted.target_distance_label} / {adjusted.target_duration_label}"
        )
    else:
        lines.append(outcome.trace.target_notes)
    return "\n".join(lines)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="running-progression", description="Adaptive running schedules"
    )
    parser.add_argument("--store", help="Path to the schedules JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Create a new schedule for a student")
    gen.add_argument("student")
    gen.add_argument("--weeks", type=int, default=None)
    gen.add_argument("--start", type=date.fromisoformat, default=None)

    show = sub.add_parser("show", help="Print a student's schedule")
    show.add_argument("student")
    show.add_argument("--json", action="store_true", help="Print raw JSON")

    fb = sub.add_parser("feedback", help="Record a completed session")
    fb.add_argument("student")
    fb.add_argument("entry_id")
    fb.add_argument("--distance", type=float, required=True, help="Actual km")
    fb.add_argument("--duration", type=float, required=True, help="Actual minutes")
    fb.add_argument("--rpe", type=int, required=True, help="Perceived exertion 1-10")
    fb.add_argument("--notes", default="")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    service = build_service(args.store)

    try:
        if args.command == "generate":
            entries = service.create_schedule(args.student, args.weeks, args.start)
            print(format_schedule(ScheduleStore.of(entries)))
        elif args.command == "show":
            store = service.get_schedule(args.student)
            if args.json:
                print(schedule_to_json_string(store.entries))
            else:
                print(format_schedule(store))
        else:
            outcome = service.record_feedback(
                args.student,
                args.entry_id,
                args.distance,
                args.duration,
                args.rpe,
                args.notes,
            )
            print(format_outcome(outcome))
    except ProgressionError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
