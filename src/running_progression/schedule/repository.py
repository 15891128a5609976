"""Schedule persistence — whole-collection load/save per student."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Protocol

from running_progression.exceptions import StorageError
from running_progression.models.entry import RunningWorkoutEntry
from running_progression.serialization.json_codec import entry_from_dict, entry_to_dict

logger = logging.getLogger(__name__)


class ScheduleRepository(Protocol):
    """Read whole, write whole. No partial updates."""

    def load_schedule(self, student_id: str) -> tuple[RunningWorkoutEntry, ...]:
        ...

    def save_schedule(
        self, student_id: str, entries: Iterable[RunningWorkoutEntry]
    ) -> None:
        ...


class InMemoryScheduleRepository:
    """Dict-backed repository for tests and single-process use."""

    def __init__(self) -> None:
        self._schedules: dict[str, tuple[RunningWorkoutEntry, ...]] = {}

    def load_schedule(self, student_id: str) -> tuple[RunningWorkoutEntry, ...]:
        return self._schedules.get(student_id, ())

    def save_schedule(
        self, student_id: str, entries: Iterable[RunningWorkoutEntry]
    ) -> None:
        self._schedules[student_id] = tuple(entries)

    def student_ids(self) -> list[str]:
        return sorted(self._schedules)


class JsonFileScheduleRepository:
    """All students' schedules in one JSON file.

    File layout::

        {"students": {"<student_id>": [<entry>, ...], ...}}

    The earlier app's roster export (a list of student objects with
    ``id`` and ``runningWorkouts``) is also readable. Writes go to a temp
    file in the same directory and are moved into place with
    ``os.replace``, so a reader never sees a half-written file.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def load_schedule(self, student_id: str) -> tuple[RunningWorkoutEntry, ...]:
        raw = self._read_all().get(student_id, [])
        entries = tuple(entry_from_dict(item) for item in raw)
        logger.debug("Loaded %d entries for student %s", len(entries), student_id)
        return entries

    def save_schedule(
        self, student_id: str, entries: Iterable[RunningWorkoutEntry]
    ) -> None:
        data = self._read_all()
        data[student_id] = [entry_to_dict(e) for e in entries]
        self._write_all(data)
        logger.info(
            "Saved %d entries for student %s to %s",
            len(data[student_id]),
            student_id,
            self.path,
        )

    def student_ids(self) -> list[str]:
        return sorted(self._read_all())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_all(self) -> dict[str, list[dict]]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read schedules from {self.path}: {exc}") from exc

        if isinstance(payload, list):
            # Roster export: [{"id": ..., "runningWorkouts": [...]}, ...]
            return {
                str(student["id"]): list(student.get("runningWorkouts") or [])
                for student in payload
                if isinstance(student, dict) and "id" in student
            }
        if isinstance(payload, dict) and isinstance(payload.get("students"), dict):
            return {str(k): list(v or []) for k, v in payload["students"].items()}
        raise StorageError(f"Unrecognized schedule file layout in {self.path}")

    def _write_all(self, data: dict[str, list[dict]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=self.path.name, suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"students": data}, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Cannot write schedules to {self.path}: {exc}") from exc
