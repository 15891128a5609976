"""Tests for the Streamlit tabular helpers."""

from __future__ import annotations

from datetime import date

from helpers import format_date_badge, schedule_frame, weekly_volume_frame
from running_progression.schedule.generator import generate_schedule
from running_progression.schedule.store import ScheduleStore


class TestWeeklyVolumeFrame:
    def test_weeks_across_new_year_stay_in_order(self) -> None:
        store = ScheduleStore.of(generate_schedule(date(2025, 12, 22), 2))
        frame = weekly_volume_frame(store)

        assert list(frame["Semana"]) == [date(2025, 12, 22), date(2025, 12, 29)]
        assert list(frame["Planejado (km)"]) == [19.0, 19.0]
        assert list(frame["Realizado (km)"]) == [0.0, 0.0]

    def test_same_week_number_a_year_apart_is_not_merged(self) -> None:
        store = ScheduleStore.of(generate_schedule(date(2025, 1, 6), 53))
        frame = weekly_volume_frame(store)

        assert len(frame) == 53
        assert frame["Semana"].iloc[0] == date(2025, 1, 6)
        assert frame["Semana"].iloc[-1] == date(2026, 1, 5)

    def test_completed_distance(self, feedback_for) -> None:
        entries = generate_schedule(date(2025, 12, 1), 1)
        store = ScheduleStore.of(entries)
        store = store.replace_by_id(entries[0].complete(feedback_for(5, distance_km=5.5)))

        frame = weekly_volume_frame(store)

        assert list(frame["Realizado (km)"]) == [5.5]

    def test_empty_store(self) -> None:
        frame = weekly_volume_frame(ScheduleStore())
        assert frame.empty
        assert list(frame.columns) == ["Semana", "Planejado (km)", "Realizado (km)"]


class TestScheduleFrame:
    def test_one_row_per_entry(self, four_week_schedule) -> None:
        frame = schedule_frame(list(four_week_schedule))
        assert len(frame) == 16
        assert frame["Tipo"].iloc[0] == "Tiros"
        assert set(frame["Status"]) == {"PENDENTE"}


class TestFormatDateBadge:
    def test_portuguese_month(self, make_entry) -> None:
        assert format_date_badge(make_entry("a", day=3)) == (3, "JAN")
