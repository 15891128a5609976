"""Running schedule — Streamlit page for students.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import streamlit as st

from running_progression import config
from running_progression.engine import ProgressionEngine
from running_progression.exceptions import ProgressionError
from running_progression.feedback import FeedbackRecorder
from running_progression.models.decision_trace import RuleStatus
from running_progression.models.entry import RunningWorkoutEntry
from running_progression.schedule.repository import JsonFileScheduleRepository
from running_progression.service import ProgressionService

from helpers import (
    EFFORT_COLORS,
    EFFORT_LABELS,
    RPE_SCALE_HINT,
    TYPE_COLORS,
    format_date_badge,
    schedule_frame,
    weekly_volume_frame,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Corrida",
    page_icon="🏃",
    layout="wide",
)


@st.cache_resource
def get_service() -> ProgressionService:
    repository = JsonFileScheduleRepository(config.STORE_PATH)
    engine = ProgressionEngine(target_order=config.TARGET_ORDER)
    return ProgressionService(
        repository,
        recorder=FeedbackRecorder(engine),
        default_weeks=config.SCHEDULE_WEEKS,
    )


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _render_entry(entry: RunningWorkoutEntry) -> None:
    color = TYPE_COLORS.get(entry.workout_type, "#CCCCCC")
    day, month = format_date_badge(entry)
    st.markdown(
        f'<div style="border-left:4px solid {color};padding:4px 12px;">'
        f"<strong>{day} {month}</strong> — <strong>{entry.title}</strong> "
        f"| {entry.target_duration_label} | {entry.target_distance_label}</div>",
        unsafe_allow_html=True,
    )
    st.markdown(f"**Aquecimento:** {entry.warmup_text}")
    st.markdown(f"**Principal:** {entry.main_text}")
    st.markdown(f"**Desaquecimento:** {entry.cooldown_text}")

    if entry.feedback is not None:
        band = entry.feedback.effort_band
        st.markdown(
            f'<span style="color:{EFFORT_COLORS[band]};">RPE '
            f"{entry.feedback.perceived_exertion} ({EFFORT_LABELS[band]})</span> "
            f"· Pace: {entry.feedback.pace}",
            unsafe_allow_html=True,
        )


def _feedback_form(service: ProgressionService, student_id: str, entry: RunningWorkoutEntry) -> None:
    with st.form(key=f"feedback_{entry.id}"):
        col1, col2 = st.columns(2)
        distance = col1.number_input(
            "Distância (km)", min_value=0.0, value=float(entry.target_distance_km), step=0.1
        )
        duration = col2.number_input(
            "Tempo (min)", min_value=0.0, value=float(entry.target_duration_min), step=1.0
        )
        rpe = st.slider("Esforço Percebido (RPE)", min_value=1, max_value=10, value=5)
        st.caption(RPE_SCALE_HINT)
        notes = st.text_input("Observações", value="")
        submitted = st.form_submit_button("Confirmar Treino")

    if not submitted:
        return

    try:
        outcome = service.record_feedback(
            student_id, entry.id, distance, duration, int(rpe), notes
        )
    except ProgressionError as exc:
        st.error(str(exc))
        return

    st.success(f"Treino concluído! Pace: {outcome.completed_entry.feedback.pace}")
    if outcome.adjusted_entry is not None:
        nxt = outcome.adjusted_entry
        st.info(
            f"Próximo {nxt.title} ({nxt.scheduled_date.isoformat()}): "
            f"{nxt.target_distance_label} / {nxt.target_duration_label}"
        )
    with st.expander("Decisão da IA"):
        for rr in outcome.trace.rule_results:
            icon = "🟢" if rr.status == RuleStatus.FIRED else "🟠"
            st.markdown(f"{icon} **{rr.rule_id}** — {rr.explanation}")
        st.caption(outcome.trace.target_notes)


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

service = get_service()

st.title("CORRIDA")
student_id = st.sidebar.text_input("Aluno (id)", value="1")

store = service.get_schedule(student_id)
if len(store) == 0:
    st.info("Nenhum treino de corrida agendado.")
    weeks = st.sidebar.number_input(
        "Semanas", min_value=1, max_value=16, value=config.SCHEDULE_WEEKS
    )
    if st.sidebar.button("Gerar planilha"):
        service.create_schedule(student_id, int(weeks))
        st.rerun()
    st.stop()

tab_sessions, tab_table = st.tabs(["Treinos", "Planilha"])

with tab_sessions:
    for entry in store.display_order():
        with st.container(border=True):
            _render_entry(entry)
            if entry.is_pending:
                with st.expander("Registrar treino"):
                    _feedback_form(service, student_id, entry)

with tab_table:
    summary = store.summary()
    col1, col2, col3 = st.columns(3)
    col1.metric("Concluídos", f"{summary.completed_sessions}/{summary.total_sessions}")
    col2.metric("Km planejados", f"{summary.planned_distance_km:g}")
    col3.metric("Km realizados", f"{summary.completed_distance_km:g}")
    st.dataframe(schedule_frame(list(store)), use_container_width=True, hide_index=True)
    st.bar_chart(weekly_volume_frame(store), x="Semana")
