"""Session templates — fixed prescription text and baseline targets per WorkoutType.

The baseline distance/duration is what the ProgressionEngine scales
after each completed session of the same type.
"""

from __future__ import annotations

from dataclasses import dataclass

from running_progression.models.enums import WorkoutType


@dataclass(frozen=True)
class SessionTemplate:
    """Complete template for a workout type.

    Attributes:
        title: Session title shown to the student.
        warmup_text: Warmup prescription.
        main_text: Main-set prescription.
        cooldown_text: Cooldown prescription.
        distance_km: Baseline distance target.
        duration_min: Baseline duration target.
    """

    title: str
    warmup_text: str
    main_text: str
    cooldown_text: str
    distance_km: float
    duration_min: int


SESSION_TEMPLATES: dict[WorkoutType, SessionTemplate] = {
    # INTERVAL: short hard repeats with walking recovery
    WorkoutType.INTERVAL: SessionTemplate(
        title="Tiros Intensos (HIIT)",
        warmup_text="10min: Caminhada progressiva (5km/h) a trote leve (8km/h).",
        main_text="15min: 10x 1min Forte (12-14km/h) / 30s Caminhada. Sinta a queimação!",
        cooldown_text="5min: Caminhada lenta para voltar à calma.",
        distance_km=5.0,
        duration_min=30,
    ),

    # BASE_RUN: continuous Z2 volume
    WorkoutType.BASE_RUN: SessionTemplate(
        title="Rodagem Regenerativa",
        warmup_text="5min: Caminhada vigorosa.",
        main_text=(
            "25min: Corrida contínua em Z2 (Confortável). Mantenha pace de "
            "6:30-7:00 min/km. O objetivo é volume, não velocidade."
        ),
        cooldown_text="Alongamento estático leve.",
        distance_km=4.0,
        duration_min=30,
    ),

    # FARTLEK: unstructured speed play
    WorkoutType.FARTLEK: SessionTemplate(
        title="Fartlek Dinâmico",
        warmup_text="5min Trote leve.",
        main_text=(
            "25min: Brincadeira de velocidade. Alterne livremente: Corra forte "
            "até a próxima esquina, trote até o poste. Mínimo de 6 estímulos "
            "fortes durante o trajeto."
        ),
        cooldown_text="5min Caminhada.",
        distance_km=5.0,
        duration_min=35,
    ),

    # TEMPO: sustained Z3 "comfortably hard"
    WorkoutType.TEMPO: SessionTemplate(
        title="Tempo Run (Ritmo)",
        warmup_text="5min Trote.",
        main_text=(
            '20min: Ritmo sustentado "confortavelmente difícil" (Z3). Tente '
            "segurar 10-11km/h constantes sem oscilar."
        ),
        cooldown_text="5min Trote regenerativo.",
        distance_km=5.0,
        duration_min=30,
    ),
}


def get_template(workout_type: WorkoutType) -> SessionTemplate:
    """Look up the template for a workout type."""
    return SESSION_TEMPLATES[workout_type]
