"""
Training-plan schemas.

``PlanRequest`` is the raw, loosely-typed request a caller collects from
the user.  ``PlanConfig`` is the canonical configuration produced by
:func:`~fittrack.planner.config.resolve_plan_config` and consumed by the
generator.  ``TrainingPlan`` is the generated, persisted result.
"""

import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from fittrack.catalog.exercise_definition import Difficulty, Equipment


class PlanGoal(str, Enum):
    STRENGTH = "strength"
    MUSCLE = "muscle"
    WEIGHTLOSS = "weightloss"
    FITNESS = "fitness"


class FocusArea(str, Enum):
    """Muscle areas a user can ask the plan to emphasise."""
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    LEGS = "legs"
    CORE = "core"
    GLUTES = "glutes"


GOAL_LABELS: dict[PlanGoal, str] = {
    PlanGoal.STRENGTH: "Styrke",
    PlanGoal.MUSCLE: "Muskelvekst",
    PlanGoal.WEIGHTLOSS: "Vekttap",
    PlanGoal.FITNESS: "Kondisjon",
}

FOCUS_AREA_LABELS: dict[FocusArea, str] = {
    FocusArea.CHEST: "Bryst",
    FocusArea.BACK: "Rygg",
    FocusArea.SHOULDERS: "Skuldre",
    FocusArea.ARMS: "Armer",
    FocusArea.LEGS: "Ben",
    FocusArea.CORE: "Mage/Core",
    FocusArea.GLUTES: "Rumpe",
}

ALLOWED_DURATIONS: tuple[int, ...] = (30, 45, 60, 90)


class TrainingPreferences(BaseModel):
    """Training-style flags collected during onboarding."""

    model_config = ConfigDict(frozen=True)

    prefer_cardio: bool = False
    prefer_hiit: bool = False
    prefer_strength: bool = False
    prefer_flexibility: bool = False


# ======================================================================
# Request / configuration
# ======================================================================


class PlanRequest(BaseModel):
    """Raw plan request.  Values are normalised by the resolver, not here."""

    goal: PlanGoal = PlanGoal.MUSCLE
    days_per_week: int = Field(3, description="Training days per week (clamped to 2-6)")
    experience_level: Difficulty = Difficulty.BEGINNER
    equipment: list[Equipment] = Field(default_factory=lambda: [Equipment.GYM])
    focus_areas: list[FocusArea] = Field(default_factory=list, description="At most 3 are used")
    injuries: list[str] = Field(default_factory=list)
    duration: int = Field(60, description="Session length in minutes (snapped to 30/45/60/90)")
    preferences: TrainingPreferences = Field(default_factory=TrainingPreferences)


class PlanConfig(BaseModel):
    """Canonical plan configuration."""

    model_config = ConfigDict(frozen=True)

    goal: PlanGoal
    days_per_week: int = Field(..., ge=2, le=6)
    experience_level: Difficulty
    equipment: frozenset[Equipment]
    focus_areas: tuple[FocusArea, ...] = Field(default=(), max_length=3)
    injuries: frozenset[str] = Field(default_factory=frozenset)
    duration: Literal[30, 45, 60, 90] = 60
    preferences: TrainingPreferences = Field(default_factory=TrainingPreferences)


# ======================================================================
# Generated plan
# ======================================================================


class PlannedExercise(BaseModel):
    name: str
    sets: int = Field(..., ge=1)
    reps: str = Field(..., description="Rep range ('8-12') or time range for cardio ('15-20 min')")
    rest_seconds: int = Field(..., ge=0)


class TrainingDay(BaseModel):
    day_number: int = Field(..., ge=1, description="1-based position in the plan")
    name: str = Field(..., description="Split label, e.g. 'Push dag'")
    exercises: list[PlannedExercise]


class TrainingPlan(BaseModel):
    """A complete generated plan.  Replaced wholesale on regeneration."""

    id: str
    name: str
    goal: PlanGoal
    days_per_week: int
    days: list[TrainingDay]
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
