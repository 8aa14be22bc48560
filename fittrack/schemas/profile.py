"""
User profile schema.

The profile is collected during onboarding and feeds both the nutrition
calculator (body metrics, activity, goal) and the plan generator
(experience, equipment, focus areas, injuries, session length).
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from fittrack.catalog.exercise_definition import Difficulty, Equipment
from fittrack.schemas.plan import FocusArea, TrainingPreferences


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class FitnessGoal(str, Enum):
    LOSE_WEIGHT = "lose_weight"
    MAINTAIN = "maintain"
    BUILD_MUSCLE = "build_muscle"
    IMPROVE_FITNESS = "improve_fitness"


class UserProfile(BaseModel):
    """Profile data consumed by the nutrition calculator and the planner."""

    name: str = ""
    height: float = Field(..., ge=0.0, description="Height in cm")
    current_weight: float = Field(..., ge=0.0, description="Body weight in kg")
    target_weight: Optional[float] = Field(None, ge=0.0)
    birth_date: Optional[datetime.date] = None
    gender: Optional[Gender] = None
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    fitness_goal: FitnessGoal = FitnessGoal.MAINTAIN

    # Training preferences
    experience_level: Optional[Difficulty] = None
    available_equipment: list[Equipment] = Field(default_factory=list)
    focus_areas: list[FocusArea] = Field(default_factory=list)
    injuries: list[str] = Field(default_factory=list)
    preferred_workout_duration: Optional[int] = None
    workouts_per_week: Optional[int] = None
    training_preferences: TrainingPreferences = Field(default_factory=TrainingPreferences)
