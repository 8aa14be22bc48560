"""
Gamification schemas — logged workouts, running stats, achievements.
"""

import datetime
import uuid
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# ======================================================================
# Logged workouts
# ======================================================================


class WorkoutSet(BaseModel):
    reps: int = Field(0, ge=0)
    weight: float = Field(0.0, ge=0.0, description="Weight in kg")
    completed: bool = True


class WorkoutExercise(BaseModel):
    exercise_name: str
    sets: list[WorkoutSet] = Field(default_factory=list)
    notes: Optional[str] = None


class Workout(BaseModel):
    """A completed (or in-progress) training session."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    date: datetime.date
    name: str = ""
    exercises: list[WorkoutExercise] = Field(default_factory=list)
    duration: Optional[int] = Field(None, ge=0, description="Minutes")
    notes: Optional[str] = Field(None, max_length=1000)
    xp_earned: Optional[int] = None
    rating: Optional[int] = Field(None, ge=1, le=6)
    comment: Optional[str] = Field(None, max_length=1000)
    workout_type: Optional[Literal["weights", "cardio"]] = None

    model_config = ConfigDict(from_attributes=True)


# ======================================================================
# Achievements
# ======================================================================


class RequirementType(str, Enum):
    WORKOUTS = "workouts"
    STREAK = "streak"
    VOLUME = "volume"
    LEVEL = "level"


class AchievementRequirement(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: RequirementType
    value: float = Field(..., ge=0)


class Achievement(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    icon: str = ""
    xp_reward: int = Field(0, ge=0)
    requirement: AchievementRequirement


# ======================================================================
# Running stats
# ======================================================================


class GameStats(BaseModel):
    """Per-user gamification state.

    ``achievements`` only grows; ``longest_streak >= current_streak``
    after every update.  ``week_start_date`` is the Monday of the week
    ``weekly_xp`` belongs to (``None`` until first refreshed).
    """

    xp: int = 0
    level: int = 1
    current_streak: int = 0
    longest_streak: int = 0
    last_workout_date: Optional[datetime.date] = None
    total_workouts: int = 0
    total_volume_lifted: float = 0.0
    achievements: list[str] = Field(default_factory=list)
    weekly_xp: int = 0
    week_start_date: Optional[datetime.date] = None

    model_config = ConfigDict(from_attributes=True)


class WorkoutCompletion(BaseModel):
    """Result of completing a workout."""

    stats: GameStats
    xp_awarded: int
    achievements_unlocked: list[str]
    streak: int
    volume: float


class LevelProgress(BaseModel):
    """Progress inside the current level."""

    level: int
    title: str
    current: int
    required: int
    progress: float = Field(..., ge=0.0, le=100.0, description="Percent")


class AchievementStatus(BaseModel):
    """An achievement with the user's unlock state and progress toward it."""

    achievement: Achievement
    unlocked: bool
    progress: float = Field(..., ge=0.0, le=100.0, description="Percent")
