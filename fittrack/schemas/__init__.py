"""Pydantic schemas for the engine's data model and request/response validation."""

from fittrack.schemas.gamification import (
    Achievement,
    AchievementStatus,
    AchievementRequirement,
    GameStats,
    LevelProgress,
    RequirementType,
    Workout,
    WorkoutCompletion,
    WorkoutExercise,
    WorkoutSet,
)
from fittrack.schemas.nutrition import Macros, NutritionTargets, NutritionTargetsRequest
from fittrack.schemas.plan import (
    FocusArea,
    PlanConfig,
    PlanGoal,
    PlannedExercise,
    PlanRequest,
    TrainingDay,
    TrainingPlan,
    TrainingPreferences,
)
from fittrack.schemas.profile import ActivityLevel, FitnessGoal, Gender, UserProfile

__all__ = [
    "Achievement",
    "AchievementStatus",
    "AchievementRequirement",
    "ActivityLevel",
    "FitnessGoal",
    "FocusArea",
    "GameStats",
    "Gender",
    "LevelProgress",
    "Macros",
    "NutritionTargets",
    "NutritionTargetsRequest",
    "PlanConfig",
    "PlanGoal",
    "PlannedExercise",
    "PlanRequest",
    "RequirementType",
    "TrainingDay",
    "TrainingPlan",
    "TrainingPreferences",
    "UserProfile",
    "Workout",
    "WorkoutCompletion",
    "WorkoutExercise",
    "WorkoutSet",
]
