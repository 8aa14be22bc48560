"""Gamification: XP, levels, streaks and achievements."""

from fittrack.gamification.achievements import ACHIEVEMENTS, achievement_progress, evaluate_achievements, next_achievement
from fittrack.gamification.engine import (
    calculate_level,
    compute_workout_completion,
    get_level_title,
    refresh_weekly_xp,
    workout_volume,
    workouts_per_level,
    workouts_to_next_level,
)
from fittrack.gamification.streak import compute_streak

__all__ = [
    "ACHIEVEMENTS",
    "achievement_progress",
    "calculate_level",
    "compute_streak",
    "compute_workout_completion",
    "evaluate_achievements",
    "get_level_title",
    "next_achievement",
    "refresh_weekly_xp",
    "workout_volume",
    "workouts_per_level",
    "workouts_to_next_level",
]
