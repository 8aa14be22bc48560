"""Database repositories."""

from fittrack.db.repositories.game_stats import GameStatsRepository
from fittrack.db.repositories.training_plan import TrainingPlanRepository
from fittrack.db.repositories.workout import WorkoutRepository

__all__ = [
    "GameStatsRepository",
    "TrainingPlanRepository",
    "WorkoutRepository",
]
