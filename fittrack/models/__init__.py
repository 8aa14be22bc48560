"""SQLModel database models."""

from fittrack.models.game_stats import GameStatsRecord
from fittrack.models.training_plan import TrainingPlanRecord
from fittrack.models.workout import WorkoutRecord

__all__ = [
    "GameStatsRecord",
    "TrainingPlanRecord",
    "WorkoutRecord",
]
