"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

from fittrack.models.game_stats import GameStatsRecord  # noqa: F401
from fittrack.models.training_plan import TrainingPlanRecord  # noqa: F401
from fittrack.models.workout import WorkoutRecord  # noqa: F401
