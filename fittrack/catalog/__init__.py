"""Exercise catalog — immutable exercise definitions and the built-in table."""

from fittrack.catalog.exercise_catalog import ExerciseCatalog, default_catalog
from fittrack.catalog.exercise_definition import (
    Difficulty,
    Equipment,
    ExerciseCategory,
    ExerciseDefinition,
    MuscleGroup,
)

__all__ = [
    "Difficulty",
    "Equipment",
    "ExerciseCatalog",
    "ExerciseCategory",
    "ExerciseDefinition",
    "MuscleGroup",
    "default_catalog",
]
