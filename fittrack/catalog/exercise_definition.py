"""
Exercise definitions.

Each exercise is described by a small set of categorical tags that the
plan generator filters and selects on:

* **ExerciseCategory** (compound / isolation / cardio) — drives the
  compound-first selection and the sets/reps prescription.
* **Equipment** — the exercise is usable when *any* of its tags is in the
  user's available equipment.
* **MuscleGroup** (primary / secondary) — matched against the target
  muscles of a split day.
* **Difficulty** — gated by the user's experience level.
* **Injury tags** — free-form injury names that exclude the exercise.

Definitions are frozen; nothing mutates a catalog entry at runtime.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ======================================================================
# Enums
# ======================================================================

class ExerciseCategory(str, Enum):
    """Multi-joint, single-joint, or conditioning work."""
    COMPOUND = "compound"
    ISOLATION = "isolation"
    CARDIO = "cardio"


class Equipment(str, Enum):
    """Where / with what the user trains."""
    GYM = "gym"
    HOME_BASIC = "home_basic"
    HOME_FULL = "home_full"
    BODYWEIGHT = "bodyweight"


class MuscleGroup(str, Enum):
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    LEGS = "legs"
    CORE = "core"
    GLUTES = "glutes"


class Difficulty(str, Enum):
    """Exercise difficulty, also used as the user's experience level."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# ======================================================================
# ExerciseDefinition data model
# ======================================================================

class ExerciseDefinition(BaseModel):
    """Catalog entry describing a single exercise."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique display name, e.g. 'Benkpress'")
    category: ExerciseCategory
    equipment: frozenset[Equipment] = Field(
        ...,
        description="Equipment tags; usable if any tag is available to the user",
    )
    primary_muscles: frozenset[MuscleGroup] = Field(default_factory=frozenset)
    secondary_muscles: frozenset[MuscleGroup] = Field(default_factory=frozenset)
    difficulty: Difficulty = Difficulty.BEGINNER
    avoid_with_injuries: frozenset[str] = Field(
        default_factory=frozenset,
        description="Injury names that exclude this exercise, e.g. 'Kneproblemer'",
    )

    def is_available_with(self, equipment: frozenset[Equipment] | set[Equipment]) -> bool:
        """``True`` if at least one equipment tag is available."""
        return not self.equipment.isdisjoint(equipment)

    def is_safe_for(self, injuries: frozenset[str] | set[str]) -> bool:
        """``True`` if none of the exercise's injury tags is present."""
        return self.avoid_with_injuries.isdisjoint(injuries)

    def targets_any(self, muscles: frozenset[MuscleGroup] | set[MuscleGroup]) -> bool:
        """``True`` if a primary muscle is among *muscles*."""
        return not self.primary_muscles.isdisjoint(muscles)
