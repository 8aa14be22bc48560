"""
Exercise eligibility filter.

Computes the subset of the catalog a user can be given.  Every rule must
pass for an exercise to be eligible:

1. **Equipment**: at least one of the exercise's equipment tags is
   available to the user.
2. **Injury safety**: none of the exercise's injury tags is in the
   user's injury list.
3. **Difficulty gate**: beginners never get ``advanced`` exercises;
   intermediates get each ``advanced`` exercise with probability 0.5
   (drawn from the injected random source, so regenerations vary);
   advanced users are not gated.

An empty equipment set yields an empty list.  Nothing is raised.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable

from fittrack.catalog.exercise_catalog import ExerciseCatalog
from fittrack.catalog.exercise_definition import Difficulty, Equipment, ExerciseDefinition

logger = logging.getLogger(__name__)

# Probability that an intermediate user is offered an advanced exercise.
INTERMEDIATE_ADVANCED_ADMISSION = 0.5


def passes_difficulty_gate(exercise: ExerciseDefinition, experience: Difficulty, rng: random.Random, ) -> bool:
    """Apply the experience-based difficulty gate to one exercise."""
    if exercise.difficulty != Difficulty.ADVANCED:
        return True
    if experience == Difficulty.BEGINNER:
        return False
    if experience == Difficulty.INTERMEDIATE:
        return rng.random() < INTERMEDIATE_ADVANCED_ADMISSION
    return True


def filter_exercises(catalog: ExerciseCatalog | Iterable[ExerciseDefinition], equipment: Iterable[Equipment],
                     injuries: Iterable[str], experience: Difficulty, rng: random.Random, ) -> list[ExerciseDefinition]:
    """Return the eligible exercises, in catalog order.

    Args:
        catalog: The exercise catalog (or any iterable of definitions).
        equipment: Equipment tags available to the user.
        injuries: Injury names reported by the user.
        experience: The user's experience level.
        rng: Random source for the intermediate coin flip.

    Returns:
        List of eligible :class:`ExerciseDefinition`.
    """
    available = frozenset(equipment)
    injury_set = frozenset(injuries)
    if not available:
        logger.debug("No equipment available, no exercise is eligible")
        return []

    eligible: list[ExerciseDefinition] = []
    for exercise in catalog:
        if not exercise.is_available_with(available):
            continue
        if not exercise.is_safe_for(injury_set):
            continue
        if not passes_difficulty_gate(exercise, experience, rng):
            continue
        eligible.append(exercise)

    logger.debug("Eligible exercises: %d (equipment=%s, injuries=%s, experience=%s)", len(eligible),
                 sorted(e.value for e in available), sorted(injury_set), experience.value, )
    return eligible
