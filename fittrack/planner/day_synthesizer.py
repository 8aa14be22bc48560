"""
Day synthesizer — exercise selection for one split day.

Steps
-----

1. ``max_exercises = (duration - 5) // per_exercise`` with 8 minutes per
   exercise for strength, 4 for weight loss and 6 otherwise.
2. Per muscle tag: the eligible non-cardio exercises whose primary muscles
   hit the tag's targets are split into compound and isolation.  Up to
   ``ceil(limit * 0.6)`` shuffled compounds are taken, then shuffled
   isolations fill the tag up to its limit.
3. Cardio tag: up to 3 shuffled cardio exercises.
4. Days without an explicit core or full-body tag get 2 extra core
   isolations with probability 0.5.
5. Truncate to ``max_exercises``, then de-duplicate by name (first wins).
6. A day with fewer than 3 exercises is filled from the unselected
   eligible non-cardio exercises (core isolations first).  A day still
   empty becomes the fallback routine; a day still short is topped up
   from fallback entries that do not conflict with the user's injuries.
7. Each exercise gets its prescription.

All randomness is drawn from the ``rng`` argument.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Sequence

from fittrack.catalog.exercise_catalog import default_catalog
from fittrack.catalog.exercise_definition import ExerciseCategory, ExerciseDefinition, MuscleGroup
from fittrack.planner.prescription import prescribe
from fittrack.planner.split_planner import (
    CardioTag,
    CompositeTag,
    NamedTag,
    SplitDay,
    TrainingGroup,
    tag_limit,
    tag_muscles,
)
from fittrack.schemas.plan import PlanConfig, PlanGoal, PlannedExercise

logger = logging.getLogger(__name__)

WARMUP_MINUTES = 5
PER_EXERCISE_MINUTES: dict[PlanGoal, int] = {
    PlanGoal.STRENGTH: 8,
    PlanGoal.WEIGHTLOSS: 4,
}
DEFAULT_PER_EXERCISE_MINUTES = 6

COMPOUND_SHARE = 0.6
EXTRA_CORE_PROBABILITY = 0.5
EXTRA_CORE_COUNT = 2
MIN_EXERCISES_PER_DAY = 3

FALLBACK_ROUTINE: tuple[PlannedExercise, ...] = (
    PlannedExercise(name="Push-ups", sets=3, reps="10-15", rest_seconds=60),
    PlannedExercise(name="Bodyweight squats", sets=3, reps="15-20", rest_seconds=60),
    PlannedExercise(name="Plank", sets=3, reps="30-45sec", rest_seconds=45),
)


def max_exercises_for(duration: int, goal: PlanGoal) -> int:
    per_exercise = PER_EXERCISE_MINUTES.get(goal, DEFAULT_PER_EXERCISE_MINUTES)
    return max(0, (duration - WARMUP_MINUTES) // per_exercise)


# ======================================================================
# Selection
# ======================================================================


def _shuffled(items: Sequence[ExerciseDefinition], rng: random.Random) -> list[ExerciseDefinition]:
    copy = list(items)
    rng.shuffle(copy)
    return copy


def select_for_muscles(eligible: Sequence[ExerciseDefinition], muscles: frozenset[MuscleGroup], limit: int,
                       rng: random.Random, ) -> list[ExerciseDefinition]:
    """Compound-first selection of up to *limit* exercises hitting *muscles*."""
    matching = [e for e in eligible if e.category != ExerciseCategory.CARDIO and e.targets_any(muscles)]
    compounds = [e for e in matching if e.category == ExerciseCategory.COMPOUND]
    isolations = [e for e in matching if e.category == ExerciseCategory.ISOLATION]

    selected = _shuffled(compounds, rng)[:math.ceil(limit * COMPOUND_SHARE)]
    selected += _shuffled(isolations, rng)[:max(0, limit - len(selected))]
    return selected


def select_cardio(eligible: Sequence[ExerciseDefinition], limit: int, rng: random.Random) -> list[ExerciseDefinition]:
    cardio = [e for e in eligible if e.category == ExerciseCategory.CARDIO]
    return _shuffled(cardio, rng)[:limit]


def _select_for_tag(tag: NamedTag | CardioTag | CompositeTag, eligible: Sequence[ExerciseDefinition],
                    rng: random.Random, ) -> list[ExerciseDefinition]:
    if isinstance(tag, CardioTag):
        return select_cardio(eligible, tag_limit(tag), rng)
    return select_for_muscles(eligible, tag_muscles(tag), tag_limit(tag), rng)


def _has_core_or_fullbody(day: SplitDay) -> bool:
    return any(isinstance(tag, NamedTag) and tag.group in (TrainingGroup.CORE, TrainingGroup.FULLBODY)
               for tag in day.tags)


def _dedupe_by_name(exercises: Sequence[ExerciseDefinition]) -> list[ExerciseDefinition]:
    seen: set[str] = set()
    unique: list[ExerciseDefinition] = []
    for exercise in exercises:
        if exercise.name not in seen:
            seen.add(exercise.name)
            unique.append(exercise)
    return unique


def _fill_candidates(eligible: Sequence[ExerciseDefinition], selected: Sequence[ExerciseDefinition],
                     rng: random.Random, ) -> list[ExerciseDefinition]:
    """Unselected eligible non-cardio exercises, core isolations first."""
    taken = {e.name for e in selected}
    rest = [e for e in eligible if e.name not in taken and e.category != ExerciseCategory.CARDIO]
    core = [e for e in rest if e.category == ExerciseCategory.ISOLATION and MuscleGroup.CORE in e.primary_muscles]
    core_names = {e.name for e in core}
    others = [e for e in rest if e.name not in core_names]
    return _shuffled(core, rng) + _shuffled(others, rng)


def _is_safe_fallback(fallback: PlannedExercise, injuries: frozenset[str]) -> bool:
    definition = default_catalog().get(fallback.name)
    return definition is None or definition.is_safe_for(injuries)


def _top_up(planned: list[PlannedExercise], injuries: frozenset[str]) -> list[PlannedExercise]:
    names = {p.name for p in planned}
    for fallback in FALLBACK_ROUTINE:
        if len(planned) >= MIN_EXERCISES_PER_DAY:
            break
        if fallback.name not in names and _is_safe_fallback(fallback, injuries):
            planned.append(fallback.model_copy())
            names.add(fallback.name)
    return planned


# ======================================================================
# Public entry point
# ======================================================================


def synthesize_day(day: SplitDay, eligible: Sequence[ExerciseDefinition], config: PlanConfig,
                   rng: random.Random, ) -> list[PlannedExercise]:
    """Select and prescribe the exercises of one split day.

    Args:
        day: The split day (label and tags).
        eligible: Exercises that passed the eligibility filter.
        config: Resolved plan configuration.
        rng: Random source for shuffles and the extra-core draw.

    Returns:
        Ordered list of :class:`PlannedExercise`, unique by name.  Short
        days are filled from the eligible pool first; only a day left
        empty gets the unconditional fallback routine.
    """
    limit = max_exercises_for(config.duration, config.goal)

    selected: list[ExerciseDefinition] = []
    for tag in day.tags:
        picked = _select_for_tag(tag, eligible, rng)
        if not picked:
            logger.debug("Tag %s contributed no exercises on '%s'", tag, day.name)
        selected.extend(picked)

    if not _has_core_or_fullbody(day) and rng.random() < EXTRA_CORE_PROBABILITY:
        core = [e for e in eligible if e.category == ExerciseCategory.ISOLATION and MuscleGroup.CORE in e.primary_muscles]
        selected.extend(_shuffled(core, rng)[:EXTRA_CORE_COUNT])

    selected = _dedupe_by_name(selected[:limit])

    if len(selected) < MIN_EXERCISES_PER_DAY:
        missing = min(MIN_EXERCISES_PER_DAY, limit) - len(selected)
        selected += _fill_candidates(eligible, selected, rng)[:max(0, missing)]

    if not selected:
        logger.info("Day '%s' has no exercises; using fallback routine", day.name)
        return [fallback.model_copy() for fallback in FALLBACK_ROUTINE]

    planned = []
    for exercise in selected:
        prescription = prescribe(exercise, config.goal, config.experience_level, config.duration)
        planned.append(PlannedExercise(name=exercise.name, sets=prescription.sets, reps=prescription.reps,
                                       rest_seconds=prescription.rest_seconds, ))

    if len(planned) < MIN_EXERCISES_PER_DAY:
        logger.info("Day '%s' has %d exercises; topping up from fallback routine", day.name, len(planned))
        planned = _top_up(planned, config.injuries)
    return planned
