"""
Prescription calculator — sets / reps / rest per selected exercise.

Base values come from the goal table; then, in order:

1. cardio short-circuits to one timed block (size depends on session length),
2. isolation movements lose a set and switch to a higher rep range,
3. beginners lose a set.

Sets never drop below 2 outside cardio.
"""

from __future__ import annotations

from typing import NamedTuple

from fittrack.catalog.exercise_definition import Difficulty, ExerciseCategory, ExerciseDefinition
from fittrack.schemas.plan import PlanGoal


class Prescription(NamedTuple):
    sets: int
    reps: str
    rest_seconds: int


class _GoalBase(NamedTuple):
    beginner_sets: int
    sets: int
    reps: str
    rest_seconds: int


# ======================================================================
# Base table by goal
# ======================================================================

GOAL_BASE: dict[PlanGoal, _GoalBase] = {
    PlanGoal.STRENGTH: _GoalBase(beginner_sets=4, sets=5, reps="4-6", rest_seconds=180),
    PlanGoal.MUSCLE: _GoalBase(beginner_sets=3, sets=4, reps="8-12", rest_seconds=90),
    PlanGoal.WEIGHTLOSS: _GoalBase(beginner_sets=3, sets=3, reps="12-15", rest_seconds=45),
    PlanGoal.FITNESS: _GoalBase(beginner_sets=3, sets=3, reps="10-15", rest_seconds=60),
}

MIN_SETS = 2
CARDIO_REST_SECONDS = 60
LONG_SESSION_MINUTES = 60


def _cardio_prescription(duration: int) -> Prescription:
    reps = "15-20 min" if duration >= LONG_SESSION_MINUTES else "10-15 min"
    return Prescription(sets=1, reps=reps, rest_seconds=CARDIO_REST_SECONDS)


def prescribe(exercise: ExerciseDefinition, goal: PlanGoal, experience: Difficulty, duration: int, ) -> Prescription:
    """Compute the prescription for one exercise."""
    if exercise.category == ExerciseCategory.CARDIO:
        return _cardio_prescription(duration)

    base = GOAL_BASE[goal]
    sets = base.beginner_sets if experience == Difficulty.BEGINNER else base.sets
    reps = base.reps

    if exercise.category == ExerciseCategory.ISOLATION:
        sets = max(MIN_SETS, sets - 1)
        reps = "8-12" if goal == PlanGoal.STRENGTH else "12-15"

    if experience == Difficulty.BEGINNER:
        sets = max(MIN_SETS, sets - 1)

    return Prescription(sets=sets, reps=reps, rest_seconds=base.rest_seconds)
