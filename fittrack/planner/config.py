"""
Plan parameter resolution.

Turns a raw :class:`~fittrack.schemas.plan.PlanRequest` into the canonical
:class:`~fittrack.schemas.plan.PlanConfig`.  Resolution never raises for
malformed-but-numeric input: values are clamped, snapped or truncated.

An empty equipment list is passed through unchanged.  It is the caller's
job to prevent it; if it does reach the generator, every day degrades to
the fallback routine (see :mod:`fittrack.planner.day_synthesizer`).
"""

from __future__ import annotations

import logging
from typing import Iterable, TypeVar

from fittrack.catalog.exercise_definition import Difficulty, Equipment
from fittrack.schemas.plan import (
    ALLOWED_DURATIONS,
    PlanConfig,
    PlanGoal,
    PlanRequest,
)
from fittrack.schemas.profile import FitnessGoal, UserProfile

logger = logging.getLogger(__name__)

MIN_DAYS_PER_WEEK = 2
MAX_DAYS_PER_WEEK = 6
MAX_FOCUS_AREAS = 3

# Plan goal implied by the profile's overall fitness goal.
_PROFILE_GOAL_TO_PLAN_GOAL: dict[FitnessGoal, PlanGoal] = {
    FitnessGoal.LOSE_WEIGHT: PlanGoal.WEIGHTLOSS,
    FitnessGoal.MAINTAIN: PlanGoal.FITNESS,
    FitnessGoal.BUILD_MUSCLE: PlanGoal.MUSCLE,
    FitnessGoal.IMPROVE_FITNESS: PlanGoal.FITNESS,
}

T = TypeVar("T")


def _unique(items: Iterable[T]) -> list[T]:
    """Drop duplicates, keeping first-occurrence order."""
    return list(dict.fromkeys(items))


def clamp_days_per_week(days: int) -> int:
    return max(MIN_DAYS_PER_WEEK, min(MAX_DAYS_PER_WEEK, int(days)))


def snap_duration(minutes: int) -> int:
    """Snap *minutes* to the nearest allowed session length.

    Ties resolve to the shorter session.
    """
    return min(ALLOWED_DURATIONS, key=lambda allowed: (abs(allowed - minutes), allowed))


def resolve_plan_config(request: PlanRequest) -> PlanConfig:
    """Validate and normalise a raw plan request.

    * ``days_per_week`` is clamped to [2, 6].
    * ``duration`` is snapped to 30 / 45 / 60 / 90.
    * ``focus_areas`` is de-duplicated and truncated to the first 3.
    * ``equipment`` and ``injuries`` are de-duplicated; blank injury
      names are dropped.
    """
    days = clamp_days_per_week(request.days_per_week)
    duration = snap_duration(request.duration)
    focus_areas = _unique(request.focus_areas)
    if len(focus_areas) > MAX_FOCUS_AREAS:
        logger.debug("Truncating focus areas %s to %d", focus_areas, MAX_FOCUS_AREAS)
        focus_areas = focus_areas[:MAX_FOCUS_AREAS]
    injuries = frozenset(name.strip() for name in request.injuries if name and name.strip())

    if not request.equipment:
        logger.warning("Plan request without equipment; days will fall back to the default routine")

    return PlanConfig(goal=request.goal, days_per_week=days, experience_level=request.experience_level,
                      equipment=frozenset(request.equipment), focus_areas=tuple(focus_areas), injuries=injuries,
                      duration=duration, preferences=request.preferences, )


def plan_request_from_profile(profile: UserProfile, goal: PlanGoal | None = None,
                              default_days_per_week: int = 3, ) -> PlanRequest:
    """Build a :class:`PlanRequest` from the training preferences stored on
    a user profile.

    Missing profile values fall back to: goal derived from the profile's
    fitness goal, beginner experience, gym equipment, 60-minute sessions.
    """
    return PlanRequest(goal=goal or _PROFILE_GOAL_TO_PLAN_GOAL[profile.fitness_goal],
                       days_per_week=profile.workouts_per_week or default_days_per_week,
                       experience_level=profile.experience_level or Difficulty.BEGINNER,
                       equipment=list(profile.available_equipment) or [Equipment.GYM],
                       focus_areas=list(profile.focus_areas), injuries=list(profile.injuries),
                       duration=profile.preferred_workout_duration or 60,
                       preferences=profile.training_preferences, )

