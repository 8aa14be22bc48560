"""
Plan assembler — resolved config in, complete :class:`TrainingPlan` out.

The pipeline is filter → split → per-day synthesis.  The assembled plan
is a fresh value: regeneration builds a new one, nothing is patched.
"""

from __future__ import annotations

import datetime
import logging
import random
import uuid
from typing import Iterable, Optional

from fittrack.catalog.exercise_catalog import ExerciseCatalog
from fittrack.catalog.exercise_definition import ExerciseDefinition
from fittrack.planner.day_synthesizer import synthesize_day
from fittrack.planner.exercise_filter import filter_exercises
from fittrack.planner.split_planner import plan_split
from fittrack.schemas.plan import FOCUS_AREA_LABELS, GOAL_LABELS, FocusArea, PlanConfig, PlanGoal, TrainingDay, TrainingPlan

logger = logging.getLogger(__name__)

MAX_FOCUS_LABELS_IN_NAME = 2


def plan_name(goal: PlanGoal, focus_areas: Iterable[FocusArea], days_per_week: int) -> str:
    """``"<goal>[ (<focus, focus> fokus)] - <N>x/uke"``."""
    name = GOAL_LABELS[goal]
    labels = [FOCUS_AREA_LABELS[area] for area in list(focus_areas)[:MAX_FOCUS_LABELS_IN_NAME]]
    if labels:
        name += f" ({', '.join(labels)} fokus)"
    return f"{name} - {days_per_week}x/uke"


def generate_plan(config: PlanConfig, catalog: ExerciseCatalog | Iterable[ExerciseDefinition],
                  rng: Optional[random.Random] = None, now: Optional[datetime.datetime] = None, ) -> TrainingPlan:
    """Generate a training plan.

    Args:
        config: Resolved plan configuration.
        catalog: Exercise catalog to select from.
        rng: Random source; a fresh unseeded one when omitted.
        now: Creation timestamp; current UTC time when omitted.

    Returns:
        :class:`TrainingPlan` with ``days_per_week`` days, each holding at
        least 3 exercises.
    """
    rng = rng or random.Random()
    eligible = filter_exercises(catalog, config.equipment, config.injuries, config.experience_level, rng)
    split = plan_split(config.days_per_week, config.focus_areas, config.preferences, config.goal)

    days = [
        TrainingDay(day_number=index, name=split_day.name, exercises=synthesize_day(split_day, eligible, config, rng))
        for index, split_day in enumerate(split, start=1)
    ]

    plan = TrainingPlan(id=uuid.uuid4().hex, name=plan_name(config.goal, config.focus_areas, config.days_per_week),
                        goal=config.goal, days_per_week=config.days_per_week, days=days,
                        created_at=now or datetime.datetime.now(datetime.timezone.utc), )
    logger.info("Generated plan '%s' (%d days, %d eligible exercises)", plan.name, len(days), len(eligible))
    return plan
