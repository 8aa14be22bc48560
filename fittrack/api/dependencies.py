"""
Shared API dependencies.

Reusable FastAPI dependencies for the exercise catalog, the planner's
random source and the services.
"""

import random

from fastapi import Depends
from sqlmodel import Session

from fittrack.catalog.exercise_catalog import ExerciseCatalog, default_catalog
from fittrack.core.config import settings
from fittrack.db.session import get_db
from fittrack.services.gamification_service import GamificationService
from fittrack.services.plan_service import TrainingPlanService


def get_catalog() -> ExerciseCatalog:
    return default_catalog()


def get_rng() -> random.Random:
    """A random source per request; seeded when ``PLANNER_RANDOM_SEED`` is set."""
    return random.Random(settings.PLANNER_RANDOM_SEED)


def get_plan_service(db: Session = Depends(get_db), catalog: ExerciseCatalog = Depends(get_catalog),
                     rng: random.Random = Depends(get_rng), ) -> TrainingPlanService:
    return TrainingPlanService(db, catalog=catalog, rng=rng)


def get_gamification_service(db: Session = Depends(get_db)) -> GamificationService:
    return GamificationService(db)
