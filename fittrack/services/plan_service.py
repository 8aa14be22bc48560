"""
Training plan service.

Resolves the request, runs the generator and stores the result.  Plans
are immutable once stored: regeneration replaces the whole plan (under a
new id) and deletion removes it by id.
"""

import logging
import random
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from fittrack.catalog.exercise_catalog import ExerciseCatalog, default_catalog
from fittrack.db.repositories.training_plan import TrainingPlanRepository
from fittrack.models.training_plan import TrainingPlanRecord
from fittrack.planner.assembler import generate_plan
from fittrack.planner.config import plan_request_from_profile, resolve_plan_config
from fittrack.schemas.plan import PlanGoal, PlanRequest, TrainingPlan
from fittrack.schemas.profile import UserProfile

logger = logging.getLogger(__name__)


class TrainingPlanService:
    """Service for training plan generation and storage."""

    def __init__(self, session: Session, catalog: Optional[ExerciseCatalog] = None,
                 rng: Optional[random.Random] = None, ):
        self.repository = TrainingPlanRepository(session)
        self.catalog = catalog or default_catalog()
        self.rng = rng or random.Random()

    def generate(self, user_id: str, request: PlanRequest) -> TrainingPlan:
        plan = self._build(request)
        entry = self.repository.create(self._to_record(user_id, plan))
        logger.info("Stored plan %s for user %s", entry.id, user_id)
        return self._to_response(entry)

    def generate_from_profile(self, user_id: str, profile: UserProfile, goal: Optional[PlanGoal] = None, ) -> TrainingPlan:
        return self.generate(user_id, plan_request_from_profile(profile, goal))

    def list_plans(self, user_id: str) -> list[TrainingPlan]:
        return [self._to_response(e) for e in self.repository.list_by_user(user_id)]

    def get(self, user_id: str, plan_id: str) -> TrainingPlan:
        return self._to_response(self._get_owned_entry(user_id, plan_id))

    def regenerate(self, user_id: str, plan_id: str, request: PlanRequest) -> TrainingPlan:
        """Replace plan *plan_id* with a freshly generated one."""
        old = self._get_owned_entry(user_id, plan_id)
        plan = self._build(request)
        entry = self.repository.replace(old, self._to_record(user_id, plan))
        logger.info("Regenerated plan %s -> %s for user %s", plan_id, entry.id, user_id)
        return self._to_response(entry)

    def delete(self, user_id: str, plan_id: str) -> None:
        self._get_owned_entry(user_id, plan_id)
        self.repository.delete(plan_id)
        logger.info("Deleted plan %s for user %s", plan_id, user_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _build(self, request: PlanRequest) -> TrainingPlan:
        config = resolve_plan_config(request)
        return generate_plan(config, self.catalog, self.rng)

    def _get_owned_entry(self, user_id: str, plan_id: str) -> TrainingPlanRecord:
        entry = self.repository.get_by_id(plan_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training plan not found", )
        return entry

    @staticmethod
    def _to_record(user_id: str, plan: TrainingPlan) -> TrainingPlanRecord:
        return TrainingPlanRecord(id=plan.id, user_id=user_id, name=plan.name, goal=plan.goal.value,
                                  days_per_week=plan.days_per_week,
                                  days=[day.model_dump(mode="json") for day in plan.days],
                                  created_at=plan.created_at, )

    @staticmethod
    def _to_response(entry: TrainingPlanRecord) -> TrainingPlan:
        return TrainingPlan.model_validate(entry)
