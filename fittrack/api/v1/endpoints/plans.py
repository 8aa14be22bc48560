"""
Training plan endpoints.

Generate, list, fetch, regenerate and delete a user's plans.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from fittrack.api.dependencies import get_plan_service
from fittrack.schemas.plan import PlanGoal, PlanRequest, TrainingPlan
from fittrack.schemas.profile import UserProfile
from fittrack.services.plan_service import TrainingPlanService

router = APIRouter()


@router.post("", summary="Generate and store a training plan.", response_model=TrainingPlan,
             status_code=status.HTTP_201_CREATED, )
def create_plan(user_id: str, request: PlanRequest, service: TrainingPlanService = Depends(get_plan_service), ):
    return service.generate(user_id, request)


@router.post("/from-profile", summary="Generate a plan from the training preferences of a profile.",
             response_model=TrainingPlan, status_code=status.HTTP_201_CREATED, )
def create_plan_from_profile(user_id: str, profile: UserProfile, goal: Optional[PlanGoal] = Query(None),
                             service: TrainingPlanService = Depends(get_plan_service), ):
    return service.generate_from_profile(user_id, profile, goal)


@router.get("", summary="List the user's plans, newest first.", response_model=list[TrainingPlan], )
def list_plans(user_id: str, service: TrainingPlanService = Depends(get_plan_service)):
    return service.list_plans(user_id)


@router.get("/{plan_id}", summary="Get a plan.", response_model=TrainingPlan, )
def get_plan(user_id: str, plan_id: str, service: TrainingPlanService = Depends(get_plan_service)):
    return service.get(user_id, plan_id)


@router.post("/{plan_id}/regenerate", summary="Replace a plan with a newly generated one.",
             response_model=TrainingPlan, )
def regenerate_plan(user_id: str, plan_id: str, request: PlanRequest,
                    service: TrainingPlanService = Depends(get_plan_service), ):
    return service.regenerate(user_id, plan_id, request)


@router.delete("/{plan_id}", summary="Delete a plan.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_plan(user_id: str, plan_id: str, service: TrainingPlanService = Depends(get_plan_service)):
    service.delete(user_id, plan_id)
