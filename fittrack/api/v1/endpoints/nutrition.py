"""
Nutrition endpoints.

Stateless: targets are computed from the submitted profile.
"""

from fastapi import APIRouter

from fittrack.nutrition.calculator import compute_nutrition_targets
from fittrack.schemas.nutrition import NutritionTargets, NutritionTargetsRequest

router = APIRouter()


@router.post("/targets", summary="Compute BMR, TDEE, calorie and macro targets.", response_model=NutritionTargets, )
def nutrition_targets(request: NutritionTargetsRequest):
    return compute_nutrition_targets(request.profile, request.custom_calories)
