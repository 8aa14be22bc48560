"""
Nutrition target schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field

from fittrack.schemas.profile import UserProfile


class Macros(BaseModel):
    """Daily macronutrient targets in grams."""

    protein: int = Field(..., ge=0)
    carbs: int = Field(..., ge=0)
    fat: int = Field(..., ge=0)


class NutritionTargets(BaseModel):
    """Derived daily targets.  Recomputed on demand, never authoritative."""

    age: int
    bmr: int
    tdee: int
    target_calories: int
    macros: Macros
    protein_per_kg: Optional[float] = Field(None, description="Protein grams per kg bodyweight")


class NutritionTargetsRequest(BaseModel):
    profile: UserProfile
    custom_calories: Optional[int] = Field(
        None, ge=0, description="Replaces the computed calorie target when set",
    )
