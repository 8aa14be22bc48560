"""Nutrition targets derived from a user profile."""

from fittrack.nutrition.calculator import (
    calculate_age,
    calculate_bmr,
    calculate_macros,
    calculate_target_calories,
    calculate_tdee,
    compute_nutrition_targets,
)

__all__ = [
    "calculate_age",
    "calculate_bmr",
    "calculate_macros",
    "calculate_target_calories",
    "calculate_tdee",
    "compute_nutrition_targets",
]
