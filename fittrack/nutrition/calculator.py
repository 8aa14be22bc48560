"""
Nutrition calculator — BMR, TDEE, calorie target and macro split.

BMR uses Mifflin-St Jeor::

    male:   10 * weight + 6.25 * height - 5 * age + 5
    female: 10 * weight + 6.25 * height - 5 * age - 161

Profiles with gender ``other`` or no gender use the male formula.

Values are rounded half up (``1612.5 -> 1613``), not to even.  Calorie
targets are floored at 0 so very small profiles still get valid macros.

Targets are derived values, recomputed on demand from the profile.
"""

from __future__ import annotations

import datetime
import math
from typing import Optional

from fittrack.schemas.nutrition import Macros, NutritionTargets
from fittrack.schemas.profile import ActivityLevel, FitnessGoal, Gender, UserProfile

DEFAULT_AGE = 30

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

GOAL_CALORIE_ADJUSTMENTS: dict[FitnessGoal, int] = {
    FitnessGoal.LOSE_WEIGHT: -500,
    FitnessGoal.MAINTAIN: 0,
    FitnessGoal.BUILD_MUSCLE: 300,
    FitnessGoal.IMPROVE_FITNESS: 0,
}

# (protein, carbs, fat) fractions of total calories.
MACRO_RATIOS: dict[FitnessGoal, tuple[float, float, float]] = {
    FitnessGoal.LOSE_WEIGHT: (0.35, 0.35, 0.30),
    FitnessGoal.MAINTAIN: (0.30, 0.40, 0.30),
    FitnessGoal.BUILD_MUSCLE: (0.30, 0.45, 0.25),
    FitnessGoal.IMPROVE_FITNESS: (0.25, 0.50, 0.25),
}

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_age(birth_date: Optional[datetime.date], today: Optional[datetime.date] = None) -> int:
    """Age in whole years; :data:`DEFAULT_AGE` when the birth date is unknown."""
    if birth_date is None:
        return DEFAULT_AGE
    today = today or datetime.date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def calculate_bmr(weight: float, height: float, age: int, gender: Optional[Gender]) -> int:
    base = 10 * weight + 6.25 * height - 5 * age
    return round_half_up(base - 161 if gender == Gender.FEMALE else base + 5)


def calculate_tdee(bmr: int, activity_level: ActivityLevel) -> int:
    return round_half_up(bmr * ACTIVITY_MULTIPLIERS[activity_level])


def calculate_target_calories(tdee: int, goal: FitnessGoal, custom_calories: Optional[int] = None) -> int:
    """``tdee`` adjusted for the goal, never below 0; *custom_calories* replaces it when set."""
    if custom_calories is not None:
        return max(0, custom_calories)
    return max(0, tdee + GOAL_CALORIE_ADJUSTMENTS[goal])


def calculate_macros(calories: int, goal: FitnessGoal) -> Macros:
    protein, carbs, fat = MACRO_RATIOS[goal]
    calories = max(0, calories)
    return Macros(protein=round_half_up(calories * protein / KCAL_PER_GRAM_PROTEIN),
                  carbs=round_half_up(calories * carbs / KCAL_PER_GRAM_CARBS),
                  fat=round_half_up(calories * fat / KCAL_PER_GRAM_FAT), )


def compute_nutrition_targets(profile: UserProfile, custom_calories: Optional[int] = None,
                              today: Optional[datetime.date] = None, ) -> NutritionTargets:
    age = calculate_age(profile.birth_date, today)
    bmr = calculate_bmr(profile.current_weight, profile.height, age, profile.gender)
    tdee = calculate_tdee(bmr, profile.activity_level)
    target = calculate_target_calories(tdee, profile.fitness_goal, custom_calories)
    macros = calculate_macros(target, profile.fitness_goal)
    protein_per_kg = round(macros.protein / profile.current_weight, 1) if profile.current_weight > 0 else None
    return NutritionTargets(age=age, bmr=bmr, tdee=tdee, target_calories=target, macros=macros,
                            protein_per_kg=protein_per_kg, )
