"""What plan would a home-gym user with a bad knee get?

Generates a plan for a sample profile with a fixed seed and prints it
day by day, together with the profile's nutrition targets.

Usage:
    python scripts/simulate_plan.py [seed]
"""

import datetime
import random
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fittrack.catalog import Difficulty, Equipment, default_catalog
from fittrack.nutrition.calculator import compute_nutrition_targets
from fittrack.planner import generate_plan, plan_request_from_profile, resolve_plan_config
from fittrack.schemas.plan import FocusArea, TrainingPreferences
from fittrack.schemas.profile import ActivityLevel, FitnessGoal, Gender, UserProfile

PROFILE = UserProfile(
    name="Demo",
    height=178,
    current_weight=84,
    target_weight=78,
    birth_date=datetime.date(1991, 5, 14),
    gender=Gender.MALE,
    activity_level=ActivityLevel.LIGHT,
    fitness_goal=FitnessGoal.LOSE_WEIGHT,
    experience_level=Difficulty.INTERMEDIATE,
    available_equipment=[Equipment.HOME_BASIC, Equipment.BODYWEIGHT],
    focus_areas=[FocusArea.CORE, FocusArea.GLUTES],
    injuries=["Kneproblemer"],
    preferred_workout_duration=45,
    workouts_per_week=4,
    training_preferences=TrainingPreferences(prefer_cardio=True),
)


def main(seed: int) -> None:
    config = resolve_plan_config(plan_request_from_profile(PROFILE))
    plan = generate_plan(config, default_catalog(), random.Random(seed))

    print("=" * 60)
    print(plan.name)
    print("=" * 60)
    for day in plan.days:
        print(f"\nDag {day.day_number}: {day.name}")
        for exercise in day.exercises:
            print(f"  {exercise.name:<32} {exercise.sets} x {exercise.reps:<10} pause {exercise.rest_seconds}s")

    targets = compute_nutrition_targets(PROFILE)
    print()
    print("-" * 60)
    print(f"BMR {targets.bmr} kcal | TDEE {targets.tdee} kcal | mål {targets.target_calories} kcal")
    print(f"Protein {targets.macros.protein} g | Karbo {targets.macros.carbs} g | Fett {targets.macros.fat} g"
          f" ({targets.protein_per_kg} g/kg)")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 42)
