"""Tests for the nutrition calculator."""

import datetime

import pytest

from fittrack.nutrition.calculator import (
    MACRO_RATIOS,
    calculate_age,
    calculate_bmr,
    calculate_macros,
    calculate_target_calories,
    calculate_tdee,
    compute_nutrition_targets,
    round_half_up,
)
from fittrack.schemas.profile import ActivityLevel, FitnessGoal, Gender, UserProfile

TODAY = datetime.date(2026, 3, 11)


def _profile(**overrides) -> UserProfile:
    data = dict(height=180, current_weight=80, birth_date=datetime.date(1996, 3, 11), gender=Gender.MALE,
                activity_level=ActivityLevel.MODERATE, fitness_goal=FitnessGoal.MAINTAIN, )
    data.update(overrides)
    return UserProfile(**data)


class TestAge:
    @pytest.mark.parametrize(
        "birth_date, expected",
        [
            (datetime.date(1996, 3, 11), 30),
            (datetime.date(1996, 3, 12), 29),
            (datetime.date(1996, 2, 29), 30),
            (datetime.date(2000, 12, 31), 25),
        ],
    )
    def test_birthday_adjustment(self, birth_date, expected):
        assert calculate_age(birth_date, TODAY) == expected

    def test_missing_birth_date_defaults_to_thirty(self):
        assert calculate_age(None, TODAY) == 30


class TestBMR:
    @pytest.mark.parametrize(
        "gender, expected",
        [(Gender.MALE, 1780), (Gender.FEMALE, 1614), (Gender.OTHER, 1780), (None, 1780)],
    )
    def test_mifflin_st_jeor(self, gender, expected):
        assert calculate_bmr(80, 180, 30, gender) == expected

    def test_rounded(self):
        # 10*65.3 + 6.25*167 - 5*41 - 161 = 1330.75
        assert calculate_bmr(65.3, 167, 41, Gender.FEMALE) == 1331

    def test_half_rounds_up(self):
        # 700 + 1062.5 - 155 + 5 = 1612.5
        assert calculate_bmr(70, 170, 31, Gender.MALE) == 1613

    @pytest.mark.parametrize("value, expected", [(0.5, 1), (2.5, 3), (1612.5, 1613), (1330.49, 1330), (-0.5, 0)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestTDEE:
    @pytest.mark.parametrize(
        "activity, expected",
        [
            (ActivityLevel.SEDENTARY, 2160),
            (ActivityLevel.LIGHT, 2475),
            (ActivityLevel.MODERATE, 2790),
            (ActivityLevel.ACTIVE, 3105),
            (ActivityLevel.VERY_ACTIVE, 3420),
        ],
    )
    def test_multipliers(self, activity, expected):
        assert calculate_tdee(1800, activity) == expected


class TestTargets:
    @pytest.mark.parametrize(
        "goal, expected",
        [
            (FitnessGoal.LOSE_WEIGHT, 2259),
            (FitnessGoal.MAINTAIN, 2759),
            (FitnessGoal.BUILD_MUSCLE, 3059),
            (FitnessGoal.IMPROVE_FITNESS, 2759),
        ],
    )
    def test_goal_adjustment(self, goal, expected):
        assert calculate_target_calories(2759, goal) == expected

    def test_custom_calories_replace(self):
        assert calculate_target_calories(2759, FitnessGoal.LOSE_WEIGHT, 1800) == 1800

    def test_macros_maintain(self):
        macros = calculate_macros(2759, FitnessGoal.MAINTAIN)
        assert (macros.protein, macros.carbs, macros.fat) == (207, 276, 92)

    def test_macros_lose_weight(self):
        macros = calculate_macros(2000, FitnessGoal.LOSE_WEIGHT)
        assert (macros.protein, macros.carbs, macros.fat) == (175, 175, 67)

    def test_macros_build_muscle(self):
        macros = calculate_macros(3000, FitnessGoal.BUILD_MUSCLE)
        assert (macros.protein, macros.carbs, macros.fat) == (225, 338, 83)

    def test_macros_half_gram_rounds_up(self):
        # 40 kcal * 0.25 / 4 = 2.5 g protein
        macros = calculate_macros(40, FitnessGoal.IMPROVE_FITNESS)
        assert (macros.protein, macros.carbs, macros.fat) == (3, 5, 1)

    def test_target_never_negative(self):
        assert calculate_target_calories(300, FitnessGoal.LOSE_WEIGHT) == 0


class TestMacroSanity:
    @pytest.mark.parametrize("goal", list(FitnessGoal))
    def test_ratios_sum_to_one(self, goal):
        assert sum(MACRO_RATIOS[goal]) == pytest.approx(1.0)

    @pytest.mark.parametrize("goal", list(FitnessGoal))
    @pytest.mark.parametrize("calories", [-200, 0, 1, 1234, 3500])
    def test_grams_are_non_negative_integers(self, goal, calories):
        macros = calculate_macros(calories, goal)
        for grams in (macros.protein, macros.carbs, macros.fat):
            assert isinstance(grams, int)
            assert grams >= 0


class TestComputeNutritionTargets:
    def test_full_profile(self):
        targets = compute_nutrition_targets(_profile(), today=TODAY)
        assert targets.age == 30
        assert targets.bmr == 1780
        assert targets.tdee == 2759
        assert targets.target_calories == 2759
        assert targets.macros.protein == 207
        assert targets.protein_per_kg == 2.6

    def test_custom_calories_drive_macros(self):
        targets = compute_nutrition_targets(_profile(), custom_calories=2000, today=TODAY)
        assert targets.target_calories == 2000
        assert targets.tdee == 2759
        assert targets.macros.protein == 150

    def test_sparse_profile(self):
        targets = compute_nutrition_targets(UserProfile(height=165, current_weight=60), today=TODAY)
        # 600 + 1031.25 - 150 + 5 = 1486.25
        assert targets.age == 30
        assert targets.bmr == 1486
        assert targets.tdee == round(1486 * 1.55)

    def test_zero_weight_has_no_protein_per_kg(self):
        assert compute_nutrition_targets(_profile(current_weight=0), today=TODAY).protein_per_kg is None

    def test_tiny_profile_losing_weight_gets_zero_targets(self):
        profile = UserProfile(height=50, current_weight=10, gender=Gender.FEMALE,
                              activity_level=ActivityLevel.SEDENTARY, fitness_goal=FitnessGoal.LOSE_WEIGHT, )
        targets = compute_nutrition_targets(profile, today=TODAY)
        # 100 + 312.5 - 150 - 161 = 101.5
        assert targets.bmr == 102
        assert targets.tdee == 122
        assert targets.target_calories == 0
        assert (targets.macros.protein, targets.macros.carbs, targets.macros.fat) == (0, 0, 0)
