"""Tests for plan parameter resolution."""

import pytest

from fittrack.catalog import Difficulty, Equipment
from fittrack.planner.config import clamp_days_per_week, plan_request_from_profile, resolve_plan_config, snap_duration
from fittrack.schemas.plan import FocusArea, PlanGoal, PlanRequest, TrainingPreferences
from fittrack.schemas.profile import FitnessGoal, UserProfile


class TestClampDays:
    @pytest.mark.parametrize("days, expected", [(-3, 2), (0, 2), (1, 2), (2, 2), (4, 4), (6, 6), (7, 6), (20, 6)])
    def test_clamped_to_range(self, days, expected):
        assert clamp_days_per_week(days) == expected


class TestSnapDuration:
    @pytest.mark.parametrize(
        "minutes, expected",
        [
            (0, 30),
            (30, 30),
            (37, 30),
            (38, 45),
            (45, 45),
            (52, 45),
            (53, 60),
            (60, 60),
            (75, 60),   # tie resolves to the shorter session
            (76, 90),
            (240, 90),
        ],
    )
    def test_snapped_to_allowed(self, minutes, expected):
        assert snap_duration(minutes) == expected


class TestResolvePlanConfig:
    def test_defaults(self):
        config = resolve_plan_config(PlanRequest())
        assert config.goal == PlanGoal.MUSCLE
        assert config.days_per_week == 3
        assert config.experience_level == Difficulty.BEGINNER
        assert config.equipment == frozenset({Equipment.GYM})
        assert config.focus_areas == ()
        assert config.duration == 60

    def test_out_of_range_values_normalised(self):
        config = resolve_plan_config(PlanRequest(days_per_week=9, duration=100))
        assert config.days_per_week == 6
        assert config.duration == 90

    def test_focus_areas_deduplicated_and_truncated(self):
        request = PlanRequest(focus_areas=[FocusArea.CORE, FocusArea.CORE, FocusArea.ARMS, FocusArea.LEGS,
                                           FocusArea.CHEST])
        config = resolve_plan_config(request)
        assert config.focus_areas == (FocusArea.CORE, FocusArea.ARMS, FocusArea.LEGS)

    def test_injuries_stripped_and_blank_dropped(self):
        config = resolve_plan_config(PlanRequest(injuries=[" Kneproblemer ", "", "  ", "Kneproblemer"]))
        assert config.injuries == frozenset({"Kneproblemer"})

    def test_empty_equipment_passes_through(self):
        config = resolve_plan_config(PlanRequest(equipment=[]))
        assert config.equipment == frozenset()

    def test_preferences_carried(self):
        prefs = TrainingPreferences(prefer_cardio=True)
        assert resolve_plan_config(PlanRequest(preferences=prefs)).preferences.prefer_cardio


class TestPlanRequestFromProfile:
    def test_profile_preferences_used(self):
        profile = UserProfile(height=170, current_weight=70, fitness_goal=FitnessGoal.BUILD_MUSCLE,
                              experience_level=Difficulty.ADVANCED, available_equipment=[Equipment.HOME_FULL],
                              focus_areas=[FocusArea.BACK], injuries=["Skulderproblemer"],
                              preferred_workout_duration=45, workouts_per_week=5, )
        request = plan_request_from_profile(profile)
        assert request.goal == PlanGoal.MUSCLE
        assert request.days_per_week == 5
        assert request.experience_level == Difficulty.ADVANCED
        assert request.equipment == [Equipment.HOME_FULL]
        assert request.focus_areas == [FocusArea.BACK]
        assert request.injuries == ["Skulderproblemer"]
        assert request.duration == 45

    def test_sparse_profile_falls_back(self):
        profile = UserProfile(height=170, current_weight=70, fitness_goal=FitnessGoal.LOSE_WEIGHT)
        request = plan_request_from_profile(profile)
        assert request.goal == PlanGoal.WEIGHTLOSS
        assert request.days_per_week == 3
        assert request.experience_level == Difficulty.BEGINNER
        assert request.equipment == [Equipment.GYM]
        assert request.duration == 60

    def test_explicit_goal_wins(self):
        profile = UserProfile(height=170, current_weight=70, fitness_goal=FitnessGoal.LOSE_WEIGHT)
        assert plan_request_from_profile(profile, goal=PlanGoal.STRENGTH).goal == PlanGoal.STRENGTH
