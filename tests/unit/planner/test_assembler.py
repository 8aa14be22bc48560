"""End-to-end tests for plan generation."""

import datetime
import itertools
import random

import pytest

from fittrack.catalog import Difficulty, Equipment, default_catalog
from fittrack.planner import generate_plan, plan_name, resolve_plan_config
from fittrack.planner.day_synthesizer import max_exercises_for
from fittrack.schemas.plan import FocusArea, PlanGoal, PlanRequest, TrainingPreferences

ALL_INJURIES = ["Kneproblemer", "Skulderproblemer", "Ryggproblemer", "Håndleddsproblemer"]


def _generate(seed: int = 1, **request):
    config = resolve_plan_config(PlanRequest(**request))
    return config, generate_plan(config, default_catalog(), random.Random(seed))


class TestPlanName:
    @pytest.mark.parametrize(
        "goal, focus, days, expected",
        [
            (PlanGoal.STRENGTH, [], 3, "Styrke - 3x/uke"),
            (PlanGoal.MUSCLE, [FocusArea.ARMS], 4, "Muskelvekst (Armer fokus) - 4x/uke"),
            (PlanGoal.WEIGHTLOSS, [FocusArea.CORE, FocusArea.GLUTES], 5, "Vekttap (Mage/Core, Rumpe fokus) - 5x/uke"),
            (PlanGoal.FITNESS, [FocusArea.CHEST, FocusArea.BACK, FocusArea.LEGS], 6,
             "Kondisjon (Bryst, Rygg fokus) - 6x/uke"),
        ],
    )
    def test_name_pattern(self, goal, focus, days, expected):
        assert plan_name(goal, focus, days) == expected


class TestGeneratePlan:
    def test_days_numbered_in_order(self):
        _, plan = _generate(days_per_week=5)
        assert [d.day_number for d in plan.days] == [1, 2, 3, 4, 5]
        assert plan.days_per_week == 5

    def test_plan_metadata(self):
        now = datetime.datetime(2026, 3, 2, 8, 0, tzinfo=datetime.timezone.utc)
        config = resolve_plan_config(PlanRequest(goal=PlanGoal.STRENGTH, days_per_week=3))
        plan = generate_plan(config, default_catalog(), random.Random(1), now=now)
        assert plan.created_at == now
        assert plan.goal == PlanGoal.STRENGTH
        assert plan.name == "Styrke - 3x/uke"
        assert len(plan.id) == 32

    def test_fresh_id_per_generation(self):
        _, first = _generate()
        _, second = _generate()
        assert first.id != second.id

    def test_same_seed_same_days(self):
        _, first = _generate(seed=7, days_per_week=4, experience_level=Difficulty.INTERMEDIATE)
        _, second = _generate(seed=7, days_per_week=4, experience_level=Difficulty.INTERMEDIATE)
        assert first.days == second.days

    def test_bodyweight_plan(self):
        _, plan = _generate(equipment=[Equipment.BODYWEIGHT], days_per_week=3)
        names = {e.name for d in plan.days for e in d.exercises}
        assert "Benkpress" not in names

    def test_empty_equipment_degrades_to_fallback(self):
        _, plan = _generate(equipment=[], days_per_week=4)
        for day in plan.days:
            assert [e.name for e in day.exercises] == ["Push-ups", "Bodyweight squats", "Plank"]

    def test_thirty_minute_weightloss_budget(self):
        _, plan = _generate(goal=PlanGoal.WEIGHTLOSS, duration=30, days_per_week=6,
                            equipment=list(Equipment), experience_level=Difficulty.ADVANCED, )
        assert all(len(d.exercises) <= 6 for d in plan.days)


class TestPlanInvariants:
    """Invariants over a grid of configurations and seeds."""

    CASES = list(itertools.product(
        range(2, 7),
        list(PlanGoal),
        [30, 60, 90],
        [[Equipment.GYM], [Equipment.BODYWEIGHT], [Equipment.HOME_BASIC, Equipment.BODYWEIGHT]],
    ))

    @pytest.mark.parametrize("days, goal, duration, equipment", CASES)
    def test_invariants(self, days, goal, duration, equipment):
        for seed in range(3):
            config, plan = _generate(seed=seed, days_per_week=days, goal=goal, duration=duration,
                                     equipment=equipment, experience_level=Difficulty.INTERMEDIATE,
                                     focus_areas=[FocusArea.CORE] if seed % 2 else [],
                                     preferences=TrainingPreferences(prefer_cardio=bool(seed % 2)), )
            assert len(plan.days) == days
            budget = max_exercises_for(config.duration, config.goal)
            for day in plan.days:
                names = [e.name for e in day.exercises]
                assert len(names) >= 3
                assert len(names) <= budget
                assert len(names) == len(set(names))

    @pytest.mark.parametrize("seed", range(10))
    def test_knee_injury_respected(self, seed):
        _, plan = _generate(seed=seed, days_per_week=6, equipment=list(Equipment), injuries=["Kneproblemer"],
                            experience_level=Difficulty.ADVANCED, )
        names = {e.name for d in plan.days for e in d.exercises}
        assert "Knebøy" not in names
        assert "Leg press" not in names

    @pytest.mark.parametrize("seed", range(5))
    def test_maximally_restricted_days_still_have_three(self, seed):
        _, plan = _generate(seed=seed, days_per_week=6, equipment=[Equipment.BODYWEIGHT], injuries=ALL_INJURIES,
                            goal=PlanGoal.STRENGTH, duration=30, )
        assert all(len(d.exercises) >= 3 for d in plan.days)

    @pytest.mark.parametrize("seed", range(30))
    def test_maximally_restricted_days_respect_every_injury(self, seed):
        _, plan = _generate(seed=seed, days_per_week=6, equipment=[Equipment.BODYWEIGHT], injuries=ALL_INJURIES,
                            goal=PlanGoal.STRENGTH, duration=30, )
        catalog = default_catalog()
        for day in plan.days:
            for exercise in day.exercises:
                assert catalog.get(exercise.name).is_safe_for(frozenset(ALL_INJURIES))

    @pytest.mark.parametrize("seed", range(5))
    def test_beginner_plans_have_no_advanced_exercises(self, seed):
        _, plan = _generate(seed=seed, days_per_week=5, equipment=list(Equipment))
        catalog = default_catalog()
        for day in plan.days:
            for exercise in day.exercises:
                definition = catalog.get(exercise.name)
                assert definition is None or definition.difficulty != Difficulty.ADVANCED
