"""Tests for the sets / reps / rest prescription."""

import pytest

from fittrack.catalog import Difficulty, Equipment, ExerciseCategory, ExerciseDefinition, MuscleGroup
from fittrack.planner.prescription import Prescription, prescribe
from fittrack.schemas.plan import PlanGoal

B = Difficulty.BEGINNER
I = Difficulty.INTERMEDIATE
A = Difficulty.ADVANCED


def _exercise(category: ExerciseCategory) -> ExerciseDefinition:
    return ExerciseDefinition(name=f"Test {category.value}", category=category, equipment=frozenset({Equipment.GYM}),
                              primary_muscles=frozenset({MuscleGroup.CHEST}), )


class TestCompound:
    @pytest.mark.parametrize(
        "goal, experience, expected",
        [
            (PlanGoal.STRENGTH, B, Prescription(3, "4-6", 180)),
            (PlanGoal.STRENGTH, I, Prescription(5, "4-6", 180)),
            (PlanGoal.STRENGTH, A, Prescription(5, "4-6", 180)),
            (PlanGoal.MUSCLE, B, Prescription(2, "8-12", 90)),
            (PlanGoal.MUSCLE, I, Prescription(4, "8-12", 90)),
            (PlanGoal.WEIGHTLOSS, B, Prescription(2, "12-15", 45)),
            (PlanGoal.WEIGHTLOSS, A, Prescription(3, "12-15", 45)),
            (PlanGoal.FITNESS, B, Prescription(2, "10-15", 60)),
            (PlanGoal.FITNESS, I, Prescription(3, "10-15", 60)),
        ],
    )
    def test_table(self, goal, experience, expected):
        assert prescribe(_exercise(ExerciseCategory.COMPOUND), goal, experience, 60) == expected


class TestIsolation:
    @pytest.mark.parametrize(
        "goal, experience, expected",
        [
            (PlanGoal.STRENGTH, B, Prescription(2, "8-12", 180)),
            (PlanGoal.STRENGTH, I, Prescription(4, "8-12", 180)),
            (PlanGoal.MUSCLE, I, Prescription(3, "12-15", 90)),
            (PlanGoal.MUSCLE, B, Prescription(2, "12-15", 90)),
            (PlanGoal.WEIGHTLOSS, A, Prescription(2, "12-15", 45)),
            (PlanGoal.FITNESS, I, Prescription(2, "12-15", 60)),
        ],
    )
    def test_isolation_adjustment(self, goal, experience, expected):
        assert prescribe(_exercise(ExerciseCategory.ISOLATION), goal, experience, 60) == expected

    @pytest.mark.parametrize("goal", list(PlanGoal))
    @pytest.mark.parametrize("experience", list(Difficulty))
    def test_never_below_two_sets(self, goal, experience):
        assert prescribe(_exercise(ExerciseCategory.ISOLATION), goal, experience, 45).sets >= 2


class TestCardio:
    @pytest.mark.parametrize(
        "duration, reps",
        [(30, "10-15 min"), (45, "10-15 min"), (60, "15-20 min"), (90, "15-20 min")],
    )
    def test_time_block_by_session_length(self, duration, reps):
        assert prescribe(_exercise(ExerciseCategory.CARDIO), PlanGoal.STRENGTH, B, duration) == Prescription(1, reps,
                                                                                                              60)

    @pytest.mark.parametrize("goal", list(PlanGoal))
    def test_ignores_goal_and_experience(self, goal):
        assert prescribe(_exercise(ExerciseCategory.CARDIO), goal, A, 60).sets == 1
