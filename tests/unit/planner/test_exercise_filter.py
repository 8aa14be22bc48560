"""Tests for the exercise eligibility filter."""

import random

import pytest

from fittrack.catalog import Difficulty, Equipment, ExerciseCatalog, ExerciseCategory, ExerciseDefinition, MuscleGroup
from fittrack.catalog import default_catalog
from fittrack.planner.exercise_filter import filter_exercises, passes_difficulty_gate


class _FixedRandom(random.Random):
    """Random source whose ``random()`` always returns *value*."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def _definition(name: str, difficulty: Difficulty = Difficulty.BEGINNER,
                equipment: frozenset = frozenset({Equipment.GYM}), avoid: frozenset = frozenset(), ):
    return ExerciseDefinition(name=name, category=ExerciseCategory.COMPOUND, equipment=equipment,
                              primary_muscles=frozenset({MuscleGroup.LEGS}), difficulty=difficulty,
                              avoid_with_injuries=avoid, )


def _names(exercises):
    return {e.name for e in exercises}


# ======================================================================
# Equipment / injuries
# ======================================================================


class TestEquipmentAndInjuries:
    def test_bodyweight_only(self):
        eligible = filter_exercises(default_catalog(), {Equipment.BODYWEIGHT}, set(), Difficulty.BEGINNER,
                                    random.Random(1), )
        names = _names(eligible)
        assert "Push-ups" in names
        assert "Benkpress" not in names
        assert all(Equipment.BODYWEIGHT in e.equipment for e in eligible)

    @pytest.mark.parametrize("experience", list(Difficulty))
    @pytest.mark.parametrize("seed", range(5))
    def test_knee_injury_excludes_squats_and_leg_press(self, experience, seed):
        eligible = filter_exercises(default_catalog(), set(Equipment), {"Kneproblemer"}, experience,
                                    random.Random(seed), )
        names = _names(eligible)
        assert "Knebøy" not in names
        assert "Leg press" not in names
        assert all("Kneproblemer" not in e.avoid_with_injuries for e in eligible)

    def test_empty_equipment_yields_nothing(self):
        assert filter_exercises(default_catalog(), set(), set(), Difficulty.ADVANCED, random.Random(1)) == []

    def test_unknown_injury_name_excludes_nothing(self):
        everything = filter_exercises(default_catalog(), set(Equipment), set(), Difficulty.ADVANCED, random.Random(1))
        with_unknown = filter_exercises(default_catalog(), set(Equipment), {"Tennisalbue"}, Difficulty.ADVANCED,
                                        random.Random(1), )
        assert _names(with_unknown) == _names(everything)

    def test_catalog_order_preserved(self):
        catalog = ExerciseCatalog([_definition("B"), _definition("A"), _definition("C")])
        eligible = filter_exercises(catalog, {Equipment.GYM}, set(), Difficulty.BEGINNER, random.Random(1))
        assert [e.name for e in eligible] == ["B", "A", "C"]


# ======================================================================
# Difficulty gate
# ======================================================================


class TestDifficultyGate:
    def test_beginner_never_gets_advanced(self):
        for seed in range(20):
            eligible = filter_exercises(default_catalog(), set(Equipment), set(), Difficulty.BEGINNER,
                                        random.Random(seed), )
            assert all(e.difficulty != Difficulty.ADVANCED for e in eligible)

    def test_advanced_gets_everything(self):
        eligible = filter_exercises(default_catalog(), set(Equipment), set(), Difficulty.ADVANCED, random.Random(1))
        assert len(eligible) == len(default_catalog())

    @pytest.mark.parametrize("value, admitted", [(0.0, True), (0.49, True), (0.5, False), (0.99, False)])
    def test_intermediate_coin_flip(self, value, admitted):
        advanced = _definition("Pistol", Difficulty.ADVANCED)
        assert passes_difficulty_gate(advanced, Difficulty.INTERMEDIATE, _FixedRandom(value)) is admitted

    def test_non_advanced_never_flips_coin(self):
        class _Exploding(random.Random):
            def random(self):
                raise AssertionError("coin flipped")

        for difficulty in (Difficulty.BEGINNER, Difficulty.INTERMEDIATE):
            assert passes_difficulty_gate(_definition("X", difficulty), Difficulty.INTERMEDIATE, _Exploding())

    def test_intermediate_mixes_over_many_draws(self):
        catalog = ExerciseCatalog([_definition("Adv", Difficulty.ADVANCED)])
        rng = random.Random(123)
        admitted = sum(bool(filter_exercises(catalog, {Equipment.GYM}, set(), Difficulty.INTERMEDIATE, rng))
                       for _ in range(400))
        assert 120 < admitted < 280
