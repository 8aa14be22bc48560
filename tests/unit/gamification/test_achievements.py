"""Tests for the achievement catalogue and requirement checks."""

import pytest

from fittrack.gamification.achievements import (
    ACHIEVEMENTS,
    achievement_progress,
    evaluate_achievements,
    get_achievement,
    next_achievement,
)
from fittrack.schemas.gamification import GameStats, RequirementType


def _ids(achievements):
    return [a.id for a in achievements]


class TestCatalogue:
    def test_ids_unique(self):
        ids = _ids(ACHIEVEMENTS)
        assert len(ids) == len(set(ids)) == 18

    def test_every_requirement_type_used(self):
        assert {a.requirement.type for a in ACHIEVEMENTS} == set(RequirementType)

    def test_level_achievements_give_no_xp(self):
        levels = [a for a in ACHIEVEMENTS if a.requirement.type == RequirementType.LEVEL]
        assert levels and all(a.xp_reward == 0 for a in levels)

    def test_lookup(self):
        assert get_achievement("first_workout").xp_reward == 100
        assert get_achievement("nope") is None


class TestEvaluate:
    def test_nothing_for_fresh_stats(self):
        assert evaluate_achievements(GameStats()) == []

    def test_first_workout(self):
        assert _ids(evaluate_achievements(GameStats(total_workouts=1))) == ["first_workout"]

    def test_thresholds_inclusive(self):
        stats = GameStats(total_workouts=5, current_streak=3, total_volume_lifted=1000.0, level=5)
        assert _ids(evaluate_achievements(stats)) == ["first_workout", "workout_5", "streak_3", "volume_1000",
                                                      "level_5"]

    def test_already_unlocked_skipped(self):
        stats = GameStats(total_workouts=5, achievements=["first_workout"])
        assert _ids(evaluate_achievements(stats)) == ["workout_5"]

    def test_streak_uses_current_not_longest(self):
        assert evaluate_achievements(GameStats(current_streak=1, longest_streak=30)) == []

    def test_pure(self):
        stats = GameStats(total_workouts=10)
        evaluate_achievements(stats)
        assert stats.achievements == []


class TestProgress:
    @pytest.mark.parametrize(
        "achievement_id, stats, expected",
        [
            ("workout_10", GameStats(total_workouts=5), 50.0),
            ("workout_10", GameStats(total_workouts=25), 100.0),
            ("volume_10000", GameStats(total_volume_lifted=2500.0), 25.0),
            ("streak_7", GameStats(current_streak=1, longest_streak=7), 100.0),
            ("level_10", GameStats(level=4), 40.0),
            ("first_workout", GameStats(achievements=["first_workout"]), 100.0),
        ],
    )
    def test_progress(self, achievement_id, stats, expected):
        assert achievement_progress(get_achievement(achievement_id), stats) == pytest.approx(expected)

    def test_next_achievement_in_catalogue_order(self):
        assert next_achievement(GameStats()).id == "first_workout"
        assert next_achievement(GameStats(achievements=["first_workout"])).id == "workout_5"
        assert next_achievement(GameStats(achievements=_ids(ACHIEVEMENTS))) is None
