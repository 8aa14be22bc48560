"""
Achievement catalogue and requirement checks.

Each achievement unlocks once, when its requirement is met by the running
totals:

- ``workouts`` — total completed workouts,
- ``streak`` — current streak length in days,
- ``volume`` — total kg lifted,
- ``level`` — current level.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from fittrack.schemas.gamification import Achievement, AchievementRequirement, GameStats, RequirementType


def _achievement(achievement_id: str, name: str, description: str, icon: str, xp_reward: int, kind: RequirementType,
                 value: float, ) -> Achievement:
    return Achievement(id=achievement_id, name=name, description=description, icon=icon, xp_reward=xp_reward,
                       requirement=AchievementRequirement(type=kind, value=value), )


W = RequirementType.WORKOUTS
S = RequirementType.STREAK
V = RequirementType.VOLUME
L = RequirementType.LEVEL

ACHIEVEMENTS: tuple[Achievement, ...] = (
    _achievement("first_workout", "Første Steg", "Fullfør din første økt", "🎯", 100, W, 1),
    _achievement("workout_5", "Dedikert", "Fullfør 5 økter", "💪", 250, W, 5),
    _achievement("workout_10", "Vanebygger", "Fullfør 10 økter", "🔥", 500, W, 10),
    _achievement("workout_25", "Treningsmaskin", "Fullfør 25 økter", "⚡", 1000, W, 25),
    _achievement("workout_50", "Jernvilje", "Fullfør 50 økter", "🏆", 2500, W, 50),
    _achievement("workout_100", "Legendarisk", "Fullfør 100 økter", "👑", 5000, W, 100),
    _achievement("streak_3", "På Rulle", "3 dagers streak", "🌟", 150, S, 3),
    _achievement("streak_7", "Ukeskrigeren", "7 dagers streak", "💎", 500, S, 7),
    _achievement("streak_14", "Ustoppelig", "14 dagers streak", "🚀", 1000, S, 14),
    _achievement("streak_30", "Månedsmonster", "30 dagers streak", "🌙", 3000, S, 30),
    _achievement("volume_1000", "Tonneløfter", "Løft 1,000 kg totalt", "🏋️", 200, V, 1000),
    _achievement("volume_10000", "Kraftpakke", "Løft 10,000 kg totalt", "💥", 750, V, 10000),
    _achievement("volume_50000", "Titan", "Løft 50,000 kg totalt", "🗿", 2000, V, 50000),
    _achievement("volume_100000", "Olympier", "Løft 100,000 kg totalt", "🏛️", 5000, V, 100000),
    _achievement("level_5", "Nybegynner", "Nå nivå 5", "⭐", 0, L, 5),
    _achievement("level_10", "Erfaren", "Nå nivå 10", "🌟", 0, L, 10),
    _achievement("level_25", "Mester", "Nå nivå 25", "💫", 0, L, 25),
    _achievement("level_50", "Grandmaster", "Nå nivå 50", "✨", 0, L, 50),
)


def get_achievement(achievement_id: str, catalog: Iterable[Achievement] = ACHIEVEMENTS) -> Optional[Achievement]:
    return next((a for a in catalog if a.id == achievement_id), None)


def _requirement_value(requirement_type: RequirementType, stats: GameStats) -> float:
    if requirement_type == RequirementType.WORKOUTS:
        return stats.total_workouts
    if requirement_type == RequirementType.STREAK:
        return stats.current_streak
    if requirement_type == RequirementType.VOLUME:
        return stats.total_volume_lifted
    return stats.level


def is_satisfied(achievement: Achievement, stats: GameStats) -> bool:
    return _requirement_value(achievement.requirement.type, stats) >= achievement.requirement.value


def evaluate_achievements(stats: GameStats, catalog: Sequence[Achievement] = ACHIEVEMENTS) -> list[Achievement]:
    """Achievements satisfied by *stats* and not yet unlocked, in catalogue order.

    Pure: *stats* is not modified.
    """
    unlocked = set(stats.achievements)
    return [a for a in catalog if a.id not in unlocked and is_satisfied(a, stats)]


def achievement_progress(achievement: Achievement, stats: GameStats) -> float:
    """Percentage (0-100) toward *achievement*.

    Streak progress counts the best streak ever reached, not just the
    current one.
    """
    if achievement.id in stats.achievements:
        return 100.0
    if achievement.requirement.type == RequirementType.STREAK:
        current = max(stats.current_streak, stats.longest_streak)
    else:
        current = _requirement_value(achievement.requirement.type, stats)
    target = achievement.requirement.value
    if target <= 0:
        return 100.0
    return min(100.0, current / target * 100)


def next_achievement(stats: GameStats, catalog: Sequence[Achievement] = ACHIEVEMENTS) -> Optional[Achievement]:
    """First locked achievement in catalogue order, or ``None``."""
    unlocked = set(stats.achievements)
    return next((a for a in catalog if a.id not in unlocked), None)
