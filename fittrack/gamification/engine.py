"""
Gamification engine — XP, levels, streaks and weekly XP.

Stats are never mutated in place: every operation returns a new
:class:`GameStats`.

Workout completion
------------------

1. ``volume`` = sum of ``weight * reps`` over completed sets.
2. ``xp = 50 + floor(volume * 0.1)``.
3. The streak is recomputed from the full history *including* the
   completed workout's date; ``xp += streak * 25``.
4. Locked achievements are tested against the updated totals and the
   level they imply; each unlock adds its reward to ``xp``.
5. Totals, level, longest streak and weekly XP are updated.

Level is workout-count based: one level per ``workouts_per_level``
completed workouts, where ``workouts_per_level`` is the user's weekly
target clamped to [3, 5] (4 when unknown).
"""

from __future__ import annotations

import datetime
import logging
import math
from typing import Iterable, Optional, Sequence

from fittrack.gamification.achievements import ACHIEVEMENTS, evaluate_achievements
from fittrack.gamification.streak import compute_streak
from fittrack.schemas.gamification import Achievement, GameStats, LevelProgress, Workout, WorkoutCompletion

logger = logging.getLogger(__name__)

XP_PER_WORKOUT = 50
XP_PER_KG = 0.1
XP_STREAK_BONUS = 25

DEFAULT_WORKOUTS_PER_LEVEL = 4
MIN_WORKOUTS_PER_LEVEL = 3
MAX_WORKOUTS_PER_LEVEL = 5

LEVEL_TITLES: dict[int, str] = {
    1: "Nybegynner",
    5: "Treningsentuisiast",
    10: "Dedikert Løfter",
    15: "Styrkebygger",
    20: "Fitnesskriger",
    25: "Jernmester",
    30: "Eliteløfter",
    40: "Treningslegende",
    50: "Grandmaster",
    75: "Udødelig",
    100: "Gud",
}


# ======================================================================
# Volume / levels
# ======================================================================


def workout_volume(workout: Workout) -> float:
    """Total kg moved in *workout*; uncompleted sets do not count."""
    return sum(s.weight * s.reps for exercise in workout.exercises for s in exercise.sets if s.completed)


def workouts_per_level(workouts_per_week: Optional[int] = None) -> int:
    if not workouts_per_week:
        return DEFAULT_WORKOUTS_PER_LEVEL
    return max(MIN_WORKOUTS_PER_LEVEL, min(MAX_WORKOUTS_PER_LEVEL, workouts_per_week))


def calculate_level(total_workouts: int, workouts_per_week: Optional[int] = None) -> int:
    return total_workouts // workouts_per_level(workouts_per_week) + 1


def get_level_title(level: int) -> str:
    """Title of the highest rung at or below *level*."""
    reached = [threshold for threshold in LEVEL_TITLES if threshold <= level]
    return LEVEL_TITLES[max(reached)] if reached else LEVEL_TITLES[1]


def workouts_to_next_level(total_workouts: int, workouts_per_week: Optional[int] = None) -> LevelProgress:
    per_level = workouts_per_level(workouts_per_week)
    level = calculate_level(total_workouts, workouts_per_week)
    current = total_workouts - (level - 1) * per_level
    return LevelProgress(level=level, title=get_level_title(level), current=current, required=per_level,
                         progress=current / per_level * 100, )


# ======================================================================
# Weekly XP
# ======================================================================


def week_start(day: datetime.date) -> datetime.date:
    """Monday of the ISO week containing *day*."""
    return day - datetime.timedelta(days=day.weekday())


def refresh_weekly_xp(stats: GameStats, today: datetime.date) -> GameStats:
    """Reset ``weekly_xp`` when *today* is in a later week than the stored one.

    Lazy: called whenever stats are loaded, no scheduled job.
    """
    monday = week_start(today)
    if stats.week_start_date == monday:
        return stats
    if stats.week_start_date is not None and stats.week_start_date > monday:
        # Stored week is ahead of *today* (clock skew); leave it alone.
        return stats
    logger.debug("Weekly XP reset: %s -> %s (was %d)", stats.week_start_date, monday, stats.weekly_xp)
    return stats.model_copy(update={"weekly_xp": 0, "week_start_date": monday})


# ======================================================================
# Workout completion
# ======================================================================


def compute_workout_completion(workout: Workout, stats: GameStats, history: Iterable[Workout],
                               today: Optional[datetime.date] = None, workouts_per_week: Optional[int] = None,
                               catalog: Sequence[Achievement] = ACHIEVEMENTS, ) -> WorkoutCompletion:
    """Apply one completed workout to the running stats.

    Args:
        workout: The completed workout.
        stats: Stats before this workout.
        history: Previously logged workouts (the completed one may or may
            not be included; dates are de-duplicated).
        today: Reference date for the streak; defaults to the workout date.
        workouts_per_week: User's weekly target, drives the level size.
        catalog: Achievements to evaluate.

    Returns:
        :class:`WorkoutCompletion` with the new stats and award breakdown.
    """
    today = today or workout.date
    stats = refresh_weekly_xp(stats, today)

    volume = workout_volume(workout)
    xp = XP_PER_WORKOUT + math.floor(volume * XP_PER_KG)

    dates = [w.date for w in history]
    dates.append(workout.date)
    streak = compute_streak(dates, today)
    xp += streak * XP_STREAK_BONUS

    total_workouts = stats.total_workouts + 1
    updated = stats.model_copy(update={
        "total_workouts": total_workouts,
        "total_volume_lifted": stats.total_volume_lifted + volume,
        "current_streak": streak,
        "longest_streak": max(stats.longest_streak, streak),
        "level": calculate_level(total_workouts, workouts_per_week),
        "last_workout_date": max(workout.date, stats.last_workout_date or workout.date),
    })

    unlocked = evaluate_achievements(updated, catalog)
    xp += sum(a.xp_reward for a in unlocked)
    if unlocked:
        logger.debug("Achievements unlocked: %s", [a.id for a in unlocked])

    updated = updated.model_copy(update={
        "xp": stats.xp + xp,
        "weekly_xp": stats.weekly_xp + xp,
        "achievements": list(stats.achievements) + [a.id for a in unlocked],
    })
    return WorkoutCompletion(stats=updated, xp_awarded=xp, achievements_unlocked=[a.id for a in unlocked],
                             streak=streak, volume=volume, )
