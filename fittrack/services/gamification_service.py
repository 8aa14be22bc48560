"""
Gamification service.

Loads and stores per-user :class:`GameStats`, applying the lazy weekly XP
reset on every read, and records completed workouts together with the
stats update they cause.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from fittrack.core.config import settings
from fittrack.db.repositories.game_stats import GameStatsRepository
from fittrack.db.repositories.workout import WorkoutRepository
from fittrack.gamification.achievements import ACHIEVEMENTS, achievement_progress
from fittrack.gamification.engine import compute_workout_completion, refresh_weekly_xp, workouts_to_next_level
from fittrack.models.game_stats import GameStatsRecord
from fittrack.models.workout import WorkoutRecord
from fittrack.schemas.gamification import AchievementStatus, GameStats, LevelProgress, Workout, WorkoutCompletion

logger = logging.getLogger(__name__)


class GamificationService:
    """Service for workout logging and gamification stats."""

    def __init__(self, session: Session):
        self.session = session
        self.stats_repository = GameStatsRepository(session)
        self.workout_repository = WorkoutRepository(session)

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------

    def get_stats(self, user_id: str, today: Optional[datetime.date] = None) -> GameStats:
        """Current stats, created with defaults on first access."""
        today = today or datetime.date.today()
        record = self._get_or_create_record(user_id)
        stats = GameStats.model_validate(record)
        refreshed = refresh_weekly_xp(stats, today)
        if refreshed != stats:
            self._apply(record, refreshed)
            self.stats_repository.save(record)
        return refreshed

    def level_progress(self, user_id: str, workouts_per_week: Optional[int] = None) -> LevelProgress:
        stats = self.get_stats(user_id)
        return workouts_to_next_level(stats.total_workouts, workouts_per_week or settings.DEFAULT_WORKOUTS_PER_WEEK)

    def achievements(self, user_id: str) -> list[AchievementStatus]:
        stats = self.get_stats(user_id)
        return [AchievementStatus(achievement=a, unlocked=a.id in stats.achievements,
                                  progress=achievement_progress(a, stats), ) for a in ACHIEVEMENTS]

    # ------------------------------------------------------------------
    # Workouts
    # ------------------------------------------------------------------

    def complete_workout(self, user_id: str, workout: Workout, workouts_per_week: Optional[int] = None,
                         today: Optional[datetime.date] = None, ) -> WorkoutCompletion:
        """Store *workout* and apply it to the user's stats in one commit."""
        if self.workout_repository.get_by_id(workout.id) is not None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Workout already recorded", )

        today = today or datetime.date.today()
        record = self._get_or_create_record(user_id)
        stats = GameStats.model_validate(record)
        history = [Workout.model_validate(w) for w in self.workout_repository.list_by_user(user_id)]

        completion = compute_workout_completion(workout, stats, history, today=today,
                                                workouts_per_week=workouts_per_week or settings.DEFAULT_WORKOUTS_PER_WEEK, )

        stored = workout.model_copy(update={"xp_earned": completion.xp_awarded})
        self.workout_repository.create(self._to_workout_record(user_id, stored), commit=False)
        self._apply(record, completion.stats)
        self.stats_repository.save(record)

        logger.info("User %s completed workout %s: +%d XP, streak %d, unlocked %s", user_id, workout.id,
                    completion.xp_awarded, completion.streak, completion.achievements_unlocked, )
        return completion

    def list_workouts(self, user_id: str, start: Optional[datetime.date] = None,
                      end: Optional[datetime.date] = None, ) -> list[Workout]:
        return [Workout.model_validate(w) for w in self.workout_repository.list_by_user(user_id, start, end)]

    def get_workout(self, user_id: str, workout_id: str) -> Workout:
        entry = self.workout_repository.get_by_id(workout_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found", )
        return Workout.model_validate(entry)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_create_record(self, user_id: str) -> GameStatsRecord:
        record = self.stats_repository.get(user_id)
        if record is None:
            record = GameStatsRecord(user_id=user_id)
        return record

    @staticmethod
    def _apply(record: GameStatsRecord, stats: GameStats) -> None:
        for field, value in stats.model_dump().items():
            setattr(record, field, value)
        record.updated_at = datetime.datetime.now(datetime.timezone.utc)

    @staticmethod
    def _to_workout_record(user_id: str, workout: Workout) -> WorkoutRecord:
        data = workout.model_dump(mode="json", exclude={"exercises", "date"})
        return WorkoutRecord(**data, user_id=user_id, date=workout.date,
                             exercises=[e.model_dump(mode="json") for e in workout.exercises], )
