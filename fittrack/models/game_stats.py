"""
Per-user gamification stats.

One row per user, keyed by ``user_id``.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class GameStatsRecord(SQLModel, table=True):
    __tablename__ = "game_stats"

    user_id: str = Field(primary_key=True, max_length=64)

    xp: int = Field(default=0, nullable=False)
    level: int = Field(default=1, nullable=False)
    current_streak: int = Field(default=0, nullable=False)
    longest_streak: int = Field(default=0, nullable=False)
    last_workout_date: Optional[datetime.date] = Field(default=None)
    total_workouts: int = Field(default=0, nullable=False)
    total_volume_lifted: float = Field(default=0.0, nullable=False)

    # Unlocked achievement ids, append-only
    achievements: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )

    weekly_xp: int = Field(default=0, nullable=False)
    week_start_date: Optional[datetime.date] = Field(default=None)

    updated_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))
