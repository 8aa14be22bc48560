"""
Logged workout database model.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class WorkoutRecord(SQLModel, table=True):
    """A completed workout with its exercises and sets as JSON."""

    __tablename__ = "workouts"

    id: str = Field(primary_key=True, max_length=32)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    name: str = Field(default="", max_length=200)

    # Serialised list[WorkoutExercise]
    exercises: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )

    duration: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)
    xp_earned: Optional[int] = Field(default=None)
    rating: Optional[int] = Field(default=None)
    comment: Optional[str] = Field(default=None, max_length=1000)
    workout_type: Optional[str] = Field(default=None, max_length=20)

    created_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))
