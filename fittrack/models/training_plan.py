"""
Training plan database model.

Plans are stored whole: the generated days (with their exercises) live in
a single JSON column, since a plan is only ever replaced, never patched.
"""

import datetime

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class TrainingPlanRecord(SQLModel, table=True):
    __tablename__ = "training_plans"

    id: str = Field(primary_key=True, max_length=32)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    name: str = Field(nullable=False, max_length=200)
    goal: str = Field(nullable=False, max_length=20)
    days_per_week: int = Field(nullable=False)

    # Serialised list[TrainingDay]
    days: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )

    created_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))
