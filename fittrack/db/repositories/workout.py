"""
Workout repository.

Handles database operations for :class:`WorkoutRecord`.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from fittrack.models.workout import WorkoutRecord


class WorkoutRepository:
    """Repository for WorkoutRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WorkoutRecord, commit: bool = True) -> WorkoutRecord:
        self.session.add(entry)
        if commit:
            self.session.commit()
            self.session.refresh(entry)
        return entry

    def get_by_id(self, workout_id: str) -> Optional[WorkoutRecord]:
        return self.session.get(WorkoutRecord, workout_id)

    def list_by_user(self, user_id: str, start: Optional[datetime.date] = None,
                     end: Optional[datetime.date] = None, ) -> list[WorkoutRecord]:
        statement = select(WorkoutRecord).where(WorkoutRecord.user_id == user_id)
        if start is not None:
            statement = statement.where(WorkoutRecord.date >= start)
        if end is not None:
            statement = statement.where(WorkoutRecord.date <= end)
        statement = statement.order_by(WorkoutRecord.date.desc(), WorkoutRecord.created_at.desc())
        return list(self.session.exec(statement).all())
