"""
Training plan repository.

Handles database operations for :class:`TrainingPlanRecord`.
"""

from typing import Optional

from sqlmodel import Session, select

from fittrack.models.training_plan import TrainingPlanRecord


class TrainingPlanRepository:
    """Repository for TrainingPlanRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: TrainingPlanRecord) -> TrainingPlanRecord:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, plan_id: str) -> Optional[TrainingPlanRecord]:
        return self.session.get(TrainingPlanRecord, plan_id)

    def list_by_user(self, user_id: str) -> list[TrainingPlanRecord]:
        statement = (select(TrainingPlanRecord).where(TrainingPlanRecord.user_id == user_id)
                     .order_by(TrainingPlanRecord.created_at.desc()))
        return list(self.session.exec(statement).all())

    def replace(self, old: TrainingPlanRecord, new: TrainingPlanRecord) -> TrainingPlanRecord:
        """Delete *old* and insert *new* in one transaction."""
        self.session.delete(old)
        self.session.add(new)
        self.session.commit()
        self.session.refresh(new)
        return new

    def delete(self, plan_id: str) -> bool:
        entry = self.get_by_id(plan_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
