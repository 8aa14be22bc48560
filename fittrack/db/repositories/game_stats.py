"""
Game stats repository.

Handles database operations for :class:`GameStatsRecord`.
"""

from typing import Optional

from sqlmodel import Session

from fittrack.models.game_stats import GameStatsRecord


class GameStatsRepository:
    """Repository for GameStatsRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: str) -> Optional[GameStatsRecord]:
        return self.session.get(GameStatsRecord, user_id)

    def save(self, entry: GameStatsRecord) -> GameStatsRecord:
        """Insert or update *entry* and commit."""
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry
