"""
Gamification stats endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from fittrack.api.dependencies import get_gamification_service
from fittrack.schemas.gamification import AchievementStatus, GameStats, LevelProgress
from fittrack.services.gamification_service import GamificationService

router = APIRouter()


@router.get("", summary="Current stats (weekly XP reset applied).", response_model=GameStats, )
def get_stats(user_id: str, service: GamificationService = Depends(get_gamification_service)):
    return service.get_stats(user_id)


@router.get("/level", summary="Progress inside the current level.", response_model=LevelProgress, )
def get_level_progress(user_id: str, workouts_per_week: Optional[int] = Query(None, ge=1, le=7),
                       service: GamificationService = Depends(get_gamification_service), ):
    return service.level_progress(user_id, workouts_per_week)


@router.get("/achievements", summary="All achievements with unlock state and progress.",
            response_model=list[AchievementStatus], )
def get_achievements(user_id: str, service: GamificationService = Depends(get_gamification_service)):
    return service.achievements(user_id)
