"""
Workout endpoints.

Completing a workout stores it and updates the user's gamification stats.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from fittrack.api.dependencies import get_gamification_service
from fittrack.schemas.gamification import Workout, WorkoutCompletion
from fittrack.services.gamification_service import GamificationService

router = APIRouter()


@router.post("", summary="Complete a workout and award XP.", response_model=WorkoutCompletion,
             status_code=status.HTTP_201_CREATED, )
def complete_workout(user_id: str, workout: Workout,
                     workouts_per_week: Optional[int] = Query(None, ge=1, le=7, description="Weekly target"),
                     service: GamificationService = Depends(get_gamification_service), ):
    return service.complete_workout(user_id, workout, workouts_per_week)


@router.get("", summary="List workouts with optional date range.", response_model=list[Workout], )
def list_workouts(user_id: str, start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                  service: GamificationService = Depends(get_gamification_service), ):
    return service.list_workouts(user_id, start, end)


@router.get("/{workout_id}", summary="Get a workout.", response_model=Workout, )
def get_workout(user_id: str, workout_id: str, service: GamificationService = Depends(get_gamification_service)):
    return service.get_workout(user_id, workout_id)
