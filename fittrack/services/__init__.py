"""Business logic services."""

from fittrack.services.gamification_service import GamificationService
from fittrack.services.plan_service import TrainingPlanService

__all__ = [
    "GamificationService",
    "TrainingPlanService",
]
