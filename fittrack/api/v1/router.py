"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from fittrack.api.v1.endpoints import catalog, nutrition, plans, stats, workouts

api_router = APIRouter()

api_router.include_router(catalog.router, prefix="/catalog", tags=["Exercise catalog"])
api_router.include_router(plans.router, prefix="/users/{user_id}/plans", tags=["Training plans"])
api_router.include_router(workouts.router, prefix="/users/{user_id}/workouts", tags=["Workouts"])
api_router.include_router(stats.router, prefix="/users/{user_id}/stats", tags=["Gamification"])
api_router.include_router(nutrition.router, prefix="/nutrition", tags=["Nutrition"])
