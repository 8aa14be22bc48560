"""
Exercise catalog endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fittrack.api.dependencies import get_catalog
from fittrack.catalog.exercise_catalog import ExerciseCatalog
from fittrack.catalog.exercise_definition import Equipment, ExerciseCategory, ExerciseDefinition, MuscleGroup

router = APIRouter()


@router.get("/exercises", summary="List exercises, optionally filtered.", response_model=list[ExerciseDefinition], )
def list_exercises(category: Optional[ExerciseCategory] = Query(None),
                   equipment: Optional[Equipment] = Query(None, description="Usable with this equipment"),
                   muscle: Optional[MuscleGroup] = Query(None, description="Primary muscle"),
                   catalog: ExerciseCatalog = Depends(get_catalog), ):
    def matches(exercise: ExerciseDefinition) -> bool:
        if category is not None and exercise.category != category:
            return False
        if equipment is not None and not exercise.is_available_with({equipment}):
            return False
        if muscle is not None and not exercise.targets_any({muscle}):
            return False
        return True

    return catalog.filter(matches)


@router.get("/exercises/{name}", summary="Get one exercise by name.", response_model=ExerciseDefinition, )
def get_exercise(name: str, catalog: ExerciseCatalog = Depends(get_catalog)):
    exercise = catalog.get(name)
    if exercise is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return exercise
