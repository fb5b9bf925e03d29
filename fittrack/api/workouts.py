"""
Workout entries API endpoints.
"""
import datetime as dt
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from fittrack.api.deps import get_store
from fittrack.core.exceptions import EntryNotFoundError
from fittrack.core.logging import get_logger
from fittrack.models import (
    EXERCISE_SUGGESTIONS,
    WORKOUT_TYPE_LABELS,
    Exercise,
    WorkoutEntry,
    WorkoutSet,
    WorkoutType,
)
from fittrack.services.records import RecordStore

logger = get_logger(__name__)
router = APIRouter()


# ========================================
# Request/Response Schemas
# ========================================

class ExerciseInput(BaseModel):
    """An exercise as entered in the workout form."""
    name: str = Field("", description="Exercise name")
    sets: list[WorkoutSet] = Field(default=[], description="Sets performed")


class WorkoutRequest(BaseModel):
    """Request to log a workout, or to replace a logged one."""
    type: WorkoutType = Field(..., description="gym, home or kettlebell")
    date: dt.date = Field(..., description="Workout day (YYYY-MM-DD)")
    duration: Optional[int] = Field(None, ge=0, description="Duration in minutes")
    notes: Optional[str] = Field(None, description="Free text notes")
    exercises: list[ExerciseInput] = Field(..., description="Exercises performed")

    def build_exercises(self) -> list[Exercise]:
        return [Exercise.create(item.name, item.sets) for item in self.exercises]


class WorkoutTypeInfo(BaseModel):
    """A workout type with its label and suggested exercises."""
    type: WorkoutType
    label: str
    suggestions: list[str]


# ========================================
# API Endpoints
# ========================================

@router.get("", response_model=list[WorkoutEntry])
def list_workouts(store: RecordStore = Depends(get_store)):
    """
    Get all workouts, newest first.
    """
    return store.load_workouts()


@router.get("/types", response_model=list[WorkoutTypeInfo])
def list_workout_types():
    """
    Get the workout types with their suggested exercises.
    """
    return [
        WorkoutTypeInfo(
            type=workout_type,
            label=WORKOUT_TYPE_LABELS[workout_type],
            suggestions=EXERCISE_SUGGESTIONS[workout_type],
        )
        for workout_type in WorkoutType
    ]


@router.get("/types/{workout_type}/exercises", response_model=list[str])
def exercise_suggestions(workout_type: WorkoutType):
    """
    Get suggested exercise names for a workout type.
    """
    return EXERCISE_SUGGESTIONS[workout_type]


@router.post("", response_model=WorkoutEntry)
def create_workout(
    request: WorkoutRequest,
    store: RecordStore = Depends(get_store),
):
    """
    Log a new workout.
    """
    try:
        workout = store.add_workout(
            workout_type=request.type,
            date=request.date,
            exercises=request.build_exercises(),
            duration=request.duration,
            notes=request.notes,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Workout created", workout_id=workout.id, type=workout.type)
    return workout


@router.put("/{entry_id}", response_model=WorkoutEntry)
def replace_workout(
    entry_id: str,
    request: WorkoutRequest,
    store: RecordStore = Depends(get_store),
):
    """
    Replace a logged workout with a full new version.
    """
    try:
        workout = WorkoutEntry.create(
            workout_type=request.type,
            date=request.date,
            exercises=request.build_exercises(),
            duration=request.duration,
            notes=request.notes,
        ).model_copy(update={"id": entry_id})
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        return store.replace_workout(workout)
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Workout not found")


@router.delete("/{entry_id}")
def delete_workout(
    entry_id: str,
    store: RecordStore = Depends(get_store),
):
    """
    Delete a logged workout.
    """
    try:
        store.delete_workout(entry_id)
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Workout not found")

    return {"message": "Workout deleted"}
