"""
Workout entry models: WorkoutEntry owns Exercises, which own Sets.
"""
import datetime as dt
from enum import Enum
from typing import Any, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fittrack.models.weight import new_entry_id, utc_now


class WorkoutType(str, Enum):
    """Kinds of workout the user can log."""
    GYM = "gym"
    HOME = "home"
    KETTLEBELL = "kettlebell"


WORKOUT_TYPE_LABELS = {
    WorkoutType.GYM: "Gym Workout",
    WorkoutType.HOME: "Home Workout",
    WorkoutType.KETTLEBELL: "Kettlebell Workout",
}

# Suggested exercise names per workout type
EXERCISE_SUGGESTIONS = {
    WorkoutType.GYM: [
        "Bench Press", "Squat", "Deadlift", "Overhead Press", "Barbell Row",
        "Pull-ups", "Dips", "Lat Pulldown", "Leg Press", "Bicep Curls",
        "Tricep Extensions", "Shoulder Press", "Chest Fly", "Leg Curls",
    ],
    WorkoutType.HOME: [
        "Push-ups", "Squats", "Lunges", "Burpees", "Mountain Climbers",
        "Plank", "Jumping Jacks", "High Knees", "Sit-ups", "Crunches",
        "Wall Sit", "Step-ups", "Glute Bridges", "Pike Push-ups",
    ],
    WorkoutType.KETTLEBELL: [
        "Kettlebell Swing", "Turkish Get-up", "Goblet Squat", "Kettlebell Press",
        "Kettlebell Row", "Kettlebell Deadlift", "Kettlebell Clean",
        "Kettlebell Snatch", "Windmill", "Halo", "Farmer's Walk",
    ],
}


def _blank_to_none(value: Any) -> Any:
    # Form inputs submit untouched numeric fields as ""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class WorkoutSet(BaseModel):
    """
    One set of an exercise. Weight is unused for home workouts.

    Reps are kept as entered: whole numbers become int, anything else
    numeric (such as "8.5") stays a float.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    reps: Optional[Union[int, float]] = None
    weight: Optional[float] = None

    @field_validator("weight", mode="before")
    @classmethod
    def _parse_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("reps", mode="before")
    @classmethod
    def _parse_reps(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class Exercise(BaseModel):
    """An exercise performed within a workout."""

    id: str = Field(..., min_length=1, description="Id scoped to the parent workout")
    name: str = ""
    sets: List[WorkoutSet] = Field(default_factory=list)

    @classmethod
    def create(cls, name: str, sets: Iterable[WorkoutSet] = ()) -> "Exercise":
        return cls(id=new_entry_id(), name=name, sets=list(sets))


class WorkoutEntry(BaseModel):
    """
    A logged workout session.

    `type` is kept as the raw string so that records with a type outside
    WorkoutType survive a load/save cycle unchanged. New workouts must be
    created through `create`, which only accepts a WorkoutType.
    """

    id: str = Field(..., min_length=1, description="Unique entry id")
    type: str = Field(..., min_length=1, description="Workout type")
    date: dt.date = Field(..., description="Day of the workout")
    duration: int = Field(0, ge=0, description="Duration in minutes")
    notes: Optional[str] = None
    exercises: List[Exercise] = Field(default_factory=list)
    timestamp: Optional[dt.datetime] = None

    @field_validator("duration", mode="before")
    @classmethod
    def _default_duration(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        return 0 if value is None else value

    @field_validator("type", mode="before")
    @classmethod
    def _type_value(cls, value: Any) -> Any:
        if isinstance(value, WorkoutType):
            return value.value
        return value

    @property
    def workout_type(self) -> Optional[WorkoutType]:
        """The WorkoutType, or None if the stored type is not a known one."""
        try:
            return WorkoutType(self.type)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return WORKOUT_TYPE_LABELS.get(self.workout_type, "Workout")

    @classmethod
    def create(
        cls,
        workout_type: WorkoutType,
        date: dt.date,
        exercises: Iterable[Exercise],
        duration: Optional[int] = None,
        notes: Optional[str] = None
    ) -> "WorkoutEntry":
        """
        Create a new workout from user input.

        Exercises with a blank name are dropped. Set weights are dropped
        for home workouts.

        Raises:
            ValueError: If the type is unknown or no named exercise remains
        """
        workout_type = WorkoutType(workout_type)

        kept = [ex for ex in exercises if ex.name.strip()]
        if not kept:
            raise ValueError("A workout needs at least one named exercise")

        if workout_type is WorkoutType.HOME:
            kept = [
                ex.model_copy(update={"sets": [WorkoutSet(reps=s.reps) for s in ex.sets]})
                for ex in kept
            ]

        return cls(
            id=new_entry_id(),
            type=workout_type.value,
            date=date,
            duration=duration or 0,
            notes=notes or "",
            exercises=kept,
            timestamp=utc_now(),
        )

    def to_json_dict(self) -> dict:
        """Plain JSON-compatible dict with the on-disk field names."""
        return self.model_dump(mode="json")
