"""
Workout type distribution.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List

from fittrack.models import WorkoutEntry, WorkoutType

TYPE_COLORS = {
    WorkoutType.GYM.value: "#3b82f6",
    WorkoutType.HOME.value: "#10b981",
    WorkoutType.KETTLEBELL.value: "#f59e0b",
}
DEFAULT_TYPE_COLOR = "#64748b"


@dataclass
class TypeShare:
    """Number of workouts of one type."""
    type: str
    name: str
    value: int
    color: str


def _display_name(workout_type: str) -> str:
    return workout_type[:1].upper() + workout_type[1:]


def type_distribution(workouts: Iterable[WorkoutEntry]) -> List[TypeShare]:
    """
    Count workouts per type, in the order each type first appears.

    Types outside WorkoutType are kept verbatim with the default colour.
    """
    counts: Dict[str, int] = {}
    for workout in workouts:
        counts[workout.type] = counts.get(workout.type, 0) + 1

    return [
        TypeShare(
            type=workout_type,
            name=_display_name(workout_type),
            value=count,
            color=TYPE_COLORS.get(workout_type, DEFAULT_TYPE_COLOR),
        )
        for workout_type, count in counts.items()
    ]
