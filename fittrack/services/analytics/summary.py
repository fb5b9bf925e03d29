"""
Summary statistics for the dashboard and statistics panels.
"""
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Sequence

from fittrack.models import WeightEntry, WorkoutEntry
from fittrack.services.analytics.series import sort_by_date


@dataclass
class WeightSummary:
    """Headline weight numbers. Values are None when there are no entries."""
    count: int = 0
    latest: Optional[float] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    change: float = 0.0  # latest minus the previous entry
    total_change: float = 0.0  # latest minus the earliest entry


@dataclass
class WorkoutSummary:
    """Headline workout numbers."""
    total: int = 0
    this_week: int = 0
    average_duration: float = 0.0
    total_exercises: int = 0
    total_hours: int = 0


@dataclass
class WeightChange:
    """A weight entry with its change against the next older entry."""
    entry: WeightEntry
    change: Optional[float]


@dataclass
class ActivityItem:
    """One line of the recent activity feed."""
    kind: str  # weight or workout
    entry_id: str
    date: date
    description: str


def weight_summary(entries: Sequence[WeightEntry]) -> WeightSummary:
    if not entries:
        return WeightSummary()

    newest_first = sort_by_date(entries, descending=True)
    latest = newest_first[0].weight
    previous = newest_first[1].weight if len(newest_first) > 1 else latest
    weights = [entry.weight for entry in entries]

    return WeightSummary(
        count=len(entries),
        latest=latest,
        minimum=min(weights),
        maximum=max(weights),
        change=round(latest - previous, 2),
        total_change=round(latest - newest_first[-1].weight, 2),
    )


def average_duration(workouts: Sequence[WorkoutEntry]) -> float:
    """Mean duration in minutes; 0 for no workouts."""
    if not workouts:
        return 0.0
    return sum(workout.duration or 0 for workout in workouts) / len(workouts)


def workout_summary(
    workouts: Sequence[WorkoutEntry],
    today: date,
    recent_days: int = 7
) -> WorkoutSummary:
    """
    Args:
        workouts: Workout collection
        today: Reference day for the recent window
        recent_days: Workouts dated on or after today - recent_days count as this week
    """
    since = today - timedelta(days=recent_days)
    total_minutes = sum(workout.duration or 0 for workout in workouts)

    return WorkoutSummary(
        total=len(workouts),
        this_week=sum(1 for workout in workouts if workout.date >= since),
        average_duration=average_duration(workouts),
        total_exercises=sum(len(workout.exercises) for workout in workouts),
        total_hours=math.floor(total_minutes / 60 + 0.5),
    )


def weight_changes(entries: Sequence[WeightEntry]) -> List[WeightChange]:
    """Entries newest first, each with the difference to the one before it."""
    newest_first = sort_by_date(entries, descending=True)
    changes = []
    for index, entry in enumerate(newest_first):
        if index + 1 < len(newest_first):
            change = round(entry.weight - newest_first[index + 1].weight, 2)
        else:
            change = None
        changes.append(WeightChange(entry=entry, change=change))
    return changes


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}" if n == 1 else f"{n} {noun}s"


def recent_activity(
    weights: Sequence[WeightEntry],
    workouts: Sequence[WorkoutEntry],
    per_kind: int = 3,
    limit: int = 5
) -> List[ActivityItem]:
    """Most recent weight and workout entries merged into one feed, newest first."""
    items = [
        ActivityItem(
            kind="weight",
            entry_id=entry.id,
            date=entry.date,
            description=f"Weight: {entry.weight:g} kg",
        )
        for entry in sort_by_date(weights, descending=True)[:per_kind]
    ]
    items.extend(
        ActivityItem(
            kind="workout",
            entry_id=workout.id,
            date=workout.date,
            description=f"{workout.type} workout - {_count(len(workout.exercises), 'exercise')}",
        )
        for workout in sort_by_date(workouts, descending=True)[:per_kind]
    )

    return sort_by_date(items, descending=True)[:limit]
