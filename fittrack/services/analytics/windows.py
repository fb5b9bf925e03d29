"""
Date-window rollups over workouts: daily frequency and weekly summaries.
"""
from collections import Counter
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterable, List

from fittrack.models import WorkoutEntry
from fittrack.services.analytics.series import short_date


@dataclass
class FrequencyBucket:
    """Workout count for one calendar day."""
    date: date
    label: str
    workouts: int


@dataclass
class WeekSummary:
    """Totals for one Sunday-started week."""
    week_start: date
    label: str
    workouts: int = 0
    total_exercises: int = 0
    total_duration: int = 0


def workout_frequency(
    workouts: Iterable[WorkoutEntry],
    days: int,
    today: date
) -> List[FrequencyBucket]:
    """
    Count workouts per day over the last `days` days, oldest first.

    Always returns exactly `days` buckets ending at `today`; days without
    workouts have a count of 0.
    """
    counts = Counter(workout.date for workout in workouts)

    buckets = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        buckets.append(FrequencyBucket(date=day, label=short_date(day), workouts=counts.get(day, 0)))
    return buckets


def week_start(day: date) -> date:
    """The Sunday on or before `day`."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def weekly_rollup(workouts: Iterable[WorkoutEntry], weeks: int) -> List[WeekSummary]:
    """
    Group workouts by week and keep the most recent `weeks` weeks that
    have data, oldest first.
    """
    if weeks <= 0:
        return []

    by_week: Dict[date, WeekSummary] = {}
    for workout in workouts:
        start = week_start(workout.date)
        summary = by_week.get(start)
        if summary is None:
            summary = WeekSummary(week_start=start, label=short_date(start))
            by_week[start] = summary

        summary.workouts += 1
        summary.total_exercises += len(workout.exercises)
        summary.total_duration += workout.duration or 0

    ordered = [by_week[start] for start in sorted(by_week)]
    return ordered[-weeks:]
