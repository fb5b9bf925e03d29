"""
Analytics Calculator - entry point for all derived views of the data.

Binds the pure aggregation functions to the configured window sizes
and a clock, so callers only hand over the record collections.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional, Sequence

from fittrack.core.config import settings
from fittrack.core.logging import get_logger
from fittrack.models import WeightEntry, WorkoutEntry
from fittrack.services.analytics.distribution import TypeShare, type_distribution
from fittrack.services.analytics.series import WeightPoint, weight_series
from fittrack.services.analytics.summary import (
    ActivityItem,
    WeightChange,
    WeightSummary,
    WorkoutSummary,
    recent_activity,
    weight_changes,
    weight_summary,
    workout_summary,
)
from fittrack.services.analytics.windows import (
    FrequencyBucket,
    WeekSummary,
    weekly_rollup,
    workout_frequency,
)

logger = get_logger(__name__)


@dataclass
class Dashboard:
    """Everything the dashboard view shows."""
    weight: WeightSummary
    workouts: WorkoutSummary
    recent_activity: List[ActivityItem] = field(default_factory=list)


class AnalyticsCalculator:
    """
    Usage:
        calculator = AnalyticsCalculator()
        dashboard = calculator.dashboard(weights, workouts)
        buckets = calculator.frequency(workouts)
    """

    def __init__(
        self,
        frequency_days: Optional[int] = None,
        rollup_weeks: Optional[int] = None,
        recent_days: Optional[int] = None,
        clock: Callable[[], date] = date.today
    ):
        self.frequency_days = frequency_days if frequency_days is not None else settings.FREQUENCY_WINDOW_DAYS
        self.rollup_weeks = rollup_weeks if rollup_weeks is not None else settings.WEEKLY_ROLLUP_WEEKS
        self.recent_days = recent_days if recent_days is not None else settings.RECENT_WINDOW_DAYS
        self._clock = clock

    def today(self) -> date:
        return self._clock()

    def dashboard(
        self,
        weights: Sequence[WeightEntry],
        workouts: Sequence[WorkoutEntry]
    ) -> Dashboard:
        logger.debug("Computing dashboard", weights=len(weights), workouts=len(workouts))
        return Dashboard(
            weight=weight_summary(weights),
            workouts=workout_summary(workouts, self.today(), self.recent_days),
            recent_activity=self.recent(weights, workouts),
        )

    def weight_series(self, weights: Sequence[WeightEntry]) -> List[WeightPoint]:
        return list(weight_series(weights))

    def weight_history(self, weights: Sequence[WeightEntry]) -> List[WeightChange]:
        return weight_changes(weights)

    def frequency(
        self,
        workouts: Sequence[WorkoutEntry],
        days: Optional[int] = None
    ) -> List[FrequencyBucket]:
        if days is None:
            days = self.frequency_days
        return workout_frequency(workouts, days, self.today())

    def types(self, workouts: Sequence[WorkoutEntry]) -> List[TypeShare]:
        return type_distribution(workouts)

    def weekly(self, workouts: Sequence[WorkoutEntry]) -> List[WeekSummary]:
        return weekly_rollup(workouts, self.rollup_weeks)

    def recent(
        self,
        weights: Sequence[WeightEntry],
        workouts: Sequence[WorkoutEntry]
    ) -> List[ActivityItem]:
        return recent_activity(weights, workouts)
