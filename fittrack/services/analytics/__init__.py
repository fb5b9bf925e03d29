"""
Analytics module - pure aggregation over weight and workout collections.

This module provides:
- Chronological sorting and the weight chart series
- Daily frequency and weekly rollups
- Workout type distribution
- Summary statistics and the recent activity feed
- Merge-on-import
- AnalyticsCalculator binding them to configured windows
"""
from fittrack.services.analytics.calculator import AnalyticsCalculator, Dashboard
from fittrack.services.analytics.distribution import (
    DEFAULT_TYPE_COLOR,
    TYPE_COLORS,
    TypeShare,
    type_distribution,
)
from fittrack.services.analytics.merge import merge_by_id
from fittrack.services.analytics.series import (
    WeightPoint,
    short_date,
    sort_by_date,
    weight_series,
)
from fittrack.services.analytics.summary import (
    ActivityItem,
    WeightChange,
    WeightSummary,
    WorkoutSummary,
    average_duration,
    recent_activity,
    weight_changes,
    weight_summary,
    workout_summary,
)
from fittrack.services.analytics.windows import (
    FrequencyBucket,
    WeekSummary,
    week_start,
    weekly_rollup,
    workout_frequency,
)

__all__ = [
    # Calculator
    "AnalyticsCalculator",
    "Dashboard",
    # Series
    "WeightPoint",
    "short_date",
    "sort_by_date",
    "weight_series",
    # Windows
    "FrequencyBucket",
    "WeekSummary",
    "week_start",
    "weekly_rollup",
    "workout_frequency",
    # Distribution
    "TypeShare",
    "TYPE_COLORS",
    "DEFAULT_TYPE_COLOR",
    "type_distribution",
    # Summary
    "ActivityItem",
    "WeightChange",
    "WeightSummary",
    "WorkoutSummary",
    "average_duration",
    "recent_activity",
    "weight_changes",
    "weight_summary",
    "workout_summary",
    # Merge
    "merge_by_id",
]
