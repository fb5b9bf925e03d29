"""
Analytics API endpoints: dashboard numbers and chart-ready series.
"""
from fastapi import APIRouter, Depends, Query

from fittrack.api.deps import get_calculator, get_store
from fittrack.services.analytics import (
    ActivityItem,
    AnalyticsCalculator,
    Dashboard,
    FrequencyBucket,
    TypeShare,
    WeekSummary,
    WeightPoint,
)
from fittrack.services.records import RecordStore

router = APIRouter()


@router.get("/dashboard", response_model=Dashboard)
def dashboard(
    store: RecordStore = Depends(get_store),
    calculator: AnalyticsCalculator = Depends(get_calculator),
):
    """
    Get weight and workout summary statistics plus recent activity.
    """
    return calculator.dashboard(store.load_weights(), store.load_workouts())


@router.get("/recent", response_model=list[ActivityItem])
def recent(
    store: RecordStore = Depends(get_store),
    calculator: AnalyticsCalculator = Depends(get_calculator),
):
    """
    Get the recent activity feed.
    """
    return calculator.recent(store.load_weights(), store.load_workouts())


@router.get("/weight-series", response_model=list[WeightPoint])
def weight_series(
    store: RecordStore = Depends(get_store),
    calculator: AnalyticsCalculator = Depends(get_calculator),
):
    """
    Get the weight chart series, oldest first.
    """
    return calculator.weight_series(store.load_weights())


@router.get("/frequency", response_model=list[FrequencyBucket])
def frequency(
    days: int | None = Query(None, ge=1, le=3650, description="Window length in days"),
    store: RecordStore = Depends(get_store),
    calculator: AnalyticsCalculator = Depends(get_calculator),
):
    """
    Get workouts per day for the last N days.
    """
    return calculator.frequency(store.load_workouts(), days)


@router.get("/types", response_model=list[TypeShare])
def types(
    store: RecordStore = Depends(get_store),
    calculator: AnalyticsCalculator = Depends(get_calculator),
):
    """
    Get the workout type distribution.
    """
    return calculator.types(store.load_workouts())


@router.get("/weekly", response_model=list[WeekSummary])
def weekly(
    store: RecordStore = Depends(get_store),
    calculator: AnalyticsCalculator = Depends(get_calculator),
):
    """
    Get per-week workout totals for the most recent weeks.
    """
    return calculator.weekly(store.load_workouts())
