"""
Weight entries API endpoints.
"""
import datetime as dt
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from fittrack.api.deps import get_calculator, get_store
from fittrack.core.exceptions import EntryNotFoundError
from fittrack.core.logging import get_logger
from fittrack.models import WeightEntry
from fittrack.services.analytics import AnalyticsCalculator, WeightChange
from fittrack.services.records import RecordStore

logger = get_logger(__name__)
router = APIRouter()


# ========================================
# Request/Response Schemas
# ========================================

class CreateWeightRequest(BaseModel):
    """Request to log a weight measurement."""
    model_config = ConfigDict(allow_inf_nan=False)

    weight: float = Field(..., gt=0, description="Body weight in kg")
    date: dt.date = Field(..., description="Measurement day (YYYY-MM-DD)")
    notes: Optional[str] = Field(None, description="Free text notes")


class UpdateWeightRequest(BaseModel):
    """Request to edit a weight measurement."""
    model_config = ConfigDict(allow_inf_nan=False)

    weight: float = Field(..., gt=0, description="Body weight in kg")
    notes: Optional[str] = Field(None, description="Free text notes")


# ========================================
# API Endpoints
# ========================================

@router.get("", response_model=list[WeightEntry])
def list_weights(store: RecordStore = Depends(get_store)):
    """
    Get all weight entries, newest first.
    """
    return store.load_weights()


@router.get("/history", response_model=list[WeightChange])
def weight_history(
    store: RecordStore = Depends(get_store),
    calculator: AnalyticsCalculator = Depends(get_calculator),
):
    """
    Get weight entries with the change against the previous measurement.
    """
    return calculator.weight_history(store.load_weights())


@router.post("", response_model=WeightEntry)
def create_weight(
    request: CreateWeightRequest,
    store: RecordStore = Depends(get_store),
):
    """
    Log a new weight measurement.
    """
    entry = store.add_weight(request.weight, request.date, request.notes)
    logger.info("Weight entry created", entry_id=entry.id)
    return entry


@router.put("/{entry_id}", response_model=WeightEntry)
def update_weight(
    entry_id: str,
    request: UpdateWeightRequest,
    store: RecordStore = Depends(get_store),
):
    """
    Edit the weight and notes of a measurement.
    """
    try:
        return store.update_weight(entry_id, request.weight, request.notes)
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Weight entry not found")


@router.delete("/{entry_id}")
def delete_weight(
    entry_id: str,
    store: RecordStore = Depends(get_store),
):
    """
    Delete a weight measurement.
    """
    try:
        store.delete_weight(entry_id)
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Weight entry not found")

    return {"message": "Weight entry deleted"}
