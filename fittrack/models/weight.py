"""
Weight entry model.
"""
import datetime as dt
import math
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def new_entry_id() -> str:
    """Opaque unique id for a newly created entry."""
    return str(uuid.uuid4())


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class WeightEntry(BaseModel):
    """A single body-weight measurement in kilograms."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str = Field(..., min_length=1, description="Unique entry id")
    weight: float = Field(..., description="Body weight in kg")
    date: dt.date = Field(..., description="Day the measurement applies to")
    notes: Optional[str] = Field(None, description="Free text notes")
    timestamp: Optional[dt.datetime] = Field(None, description="Creation instant")

    @classmethod
    def create(
        cls,
        weight: float,
        date: dt.date,
        notes: Optional[str] = None
    ) -> "WeightEntry":
        """
        Create a new entry from user input.

        Raises:
            ValueError: If the weight is not a positive finite number
        """
        if weight is None or not math.isfinite(weight) or weight <= 0:
            raise ValueError("Weight must be a positive number")

        return cls(
            id=new_entry_id(),
            weight=weight,
            date=date,
            notes=notes or "",
            timestamp=utc_now(),
        )

    def to_json_dict(self) -> dict:
        """Plain JSON-compatible dict with the on-disk field names."""
        return self.model_dump(mode="json")
