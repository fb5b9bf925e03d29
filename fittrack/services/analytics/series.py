"""
Chronological ordering and chart series.
"""
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, List, TypeVar

from fittrack.models import WeightEntry

Dated = TypeVar("Dated")


def short_date(day: date) -> str:
    """Axis label such as 'Jan 5'."""
    return f"{day:%b} {day.day}"


def sort_by_date(records: Iterable[Dated], descending: bool = False) -> List[Dated]:
    """Sort records by their date. Stable: equal dates keep input order."""
    return sorted(records, key=lambda record: record.date, reverse=descending)


@dataclass
class WeightPoint:
    """One point of the weight chart."""
    date: date
    weight: float
    label: str


def weight_series(entries: Iterable[WeightEntry]) -> Iterator[WeightPoint]:
    """Yield weight points oldest first."""
    for entry in sort_by_date(entries):
        yield WeightPoint(date=entry.date, weight=entry.weight, label=short_date(entry.date))
