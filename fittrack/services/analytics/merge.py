"""
Merge-on-import for record collections.
"""
from itertools import chain
from typing import Iterable, List, Set, TypeVar

from fittrack.services.analytics.series import sort_by_date

Record = TypeVar("Record")


def merge_by_id(existing: Iterable[Record], incoming: Iterable[Record]) -> List[Record]:
    """
    Combine two collections of the same record type.

    Records are deduplicated by id keeping the first occurrence, so an
    existing record always wins over an incoming one with the same id.
    The result is sorted newest date first.
    """
    seen: Set[str] = set()
    merged = []
    for record in chain(existing, incoming):
        if record.id in seen:
            continue
        seen.add(record.id)
        merged.append(record)

    return sort_by_date(merged, descending=True)
