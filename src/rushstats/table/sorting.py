"""Single-column ordering for the current page of records."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence

from rushstats.config import get_column
from rushstats.models import Record
from rushstats.table.normalize import to_number


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def flipped(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


_INDICATORS = {
    SortDirection.ASCENDING: "v",
    SortDirection.DESCENDING: "^",
}


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction; ``key=None`` keeps the remote order."""

    key: Optional[str] = None
    direction: SortDirection = SortDirection.DESCENDING

    def toggle(self, key: str) -> "SortState":
        """Flip direction on the active column, or activate a new one descending."""

        if not get_column(key).sortable:
            raise ValueError(f"Column {key!r} is not sortable")
        if key == self.key:
            return replace(self, direction=self.direction.flipped())
        return SortState(key=key, direction=SortDirection.DESCENDING)

    def indicator(self, key: str) -> Optional[str]:
        if key != self.key:
            return None
        return _INDICATORS[self.direction]


def sort_records(
    records: Sequence[Record],
    key: Optional[str],
    direction: SortDirection = SortDirection.DESCENDING,
) -> tuple[Record, ...]:
    """Return ``records`` ordered by the numeric value at ``key``.

    Ties keep their received order. Records whose value cannot be read as a
    number are placed after every comparable record, also in received order,
    regardless of direction.
    """

    if key is None:
        return tuple(records)

    comparable: list[tuple[float, Record]] = []
    incomparable: list[Record] = []
    for record in records:
        value = to_number(record.get(key))
        if math.isnan(value):
            incomparable.append(record)
        else:
            comparable.append((value, record))

    reverse = direction is SortDirection.DESCENDING
    comparable.sort(key=lambda item: item[0], reverse=reverse)
    return tuple(record for _, record in comparable) + tuple(incomparable)


def apply_sort(records: Sequence[Record], state: SortState) -> tuple[Record, ...]:
    return sort_records(records, state.key, state.direction)


__all__ = [
    "SortDirection",
    "SortState",
    "apply_sort",
    "sort_records",
]
