"""Column catalogue for the rushing statistics table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    sortable: bool = False


PLAYER_FIELD = "Player"

_COLUMNS: Tuple[Column, ...] = (
    Column(key=PLAYER_FIELD, label="Player"),
    Column(key="Team", label="Team"),
    Column(key="Pos", label="Position"),
    Column(key="Yds", label="Total Rushing Yards", sortable=True),
    Column(key="Lng", label="Longest Rush", sortable=True),
    Column(key="TD", label="Total Rushing Touchdowns", sortable=True),
)

_COLUMNS_BY_KEY: Dict[str, Column] = {column.key: column for column in _COLUMNS}

PAGE_SIZE_OPTIONS: Tuple[int, ...] = (10, 25, 50, 75, 100)
DEFAULT_PAGE_SIZE = 10


def iter_columns() -> Iterable[Column]:
    """Return the displayed columns in table order."""

    return iter(_COLUMNS)


def column_keys() -> Tuple[str, ...]:
    return tuple(column.key for column in _COLUMNS)


def sortable_keys() -> Tuple[str, ...]:
    return tuple(column.key for column in _COLUMNS if column.sortable)


def get_column(key: str) -> Column:
    """Fetch a column by record field, raising KeyError if unknown."""

    if key not in _COLUMNS_BY_KEY:
        raise KeyError(f"No column configured for field {key!r}")
    return _COLUMNS_BY_KEY[key]
