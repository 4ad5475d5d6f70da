"""Configuration helpers for table columns and runtime settings."""

from .columns import (
    DEFAULT_PAGE_SIZE,
    PAGE_SIZE_OPTIONS,
    PLAYER_FIELD,
    Column,
    column_keys,
    get_column,
    iter_columns,
    sortable_keys,
)
from .settings import Settings, load_settings

__all__ = [
    "Column",
    "DEFAULT_PAGE_SIZE",
    "PAGE_SIZE_OPTIONS",
    "PLAYER_FIELD",
    "Settings",
    "column_keys",
    "get_column",
    "iter_columns",
    "load_settings",
    "sortable_keys",
]
