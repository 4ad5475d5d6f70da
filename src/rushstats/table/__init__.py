"""Table view helpers (normalization, sorting, pagination)."""

from .normalize import normalize_cell, to_number
from .pagination import PaginationState, coerce_page_size
from .sorting import SortDirection, SortState, apply_sort, sort_records

__all__ = [
    "PaginationState",
    "SortDirection",
    "SortState",
    "apply_sort",
    "coerce_page_size",
    "normalize_cell",
    "sort_records",
    "to_number",
]
