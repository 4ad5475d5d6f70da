"""Page bounds and navigation transitions for the players table."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from rushstats.config import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS


@dataclass(frozen=True)
class PaginationState:
    """Current page, last known page count and requested page size."""

    current_page: int = 1
    max_page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def has_prev(self) -> bool:
        return self.current_page > 1

    def has_next(self, result_count: int) -> bool:
        # A short page ends the data even when max_page says otherwise.
        return (
            self.current_page < self.max_page
            and result_count > 0
            and result_count >= self.page_size
        )

    def previous(self) -> "PaginationState":
        if not self.has_prev():
            return self
        return replace(self, current_page=self.current_page - 1)

    def next(self, result_count: int) -> "PaginationState":
        if not self.has_next(result_count):
            return self
        return replace(self, current_page=self.current_page + 1)

    def with_page_size(
        self,
        size: Union[int, str],
        *,
        reset_page: bool = False,
    ) -> "PaginationState":
        page_size = coerce_page_size(size)
        current_page = 1 if reset_page else self.current_page
        return replace(self, page_size=page_size, current_page=current_page)

    def with_response(self, page: int, max_page: int) -> "PaginationState":
        """Adopt the server's page numbers after a successful fetch."""

        return replace(self, current_page=max(1, page), max_page=max(0, max_page))


def coerce_page_size(size: Union[int, str]) -> int:
    """Validate an entries-per-page choice, accepting numeric strings."""

    try:
        value = int(size)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid page size {size!r}") from exc
    if value not in PAGE_SIZE_OPTIONS:
        allowed = ", ".join(str(option) for option in PAGE_SIZE_OPTIONS)
        raise ValueError(f"Page size must be one of {allowed}; got {value}")
    return value


__all__ = ["PaginationState", "coerce_page_size"]
