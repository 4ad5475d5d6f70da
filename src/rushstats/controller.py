"""View-state controller for the paged players table."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union
from urllib.parse import quote

from rushstats.client import PlayerSource, PlayersFetchError
from rushstats.config import PLAYER_FIELD, Settings
from rushstats.export import CsvExport, Downloader
from rushstats.models import PlayersQuery, Record
from rushstats.search import SearchCoordinator, SearchState
from rushstats.table import PaginationState, SortState, apply_sort


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationIntent:
    """Request to open the detail view for one player."""

    player_name: str
    path: str


Navigator = Callable[[NavigationIntent], None]


@dataclass(frozen=True)
class ViewState:
    pagination: PaginationState
    sort: SortState
    search: SearchState
    records: tuple[Record, ...]
    loading: bool
    error: str | None


class DashboardController:
    """Owns search, pagination, sort and the current page of records.

    Must be driven from a running asyncio event loop. Transitions that change
    the ``(search, page, entries)`` triple schedule a fetch and return its
    task; transitions that leave it unchanged return ``None``. Only the most
    recently issued fetch may update state.
    """

    def __init__(
        self,
        source: PlayerSource,
        *,
        settings: Optional[Settings] = None,
        navigator: Optional[Navigator] = None,
        downloader: Optional[Downloader] = None,
    ):
        self._settings = settings or Settings()
        self._source = source
        self._navigator = navigator
        self._downloader = downloader
        self._pagination = PaginationState()
        self._sort = SortState()
        self._records: tuple[Record, ...] = ()
        self._error: str | None = None
        self._loading = False
        self._search = SearchCoordinator(self._settings.debounce_seconds, self._on_search_commit)
        self._issued = 0
        self._last_query: PlayersQuery | None = None
        self._tasks: set[asyncio.Task[None]] = set()
        self._disposed = False

    # -- read side -----------------------------------------------------------

    @property
    def state(self) -> ViewState:
        return ViewState(
            pagination=self._pagination,
            sort=self._sort,
            search=self._search.state,
            records=self._records,
            loading=self._loading,
            error=self._error,
        )

    @property
    def pagination(self) -> PaginationState:
        return self._pagination

    @property
    def sort(self) -> SortState:
        return self._sort

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    @property
    def sorted_records(self) -> tuple[Record, ...]:
        return apply_sort(self._records, self._sort)

    @property
    def has_prev(self) -> bool:
        return self._pagination.has_prev()

    @property
    def has_next(self) -> bool:
        return self._pagination.has_next(len(self._records))

    @property
    def can_export(self) -> bool:
        return bool(self._records)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def sort_indicator(self, key: str) -> Optional[str]:
        return self._sort.indicator(key)

    # -- transitions ---------------------------------------------------------

    def start(
        self,
        *,
        page_size: Union[int, str, None] = None,
        search: Optional[str] = None,
    ) -> Optional[asyncio.Task[None]]:
        """Issue the first fetch with an optional page size and search applied."""

        if page_size is not None:
            self._pagination = self._pagination.with_page_size(
                page_size,
                reset_page=self._settings.reset_page_on_resize,
            )
        if search is not None:
            self._search.reset(search)
        return self._request()

    def refresh(self) -> Optional[asyncio.Task[None]]:
        return self._request(force=True)

    def set_search(self, text: str) -> None:
        if self._disposed:
            return
        self._search.update(text)

    def submit_search(self) -> bool:
        """Commit typed search text without waiting for the quiet period."""

        return self._search.flush()

    def previous_page(self) -> Optional[asyncio.Task[None]]:
        updated = self._pagination.previous()
        if updated == self._pagination:
            return None
        self._pagination = updated
        return self._request()

    def next_page(self) -> Optional[asyncio.Task[None]]:
        updated = self._pagination.next(len(self._records))
        if updated == self._pagination:
            return None
        self._pagination = updated
        return self._request()

    def change_page_size(self, size: Union[int, str]) -> Optional[asyncio.Task[None]]:
        self._pagination = self._pagination.with_page_size(
            size,
            reset_page=self._settings.reset_page_on_resize,
        )
        return self._request()

    def toggle_sort(self, key: str) -> SortState:
        self._sort = self._sort.toggle(key)
        return self._sort

    def select_row(self, index: int) -> NavigationIntent:
        record = self.sorted_records[index]
        name = str(record[PLAYER_FIELD])
        intent = NavigationIntent(player_name=name, path=f"/player/{quote(name, safe='')}")
        if self._navigator is not None:
            self._navigator(intent)
        return intent

    def export(self, title: Optional[str] = None) -> Optional[CsvExport]:
        """Export the on-screen order; a no-op while the table is empty."""

        records = self.sorted_records
        if not records:
            logger.info("Export unavailable: page %s has no records", self._pagination.current_page)
            return None
        export = CsvExport(records, title or self._settings.export_title)
        export.generate()
        if self._downloader is not None:
            export.download(self._downloader)
        return export

    async def wait_idle(self) -> None:
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending)

    def dispose(self) -> None:
        """Stop reacting to input; in-flight responses will be discarded."""

        self._disposed = True
        self._search.close()
        logger.debug("Controller disposed with %s fetches in flight", len(self._tasks))

    # -- fetch orchestration -------------------------------------------------

    def _current_query(self) -> PlayersQuery:
        return PlayersQuery(
            page=self._pagination.current_page,
            entries=self._pagination.page_size,
            search=self._search.state.committed,
        )

    def _on_search_commit(self, text: str) -> None:
        self._request()

    def _request(self, *, force: bool = False) -> Optional[asyncio.Task[None]]:
        if self._disposed:
            return None
        query = self._current_query()
        if not force and query == self._last_query:
            logger.debug("Query %s unchanged; no request issued", query.params())
            return None
        self._last_query = query
        self._issued += 1
        self._loading = True
        task = asyncio.get_running_loop().create_task(self._fetch(self._issued, query))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _is_latest(self, sequence: int) -> bool:
        return sequence == self._issued and not self._disposed

    async def _fetch(self, sequence: int, query: PlayersQuery) -> None:
        logger.info(
            "Fetching players page=%s entries=%s search=%r (request %s)",
            query.page,
            query.entries,
            query.search,
            sequence,
        )
        try:
            page = await self._source.fetch_players(query)
        except Exception as exc:
            if not self._is_latest(sequence):
                logger.debug("Ignoring failure of superseded request %s: %s", sequence, exc)
                return
            if isinstance(exc, PlayersFetchError):
                self._error = str(exc)
            else:
                self._error = f"Players request failed: {exc}"
            logger.warning("Players fetch failed for %s: %s", query.params(), exc)
            return
        finally:
            if self._is_latest(sequence):
                self._loading = False

        if not self._is_latest(sequence):
            logger.debug("Discarding stale response for request %s", sequence)
            return

        self._error = None
        self._records = page.records()
        self._pagination = self._pagination.with_response(page.page, page.max_page)
        self._last_query = self._current_query()


__all__ = ["DashboardController", "NavigationIntent", "Navigator", "ViewState"]
