"""Debounced free-text search input."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Deliver the last pushed value once input has been quiet for ``delay``.

    Runs on the current asyncio event loop. Every ``push`` cancels the pending
    timer and arms a new one, so only a value that survives the full quiet
    period reaches ``callback``.
    """

    def __init__(self, delay: float, callback: Callable[[T], Any]):
        self.delay = delay
        self._callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None
        self._value: Optional[T] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: T) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._value = value
        self._handle = loop.call_later(self.delay, self._fire)

    def flush(self) -> bool:
        """Fire the pending value now; return False when nothing is armed."""

        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._value = None

    def _fire(self) -> None:
        value = self._value
        self._handle = None
        self._value = None
        self._callback(value)  # type: ignore[arg-type]


@dataclass(frozen=True)
class SearchState:
    raw: str = ""
    committed: str = ""


class SearchCoordinator:
    """Tracks typed and committed search text for the players table."""

    def __init__(self, delay: float, on_commit: Callable[[str], Any]):
        self._state = SearchState()
        self._on_commit = on_commit
        self._debouncer: Debouncer[str] = Debouncer(delay, self._commit)

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def update(self, text: str) -> None:
        self._state = SearchState(raw=text, committed=self._state.committed)
        self._debouncer.push(text)

    def flush(self) -> bool:
        return self._debouncer.flush()

    def reset(self, text: str) -> None:
        """Set typed and committed text at once without notifying."""

        self._debouncer.cancel()
        self._state = SearchState(raw=text, committed=text)

    def close(self) -> None:
        self._debouncer.cancel()

    def _commit(self, text: str) -> None:
        if text == self._state.committed:
            logger.debug("Search %r already committed; skipping", text)
            return
        logger.debug("Committing search %r", text)
        self._state = SearchState(raw=self._state.raw, committed=text)
        self._on_commit(text)


__all__ = ["Debouncer", "SearchCoordinator", "SearchState"]
