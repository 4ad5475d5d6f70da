"""Async HTTP client for the remote players endpoint."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx
from pydantic import ValidationError

from rushstats.config import Settings
from rushstats.models import PlayersPage, PlayersQuery


logger = logging.getLogger(__name__)


class PlayersFetchError(RuntimeError):
    """Raised when a page of players cannot be fetched or parsed."""


class PlayerSource(Protocol):
    async def fetch_players(self, query: PlayersQuery) -> PlayersPage: ...


class PlayersClient:
    """Fetch pages of players over HTTP.

    Use as an async context manager, or pass an existing ``httpx.AsyncClient``
    whose lifetime the caller manages:

        async with PlayersClient(settings) as client:
            page = await client.fetch_players(PlayersQuery(page=2))
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings or Settings()
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> "PlayersClient":
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._settings.api_url,
                timeout=self._settings.timeout,
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with'.")
        return self._client

    async def fetch_players(self, query: PlayersQuery) -> PlayersPage:
        path = self._settings.players_path
        try:
            response = await self.client.get(path, params=query.params())
            response.raise_for_status()
            return PlayersPage.model_validate(response.json())
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise PlayersFetchError(f"Players request failed with status {status}") from exc
        except httpx.RequestError as exc:
            raise PlayersFetchError(f"Players request failed: {exc}") from exc
        except (ValueError, ValidationError) as exc:
            raise PlayersFetchError(f"Malformed players response: {exc}") from exc


__all__ = ["PlayerSource", "PlayersClient", "PlayersFetchError"]
