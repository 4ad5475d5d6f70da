"""Sample rushing dataset and an in-memory players source."""

from __future__ import annotations

import asyncio
import math
from typing import Any

from rushstats.client import PlayersFetchError
from rushstats.models import PlayersPage, PlayersQuery


TEAMS = ("DAL", "NYG", "PHI", "WAS")


def make_players(total: int = 23) -> list[dict[str, Any]]:
    players = []
    for idx in range(1, total + 1):
        yards = idx * 97
        players.append(
            {
                "Player": f"Runner {idx:02d}",
                "Team": TEAMS[idx % len(TEAMS)],
                "Pos": "RB",
                "Att": idx * 20,
                "Yds": f"{yards:,}",
                "Lng": f"{idx + 10}T" if idx % 3 == 0 else str(idx + 10),
                "TD": idx % 7,
            }
        )
    return players


def paginate(players: list[dict[str, Any]], page: int, entries: int, search: str) -> dict[str, Any]:
    """Mimic the remote endpoint: page numbers come back as strings."""

    matches = [player for player in players if search.lower() in player["Player"].lower()]
    max_page = math.ceil(len(matches) / entries)
    page = max(1, min(page, max_page))
    start = (page - 1) * entries
    return {
        "players": matches[start : start + entries],
        "page": str(page),
        "maxPage": str(max_page),
    }


class FakePlayerSource:
    """Players source that records queries and can hold responses back."""

    def __init__(self, players: list[dict[str, Any]] | None = None):
        self.players = players if players is not None else make_players()
        self.queries: list[PlayersQuery] = []
        self.gates: dict[int, asyncio.Event] = {}
        self.failures: dict[int, Exception] = {}

    def hold(self, call_index: int) -> asyncio.Event:
        gate = asyncio.Event()
        self.gates[call_index] = gate
        return gate

    def fail(
        self,
        call_index: int,
        message: str = "service unavailable",
        *,
        error: Exception | None = None,
    ) -> None:
        self.failures[call_index] = error if error is not None else PlayersFetchError(message)

    async def fetch_players(self, query: PlayersQuery) -> PlayersPage:
        call_index = len(self.queries)
        self.queries.append(query)
        gate = self.gates.get(call_index)
        if gate is not None:
            await gate.wait()
        if call_index in self.failures:
            raise self.failures[call_index]
        return PlayersPage.model_validate(
            paginate(self.players, query.page, query.entries, query.search)
        )
