"""Wire models for the remote players endpoint."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


Record = Mapping[str, Any]


def freeze_record(raw: Mapping[str, Any]) -> Record:
    """Return a read-only view over a copy of ``raw``."""

    return MappingProxyType(dict(raw))


class PlayersQuery(BaseModel):
    """Request key for one page of players."""

    page: int = Field(default=1, ge=1)
    entries: int = Field(default=10, ge=1)
    search: str = ""

    model_config = ConfigDict(frozen=True)

    def params(self) -> Dict[str, Any]:
        return {"page": self.page, "entries": self.entries, "search": self.search}


class PlayersPage(BaseModel):
    """Response payload; ``page`` and ``maxPage`` arrive as numeric strings."""

    players: List[Dict[str, Any]] = Field(default_factory=list)
    page: int = Field(..., ge=0)
    max_page: int = Field(..., alias="maxPage", ge=0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def records(self) -> tuple[Record, ...]:
        return tuple(freeze_record(player) for player in self.players)
