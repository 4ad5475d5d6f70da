from __future__ import annotations

from typing import Any

import pytest

from rushstats.config import Settings

from .stubs import FakePlayerSource, make_players


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def players() -> list[dict[str, Any]]:
    return make_players()


@pytest.fixture
def source(players) -> FakePlayerSource:
    return FakePlayerSource(players)


@pytest.fixture
def settings() -> Settings:
    return Settings(debounce_seconds=0.05)
