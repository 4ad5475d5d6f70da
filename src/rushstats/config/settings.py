"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_API_URL_ENV = "RUSHSTATS_API_URL"
_PLAYERS_PATH_ENV = "RUSHSTATS_PLAYERS_PATH"
_DEBOUNCE_ENV = "RUSHSTATS_DEBOUNCE_MS"
_TIMEOUT_ENV = "RUSHSTATS_TIMEOUT"
_RESET_PAGE_ENV = "RUSHSTATS_RESET_PAGE_ON_RESIZE"
_EXPORT_TITLE_ENV = "RUSHSTATS_EXPORT_TITLE"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    api_url: str = "http://localhost:3001"
    players_path: str = "/players"
    debounce_seconds: float = 0.75
    timeout: float = 10.0
    reset_page_on_resize: bool = False
    export_title: str = "NFL Rushing Stats"


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    token = raw.strip().lower()
    if token in _TRUTHY:
        return True
    if token in _FALSY:
        return False
    logger.warning("Invalid boolean for %s: %s; using default %s", name, raw, default)
    return default


def load_settings() -> Settings:
    """Build settings from ``RUSHSTATS_*`` environment variables."""

    defaults = Settings()
    debounce_ms = _env_float(_DEBOUNCE_ENV, defaults.debounce_seconds * 1000, clamp_min=0.0)
    return Settings(
        api_url=os.getenv(_API_URL_ENV, defaults.api_url).rstrip("/"),
        players_path=os.getenv(_PLAYERS_PATH_ENV, defaults.players_path),
        debounce_seconds=debounce_ms / 1000,
        timeout=_env_float(_TIMEOUT_ENV, defaults.timeout, clamp_min=0.1),
        reset_page_on_resize=_env_bool(_RESET_PAGE_ENV, defaults.reset_page_on_resize),
        export_title=os.getenv(_EXPORT_TITLE_ENV, defaults.export_title),
    )
