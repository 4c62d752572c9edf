from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_API_BASE = "https://api.spotify.com"
DEFAULT_SQLITE_PATH = "./spotify.db"


def load_settings(path: str | None = None) -> dict[str, Any]:
    config_path = Path(path or os.getenv("TRACK_SEARCH_SETTINGS_PATH", "config/settings.yaml"))
    if not config_path.exists():
        return {}
    return yaml.safe_load(config_path.read_text()) or {}


def spotify_config(settings: dict[str, Any]) -> tuple[str, float | None]:
    cfg = settings.get("spotify") or {}
    api_base = str(cfg.get("api_base") or DEFAULT_API_BASE).rstrip("/")
    timeout = cfg.get("request_timeout_sec")
    return api_base, float(timeout) if timeout is not None else None


def store_config(settings: dict[str, Any]) -> str:
    store = settings.get("store") or {}
    return str(store.get("sqlite_path") or DEFAULT_SQLITE_PATH)
