from __future__ import annotations

import logging
from typing import Any

from track_search.core import TrackStore
from track_search.core.settings import load_settings, store_config


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_store(settings: dict[str, Any] | None = None, sqlite_path: str | None = None) -> TrackStore:
    if settings is None:
        settings = load_settings()
    return TrackStore(sqlite_path=sqlite_path or store_config(settings))
