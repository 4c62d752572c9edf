from __future__ import annotations

from pathlib import Path

import pytest

from track_search.core.store import TrackStore


def _track_payload(name: str, album: str, artists: list[str], url: str | None = None) -> dict:
    return {
        "name": name,
        "popularity": 50,
        "album": {
            "name": album,
            "album_type": "album",
            "artists": [
                {"name": artist, "external_urls": {"spotify": f"https://open.spotify.com/artist/{i}"}}
                for i, artist in enumerate(artists)
            ],
            "external_urls": {"spotify": "https://open.spotify.com/album/a1"},
        },
        "external_urls": {"spotify": url or f"https://open.spotify.com/track/{name.replace(' ', '')}"},
    }


@pytest.fixture
def track_payload():
    return _track_payload


@pytest.fixture
def store(tmp_path: Path):
    track_store = TrackStore(sqlite_path=str(tmp_path / "db" / "spotify.db")).open()
    yield track_store
    track_store.close()
