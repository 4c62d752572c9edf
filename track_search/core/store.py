from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from .errors import StorageOpenError, StorageReadError, StorageWriteError
from .models import ARTIST_SEPARATOR, StoredTrackRow, Track

logger = logging.getLogger(__name__)


class TrackStore:
    """Flattened track rows in a single SQLite table.

    Rows are append-only. Album and artist URLs are not stored, see
    ``StoredTrackRow.to_track`` for what comes back on read.
    """

    def __init__(self, sqlite_path: str = "./spotify.db"):
        self.sqlite_path = Path(sqlite_path)
        self.conn: sqlite3.Connection | None = None

    def __enter__(self) -> TrackStore:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def open(self) -> TrackStore:
        if self.conn is not None:
            return self
        try:
            self.sqlite_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.sqlite_path)
        except (OSError, sqlite3.Error) as exc:
            raise StorageOpenError(f"Cannot open track store at {self.sqlite_path}: {exc}") from exc
        try:
            self._init_tables(conn)
        except sqlite3.Error as exc:
            conn.close()
            raise StorageOpenError(f"Cannot initialise track store at {self.sqlite_path}: {exc}") from exc
        self.conn = conn
        logger.debug("Opened track store at %s", self.sqlite_path)
        return self

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    @staticmethod
    def _init_tables(conn: sqlite3.Connection) -> None:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS tracks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                album_name TEXT NOT NULL,
                artist_names TEXT NOT NULL,
                spotify_url TEXT NOT NULL
            )
            """
        )
        conn.commit()

    @staticmethod
    def flatten_artists(track: Track) -> str:
        return ARTIST_SEPARATOR.join(track.artist_names)

    def insert_track(self, track: Track) -> int:
        if self.conn is None:
            raise StorageWriteError("Track store is not open")
        try:
            cur = self.conn.cursor()
            cur.execute(
                "INSERT INTO tracks (name, album_name, artist_names, spotify_url) VALUES (?, ?, ?, ?)",
                (track.name, track.album.name, self.flatten_artists(track), track.external_urls.spotify),
            )
            self.conn.commit()
        except sqlite3.Error as exc:
            raise StorageWriteError(f"Failed to insert track {track.name!r}: {exc}") from exc
        row_id = int(cur.lastrowid)
        logger.debug("Inserted track %r as row %d", track.name, row_id)
        return row_id

    def query_all_rows(self) -> Iterator[StoredTrackRow]:
        if self.conn is None:
            raise StorageReadError("Track store is not open")
        try:
            cur = self.conn.execute(
                "SELECT id, name, album_name, artist_names, spotify_url FROM tracks ORDER BY id"
            )
        except sqlite3.Error as exc:
            raise StorageReadError(f"Failed to read tracks: {exc}") from exc
        while True:
            try:
                row = cur.fetchone()
            except sqlite3.Error as exc:
                raise StorageReadError(f"Failed to read tracks: {exc}") from exc
            if row is None:
                return
            row_id, name, album_name, artist_names, spotify_url = row
            try:
                stored = StoredTrackRow(
                    id=row_id,
                    name=name,
                    album_name=album_name,
                    artist_names=artist_names,
                    spotify_url=spotify_url,
                )
            except ValidationError as exc:
                raise StorageReadError(f"Malformed track row {row_id}: {exc.error_count()} error(s)") from exc
            yield stored

    def query_all_tracks(self) -> Iterator[Track]:
        for row in self.query_all_rows():
            yield row.to_track()

    def count(self) -> int:
        if self.conn is None:
            raise StorageReadError("Track store is not open")
        try:
            row = self.conn.execute("SELECT COUNT(*) FROM tracks").fetchone()
        except sqlite3.Error as exc:
            raise StorageReadError(f"Failed to count tracks: {exc}") from exc
        return int(row[0])
