from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .errors import TransportError, UnauthorizedError, UnexpectedStatusError

ARTIST_SEPARATOR = ", "


class ExternalUrls(BaseModel):
    model_config = ConfigDict(frozen=True)

    spotify: str


class Artist(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    external_urls: ExternalUrls


class Album(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    artists: list[Artist]
    external_urls: ExternalUrls


class Track(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    album: Album
    external_urls: ExternalUrls

    @property
    def artist_names(self) -> list[str]:
        return [artist.name for artist in self.album.artists]


class TrackPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: list[Track]


class SearchResponse(BaseModel):
    """Top-level search payload. Only the ``tracks`` page is consumed."""

    model_config = ConfigDict(frozen=True)

    tracks: TrackPage

    def track_list(self) -> list[Track]:
        return list(self.tracks.items)


class StoredTrackRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    album_name: str
    artist_names: str
    spotify_url: str

    def to_track(self) -> Track:
        """Rebuild a Track from the flattened row.

        Only the track URL survives storage; album and artist URLs come back as
        empty strings. Splitting on the separator means an empty column yields a
        single artist with an empty name, and an artist name that itself
        contains the separator comes back as several artists.
        """
        artists = [
            Artist(name=name, external_urls=ExternalUrls(spotify=""))
            for name in self.artist_names.split(ARTIST_SEPARATOR)
        ]
        return Track(
            name=self.name,
            album=Album(name=self.album_name, artists=artists, external_urls=ExternalUrls(spotify="")),
            external_urls=ExternalUrls(spotify=self.spotify_url),
        )


class SearchOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success", "auth_failure", "client_error", "server_error", "transport_failure"]
    status: int | None = None
    body: str | bytes | None = None
    cause: str | None = None

    def require_success(self) -> str | bytes:
        if self.kind == "success":
            return self.body or ""
        if self.kind == "auth_failure":
            raise UnauthorizedError()
        if self.kind == "transport_failure":
            raise TransportError(f"Search request failed: {self.cause}")
        raise UnexpectedStatusError(self.status or 0)


class RunResult(BaseModel):
    status: Literal["stored", "unauthorized", "shape_mismatch"]
    stored_count: int = 0
    message: str | None = None
