from __future__ import annotations

import json

import pytest

from track_search.core.errors import ShapeMismatchError
from track_search.core.mapper import parse_search_response


def test_parse_nested_shape(track_payload) -> None:
    body = json.dumps(
        {
            "tracks": {"href": "x", "items": [track_payload("Good News", "Circles", ["Mac Miller"])], "total": 1},
            "artists": {"items": []},
        }
    )
    tracks = parse_search_response(body).track_list()

    assert len(tracks) == 1
    track = tracks[0]
    assert track.name == "Good News"
    assert track.album.name == "Circles"
    assert track.artist_names == ["Mac Miller"]
    assert track.album.artists[0].external_urls.spotify == "https://open.spotify.com/artist/0"
    assert track.album.external_urls.spotify == "https://open.spotify.com/album/a1"
    assert track.external_urls.spotify == "https://open.spotify.com/track/GoodNews"


def test_parse_accepts_bytes_and_empty_items() -> None:
    assert parse_search_response(b'{"tracks": {"items": []}}').track_list() == []


def test_parse_keeps_artist_order(track_payload) -> None:
    body = json.dumps({"tracks": {"items": [track_payload("Song", "Album", ["B", "A", "C"])]}})
    assert parse_search_response(body).track_list()[0].artist_names == ["B", "A", "C"]


@pytest.mark.parametrize(
    "body",
    [
        '{"artists": {"items": []}}',
        '{"tracks": {}}',
        '{"tracks": {"items": [{"name": "x"}]}}',
        '{"tracks": {"items": [{"name": 5, "album": {"name": "a", "artists": [], "external_urls": {"spotify": ""}}, "external_urls": {"spotify": ""}}]}}',
        '{"tracks": {"items": [{"name": "x", "album": {"name": "a", "artists": [{"name": "n"}], "external_urls": {"spotify": ""}}, "external_urls": {"spotify": ""}}]}}',
        "not json",
    ],
)
def test_parse_shape_mismatch(body: str) -> None:
    with pytest.raises(ShapeMismatchError) as exc:
        parse_search_response(body)
    assert exc.value.code == "SHAPE_MISMATCH"
