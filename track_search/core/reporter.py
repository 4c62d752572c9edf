from __future__ import annotations

import json
import sys
from typing import Iterable, TextIO

from .models import Track

SEPARATOR_LINE = "---------"


def print_tracks(tracks: Iterable[Track], out: TextIO | None = None) -> None:
    out = out or sys.stdout
    for track in tracks:
        print(track.name, file=out)
        print(track.album.name, file=out)
        print("".join(track.artist_names), file=out)
        print(track.external_urls.spotify, file=out)
        print(SEPARATOR_LINE, file=out)


def print_stored_tracks(tracks: Iterable[Track], out: TextIO | None = None) -> None:
    out = out or sys.stdout
    for track in tracks:
        print(json.dumps(track.model_dump()), file=out)
