from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from .errors import ShapeMismatchError
from .mapper import parse_search_response
from .models import RunResult
from .query import encode_query
from .reporter import print_stored_tracks, print_tracks
from .spotify_client import search
from .store import TrackStore

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Need to grab a new token"
SHAPE_MISMATCH_MESSAGE = "Hm, the response didn't match the shape we expected."


def run_search(
    query: str,
    token: str,
    store: TrackStore,
    settings: dict[str, Any] | None = None,
    out: TextIO | None = None,
) -> RunResult:
    out = out or sys.stdout
    outcome = search(encode_query(query), token, settings=settings)

    if outcome.kind == "auth_failure":
        logger.warning("Search rejected the access token (401)")
        print(UNAUTHORIZED_MESSAGE, file=out)
        return RunResult(status="unauthorized", message=UNAUTHORIZED_MESSAGE)

    # Anything other than success or 401 is fatal for this run.
    body = outcome.require_success()

    try:
        response = parse_search_response(body)
    except ShapeMismatchError as exc:
        logger.warning("%s", exc.message)
        print(SHAPE_MISMATCH_MESSAGE, file=out)
        return RunResult(status="shape_mismatch", message=SHAPE_MISMATCH_MESSAGE)

    tracks = response.track_list()
    # No-op if the caller already opened it.
    store.open()
    for track in tracks:
        store.insert_track(track)
    logger.info("Stored %d track(s) for query %r", len(tracks), query)

    print_stored_tracks(store.query_all_tracks(), out=out)
    print_tracks(tracks, out=out)
    return RunResult(status="stored", stored_count=len(tracks))
