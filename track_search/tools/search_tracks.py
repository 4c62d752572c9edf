#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


logger = logging.getLogger(__name__)


def _require_values(args: argparse.Namespace, *names: str) -> None:
    from track_search.core.errors import MissingArgumentError

    for name in names:
        if not getattr(args, name).strip():
            raise MissingArgumentError(name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search Spotify tracks, store them locally and print them")
    parser.add_argument("query", help="Search text, e.g. 'Mac Miller Good News'")
    parser.add_argument("token", help="Spotify bearer token")
    parser.add_argument("--db-path", help="SQLite file to store tracks in (default from settings, ./spotify.db)")
    parser.add_argument("--settings", help="YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def run(argv: list[str] | None = None) -> int:
    from track_search.core.errors import MissingArgumentError, TrackSearchError
    from track_search.core.pipeline import run_search
    from track_search.core.settings import load_settings
    from track_search.tools._common import configure_logging, get_store

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        _require_values(args, "query", "token")
    except MissingArgumentError as exc:
        parser.print_usage(sys.stderr)
        print(f"error [{exc.code}]: {exc.message}", file=sys.stderr)
        return 2

    settings = load_settings(args.settings)
    # run_search opens the store only when there are tracks to persist.
    store = get_store(settings, sqlite_path=args.db_path)
    try:
        run_search(args.query, args.token, store, settings=settings)
    except TrackSearchError as exc:
        logger.error("Run aborted: %s", exc.code)
        print(f"error [{exc.code}]: {exc.message}", file=sys.stderr)
        return 1
    finally:
        store.close()
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
