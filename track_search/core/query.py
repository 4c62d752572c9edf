from __future__ import annotations

from urllib.parse import quote


def encode_query(text: str) -> str:
    """Percent-encode ``text`` for use as a single query parameter value.

    Only RFC 3986 unreserved characters are left as-is.
    """
    return quote(text, safe="")
