from __future__ import annotations

import logging
from typing import Any

import requests

from .models import SearchOutcome
from .settings import DEFAULT_API_BASE, spotify_config

logger = logging.getLogger(__name__)

SEARCH_TYPES = "track,artist"


def build_search_url(encoded_query: str, api_base: str = DEFAULT_API_BASE) -> str:
    # The query is already percent-encoded, so it is not passed through ``params``.
    return f"{api_base.rstrip('/')}/v1/search?q={encoded_query}&type={SEARCH_TYPES}"


def build_headers(token: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def classify_response(status_code: int, body: str | bytes) -> SearchOutcome:
    if status_code == 200:
        return SearchOutcome(kind="success", status=status_code, body=body)
    if status_code == 401:
        return SearchOutcome(kind="auth_failure", status=status_code)
    if 400 <= status_code < 500:
        return SearchOutcome(kind="client_error", status=status_code)
    return SearchOutcome(kind="server_error", status=status_code)


def search(encoded_query: str, token: str, settings: dict[str, Any] | None = None) -> SearchOutcome:
    api_base, timeout_sec = spotify_config(settings or {})
    url = build_search_url(encoded_query, api_base)
    logger.debug("GET %s", url)
    try:
        resp = requests.get(url, headers=build_headers(token), timeout=timeout_sec)
    except requests.RequestException as exc:
        logger.error("Search request failed: %s", exc)
        return SearchOutcome(kind="transport_failure", cause=str(exc))

    outcome = classify_response(resp.status_code, resp.content)
    logger.debug("Search returned %s (%s)", resp.status_code, outcome.kind)
    return outcome
