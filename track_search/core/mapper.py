from __future__ import annotations

from pydantic import ValidationError

from .errors import ShapeMismatchError
from .models import SearchResponse


def parse_search_response(body: str | bytes) -> SearchResponse:
    try:
        return SearchResponse.model_validate_json(body)
    except ValidationError as exc:
        raise ShapeMismatchError(f"Search response did not match the expected shape: {exc.error_count()} error(s)") from exc
