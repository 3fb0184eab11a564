from __future__ import annotations

import json
from typing import Any, List

from .base import MAX_RESULTS, SearchResult

DEFAULT_TITLE = "Untitled"
DEFAULT_URL = "https://example.com"
DEFAULT_SNIPPET = ""


class ResultParseError(ValueError):
    """Provider content could not be turned into a list of results."""


def extract_json_array(content: str) -> str:
    """Slice from the first ``[`` to the last ``]``.

    Models like to wrap JSON in prose or markdown fences. When no bracket pair
    is present the trimmed text is returned unchanged.
    """
    trimmed = content.strip()
    start = trimmed.find("[")
    end = trimmed.rfind("]")
    if start == -1 or end == -1:
        return trimmed
    return trimmed[start : end + 1]


def _as_str(value: Any, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def normalize_item(item: dict) -> SearchResult:
    return SearchResult(
        title=_as_str(item.get("title"), DEFAULT_TITLE),
        url=_as_str(item.get("url"), DEFAULT_URL),
        snippet=_as_str(item.get("snippet"), DEFAULT_SNIPPET),
    )


def _reject_constant(name: str) -> Any:
    raise ResultParseError(f"invalid JSON constant: {name}")


def parse_results(content: str | None, limit: int = MAX_RESULTS) -> List[SearchResult]:
    if not content or not content.strip():
        raise ResultParseError("empty content")
    try:
        data = json.loads(extract_json_array(content), parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ResultParseError(f"invalid JSON: {e.msg}") from e
    except RecursionError as e:
        raise ResultParseError("JSON nested too deeply") from e
    if not isinstance(data, list):
        raise ResultParseError(f"expected a JSON array, got {type(data).__name__}")

    results: List[SearchResult] = []
    for item in data[:limit]:
        # only objects can carry title/url/snippet
        if not isinstance(item, dict):
            continue
        results.append(normalize_item(item))
    return results
