from .base import MAX_RESULTS, ResultSet, SearchResult
from .mock import mock_results
from .parse import ResultParseError, parse_results
from .prompt import build_prompt
from .resolver import EMPTY_QUERY_MESSAGE, EmptyQueryError, resolve, resolve_with_source, validate_query

__all__ = [
    "MAX_RESULTS",
    "ResultSet",
    "SearchResult",
    "mock_results",
    "ResultParseError",
    "parse_results",
    "build_prompt",
    "EMPTY_QUERY_MESSAGE",
    "EmptyQueryError",
    "resolve",
    "resolve_with_source",
    "validate_query",
]
