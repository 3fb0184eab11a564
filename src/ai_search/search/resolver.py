from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from ..llm.config import LLMConfig
from ..llm.openai_client import OpenAIClient
from .base import ResultSet, SearchResult
from .mock import mock_results
from .parse import ResultParseError, parse_results
from .prompt import build_messages

logger = logging.getLogger(__name__)

EMPTY_QUERY_MESSAGE = "Please enter a search query."


class EmptyQueryError(ValueError):
    def __init__(self, message: str = EMPTY_QUERY_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def validate_query(raw: Optional[str]) -> str:
    """Trim ``raw`` and reject it when nothing is left."""
    query = (raw or "").strip()
    if not query:
        raise EmptyQueryError()
    return query


async def resolve_with_source(
    query: str,
    credential: Optional[str] = None,
    *,
    config: Optional[LLMConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ResultSet:
    """Resolve ``query`` to at most ten results.

    Without a credential the deterministic generator answers. With one, the
    chat completions API is asked for a JSON array; any failure on that path
    falls back to the deterministic results and is never raised.
    """
    if not credential:
        return ResultSet(query=query, source="mock", results=mock_results(query))

    cfg = config or LLMConfig()
    try:
        async with OpenAIClient(
            base_url=cfg.base_url,
            api_key=credential,
            timeout=cfg.timeout,
            transport=transport,
        ) as client:
            content = await client.chat(cfg.model, build_messages(query), temperature=cfg.temperature)
        results = parse_results(content)
    except httpx.HTTPStatusError as e:
        logger.warning("provider returned HTTP %s; falling back to mock results", e.response.status_code)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("provider request failed (%s); falling back to mock results", type(e).__name__)
    except ResultParseError as e:
        logger.warning("could not parse provider output (%s); falling back to mock results", e)
    except ValueError as e:
        # undecodable response body
        logger.warning("provider response was not JSON (%s); falling back to mock results", e)
    else:
        logger.info("provider returned %d results", len(results))
        return ResultSet(query=query, source="live", results=results)

    return ResultSet(query=query, source="fallback", results=mock_results(query))


async def resolve(
    query: str,
    credential: Optional[str] = None,
    *,
    config: Optional[LLMConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[SearchResult]:
    result_set = await resolve_with_source(query, credential, config=config, transport=transport)
    return result_set.results
