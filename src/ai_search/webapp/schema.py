from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..search.base import ResultSet


class SearchResultOut(BaseModel):
    title: str
    url: str
    snippet: str


class SearchRequest(BaseModel):
    query: Optional[str] = None


class SearchResponse(BaseModel):
    results: List[SearchResultOut] = []
    error: Optional[str] = None
    source: Optional[str] = Field(None, description="live|mock|fallback; unset when validation failed")

    @classmethod
    def from_result_set(cls, rs: ResultSet) -> "SearchResponse":
        return cls(
            results=[SearchResultOut(**r.to_dict()) for r in rs.results],
            source=rs.source,
        )

    @classmethod
    def invalid(cls, message: str) -> "SearchResponse":
        return cls(results=[], error=message)
