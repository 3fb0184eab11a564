from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal

MAX_RESULTS = 10

Source = Literal["live", "mock", "fallback"]


@dataclass(frozen=True)
class SearchResult:
    title: str
    url: str
    snippet: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ResultSet:
    """Results for one query plus where they came from.

    ``source`` is ``mock`` when no credential is configured, ``live`` when the
    provider answered, and ``fallback`` when a configured provider failed.
    """

    query: str
    source: Source
    results: List[SearchResult] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.results)
