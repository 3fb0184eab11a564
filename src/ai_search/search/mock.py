from __future__ import annotations

from typing import List, Tuple
from urllib.parse import quote

from .base import MAX_RESULTS, SearchResult

# (slug, title, snippet); "{q}" is replaced with the raw query
_TEMPLATES: Tuple[Tuple[str, str, str], ...] = (
    ("guide", "Understanding {q}", "A beginner-friendly overview of {q}, key concepts, and common pitfalls."),
    ("best-practices", "{q} Best Practices", "Battle-tested recommendations for working with {q} in production."),
    ("tutorials", "{q} Tutorials and Examples", "Hands-on tutorials with step-by-step examples to learn {q}."),
    ("advanced", "Advanced {q} Techniques", "Deep dives into advanced topics, optimization, and scaling strategies for {q}."),
    ("faq", "{q} FAQ", "Frequently asked questions and detailed answers about {q}."),
    ("tools", "{q} Tools & Libraries", "A curated list of tools and libraries to accelerate {q}."),
    ("community", "{q} Community Resources", "Forums, communities, and places to get help with {q}."),
    ("comparisons", "Comparing {q} Approaches", "Trade-offs between popular approaches and frameworks related to {q}."),
    ("performance", "{q} Performance Guide", "Techniques to improve performance and reliability when using {q}."),
    ("news", "Latest {q} News", "Recent updates, releases, and ecosystem highlights around {q}."),
)

# characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def mock_results(query: str) -> List[SearchResult]:
    """Deterministic results for ``query``; same input, same ten records."""
    encoded = encode_uri_component(query)
    out: List[SearchResult] = []
    for slug, title, snippet in _TEMPLATES[:MAX_RESULTS]:
        out.append(
            SearchResult(
                title=title.replace("{q}", query),
                url=f"https://example.com/{encoded}/{slug}",
                snippet=snippet.replace("{q}", query),
            )
        )
    return out
