from __future__ import annotations

from typing import Dict, List

SYSTEM_PROMPT = "Return only JSON that matches the schema."


def build_prompt(query: str) -> str:
    return (
        "You are a search results generator. "
        f'For the user query "{query}", return exactly 10 concise results as a JSON array. '
        "Each item must contain: title (string), url (string), snippet (string). "
        "Do not include markdown or explanations, only raw JSON."
    )


def build_messages(query: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_prompt(query)},
    ]
