from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .openai_client import DEFAULT_BASE_URL


@dataclass
class LLMConfig:
    base_url: str = DEFAULT_BASE_URL
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    timeout: float = 60.0
    api_key: Optional[str] = None

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)


def load_llm_config(path: Optional[str | Path], base: Optional[LLMConfig] = None) -> LLMConfig:
    """Overlay the ``llm:`` section of a YAML file on ``base``.

    Missing file or missing keys leave ``base`` values in place; an empty
    ``api_key`` in the file never clears a key that came from the environment.
    """
    cfg = base or LLMConfig()
    if not path:
        return cfg
    p = Path(path)
    if not p.is_file():
        return cfg
    with p.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    llm = (data or {}).get("llm") or {}
    cfg.base_url = llm.get("base_url") or cfg.base_url
    cfg.model = llm.get("model") or cfg.model
    cfg.temperature = float(llm.get("temperature", cfg.temperature))
    cfg.timeout = float(llm.get("timeout", cfg.timeout))
    cfg.api_key = llm.get("api_key") or cfg.api_key
    return cfg
