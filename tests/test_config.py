from __future__ import annotations

from pathlib import Path

from ai_search.llm.config import LLMConfig, load_llm_config
from ai_search.settings import Settings


def test_load_llm_config_missing_file_keeps_base(tmp_path: Path):
    base = LLMConfig(model="m", api_key="k")
    cfg = load_llm_config(tmp_path / "nope.yaml", base)
    assert cfg.model == "m" and cfg.api_key == "k"
    assert load_llm_config(None).api_key is None


def test_load_llm_config_overlays_yaml(tmp_path: Path):
    p = tmp_path / "llm.yaml"
    p.write_text(
        "llm:\n  model: gpt-test\n  base_url: http://localhost:9999/v1\n  temperature: 0.1\n  api_key: ''\n",
        encoding="utf-8",
    )
    cfg = load_llm_config(p, LLMConfig(api_key="from-env"))
    assert cfg.model == "gpt-test"
    assert cfg.base_url == "http://localhost:9999/v1"
    assert cfg.temperature == 0.1
    # empty key in YAML does not clear the environment key
    assert cfg.api_key == "from-env"
    assert cfg.enabled


def test_settings_from_environment(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-env")
    monkeypatch.setenv("APP_MESSAGE", "hello")
    s = Settings()
    assert s.app_message == "hello"
    cfg = s.llm_config()
    assert cfg.api_key == "sk-env"
    assert cfg.model == "gpt-env"


def test_settings_without_key_disables_provider(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("LLM_CONFIG_PATH", raising=False)
    cfg = Settings().llm_config()
    assert cfg.api_key is None
    assert not cfg.enabled
