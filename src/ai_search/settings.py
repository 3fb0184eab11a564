from typing import Optional

from pydantic_settings import BaseSettings

from .llm.config import LLMConfig, load_llm_config


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables.

    Environment variables:
    - OPENAI_API_KEY: provider credential; when unset, mock results are served
    - OPENAI_BASE_URL: chat completions base URL (default: "https://api.openai.com/v1")
    - OPENAI_MODEL: model name (default: "gpt-4o-mini")
    - TEMPERATURE: sampling temperature (default: 0.7)
    - REQUEST_TIMEOUT: provider request timeout in seconds (default: 60.0)
    - APP_MESSAGE: optional banner shown under the page heading
    - LLM_CONFIG_PATH: optional YAML file with an ``llm:`` section
    - LOG_LEVEL: logging level (default: "INFO")
    """

    openai_api_key: Optional[str] = None
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"
    temperature: float = 0.7
    request_timeout: float = 60.0

    app_message: Optional[str] = None
    llm_config_path: Optional[str] = None
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    def llm_config(self) -> LLMConfig:
        base = LLMConfig(
            base_url=self.openai_base_url,
            model=self.openai_model,
            temperature=self.temperature,
            timeout=self.request_timeout,
            api_key=self.openai_api_key or None,
        )
        return load_llm_config(self.llm_config_path, base)


def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
