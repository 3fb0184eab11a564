from .config import LLMConfig, load_llm_config
from .openai_client import OpenAIClient

__all__ = ["LLMConfig", "load_llm_config", "OpenAIClient"]
