"""
app/llm/factory.py
Builds the configured generation backend
"""
import logging
from typing import Any, Dict, Optional

from .base import BaseLLMProvider, LLMProvider
from .http_provider import TextCompletionProvider
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAICompatibleProvider

logger = logging.getLogger(__name__)

_PROVIDERS = {
    LLMProvider.OLLAMA: OllamaProvider,
    LLMProvider.TEXT_COMPLETION: TextCompletionProvider,
    LLMProvider.OPENAI: OpenAICompatibleProvider,
}


def create_provider(config: Optional[Dict[str, Any]] = None) -> BaseLLMProvider:
    """
    Instantiate the backend named by ``config["backend"]``.

    Args:
        config: Provider configuration, defaults to ``settings.llm_config``

    Raises:
        ValueError: Unknown backend name
    """
    if config is None:
        from app.config import settings
        config = settings.llm_config

    backend = config.get("backend", LLMProvider.OLLAMA.value)
    try:
        provider_type = LLMProvider(backend)
    except ValueError:
        raise ValueError(
            f"Unknown generation backend '{backend}'. "
            f"Expected one of: {', '.join(p.value for p in LLMProvider)}"
        )

    logger.info(f"Creating generation backend: {provider_type.value}")
    return _PROVIDERS[provider_type](config)
