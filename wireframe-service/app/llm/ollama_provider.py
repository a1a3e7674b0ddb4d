"""
app/llm/ollama_provider.py
Ollama /api/generate provider
"""
import logging
from typing import Any, Dict, Optional

import httpx

from .base import LLMProvider
from .http_provider import HttpCompletionProvider

logger = logging.getLogger(__name__)


class OllamaProvider(HttpCompletionProvider):
    """Non-streaming Ollama generation: one POST, text in the ``response`` field."""

    response_field = "response"

    def __init__(self, config: Dict[str, Any], transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(config, transport=transport)
        self.base_url = config.get("ollama_url", "http://localhost:11434").rstrip("/")
        self.model = config.get("ollama_model", "llama3.1:latest")

        logger.info(
            f"Ollama provider initialized: model={self.model}, "
            f"base_url={self.base_url}, timeout={self.request_timeout}s"
        )

    @property
    def model_name(self) -> Optional[str]:
        return self.model

    def _endpoint(self) -> str:
        return f"{self.base_url}/api/generate"

    def _build_payload(self, prompt: str, **kwargs) -> Dict[str, Any]:
        return {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": kwargs.get("temperature", self.temperature),
                "num_predict": kwargs.get("max_tokens", self.max_tokens_default),
            },
        }

    async def health_check(self) -> bool:
        try:
            async with self._client() as client:
                response = await client.get(f"{self.base_url}/api/tags")
                response.raise_for_status()
                models = [m.get("name", "") for m in response.json().get("models", [])]
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Ollama health check FAILED: {e}")
            return False

        if self.model not in models:
            logger.warning(f"Ollama model '{self.model}' not installed. Available: {', '.join(models) or 'none'}")
            return False
        return True

    def get_provider_type(self) -> LLMProvider:
        return LLMProvider.OLLAMA
