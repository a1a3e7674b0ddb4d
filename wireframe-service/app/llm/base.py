"""
app/llm/base.py
Abstract base class for generation backends
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Any
from dataclasses import dataclass
from enum import Enum


class LLMProvider(str, Enum):
    """Supported generation backends"""
    OLLAMA = "ollama"
    TEXT_COMPLETION = "text_completion"
    OPENAI = "openai"


class GenerationError(Exception):
    """Backend unreachable, returned an error status, or a malformed envelope"""

    def __init__(self, message: str, provider: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class GenerationTimeoutError(GenerationError):
    """Backend did not answer within the configured request timeout"""
    pass


@dataclass
class LLMResponse:
    """Standardized completion response"""
    content: str
    provider: LLMProvider
    model: Optional[str] = None
    tokens_used: Optional[int] = None
    finish_reason: Optional[str] = None
    duration_ms: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = None


class BaseLLMProvider(ABC):
    """
    One request/response exchange with a text-completion backend.

    Implementations raise ``GenerationError`` for every failure and never
    retry internally.
    """

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.request_timeout = config.get("request_timeout", 120.0)
        self.temperature = config.get("temperature", 0.7)
        self.max_tokens_default = config.get("max_tokens_default", 4096)

    @abstractmethod
    async def complete(self, prompt: str, **kwargs) -> LLMResponse:
        """
        Send a single prompt and return the generated text.

        Args:
            prompt: Full prompt text
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse object

        Raises:
            GenerationError: On network error, non-2xx status or missing text
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the backend is reachable

        Returns:
            True if backend is healthy
        """
        pass

    @abstractmethod
    def get_provider_type(self) -> LLMProvider:
        """Return provider type"""
        pass

    @property
    def model_name(self) -> Optional[str]:
        return None

    def _require_text(self, payload: Any, field_name: str) -> str:
        """Pull the completion text out of a decoded response envelope."""
        if not isinstance(payload, dict):
            raise GenerationError(
                f"Malformed response envelope from {self.get_provider_type().value} API",
                provider=self.get_provider_type().value,
            )
        text = payload.get(field_name)
        if not isinstance(text, str) or not text.strip():
            raise GenerationError(
                f"Empty response from {self.get_provider_type().value} API: missing '{field_name}' field",
                provider=self.get_provider_type().value,
            )
        return text
