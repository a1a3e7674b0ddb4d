"""
app/llm/__init__.py
Generation backend exports
"""
from .base import (
    BaseLLMProvider,
    GenerationError,
    GenerationTimeoutError,
    LLMResponse,
    LLMProvider
)
from .http_provider import HttpCompletionProvider, TextCompletionProvider
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAICompatibleProvider
from .factory import create_provider

__all__ = [
    "BaseLLMProvider",
    "GenerationError",
    "GenerationTimeoutError",
    "LLMResponse",
    "LLMProvider",
    "HttpCompletionProvider",
    "TextCompletionProvider",
    "OllamaProvider",
    "OpenAICompatibleProvider",
    "create_provider",
]
