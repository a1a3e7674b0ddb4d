"""
app/llm/openai_provider.py
OpenAI-compatible chat completion provider (Groq, FastChat, vLLM, OpenAI)
"""
import logging
from typing import Dict, Any, Optional
from datetime import datetime

from openai import AsyncOpenAI, APIConnectionError, APIStatusError, APITimeoutError, OpenAIError

from .base import BaseLLMProvider, GenerationError, GenerationTimeoutError, LLMResponse, LLMProvider

logger = logging.getLogger(__name__)


class OpenAICompatibleProvider(BaseLLMProvider):

    def __init__(self, config: Dict[str, Any], client: Optional[AsyncOpenAI] = None):
        super().__init__(config)
        self.provider_name = LLMProvider.OPENAI

        self.base_url = config.get("openai_base_url", "https://api.groq.com/openai/v1")
        self.model = config.get("openai_model", "llama-3.1-70b-versatile")
        self.api_key = config.get("openai_api_key")

        if client is None and not self.api_key:
            raise ValueError("API key (APP_OPENAI_API_KEY) is required for the openai backend")

        # base_url strips trailing /chat/completions if present
        base_url = self.base_url.rstrip("/")
        if base_url.endswith("/chat/completions"):
            base_url = base_url[: -len("/chat/completions")]

        self._client = client or AsyncOpenAI(
            api_key=self.api_key,
            base_url=base_url,
            timeout=self.request_timeout,
            max_retries=0,
        )

        logger.info(
            f"OpenAI-compatible provider initialized: model={self.model}, "
            f"base_url={base_url}, timeout={self.request_timeout}s"
        )

    @property
    def model_name(self) -> Optional[str]:
        return self.model

    async def complete(self, prompt: str, **kwargs) -> LLMResponse:
        start = datetime.now()

        try:
            completion = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=kwargs.get("temperature", self.temperature),
                max_tokens=kwargs.get("max_tokens", self.max_tokens_default),
            )
        except APITimeoutError as e:
            logger.error(f"OpenAI-compatible request timed out after {self.request_timeout}s")
            raise GenerationTimeoutError(
                f"openai API request timeout after {self.request_timeout}s", provider=self.provider_name.value
            ) from e
        except APIStatusError as e:
            logger.error(f"OpenAI-compatible API error {e.status_code}: {e.message}")
            raise GenerationError(
                f"Error from openai API: HTTP {e.status_code}",
                provider=self.provider_name.value,
                status_code=e.status_code,
            ) from e
        except APIConnectionError as e:
            logger.error(f"OpenAI-compatible API unreachable: {e}")
            raise GenerationError(f"openai API unreachable: {e}", provider=self.provider_name.value) from e
        except OpenAIError as e:
            logger.error(f"OpenAI-compatible request failed: {e}")
            raise GenerationError(f"Error from openai API: {e}", provider=self.provider_name.value) from e

        choice = completion.choices[0] if completion.choices else None
        content = choice.message.content if choice and choice.message else None
        if not content or not content.strip():
            raise GenerationError(
                "Invalid response format from openai API: missing message content",
                provider=self.provider_name.value,
            )

        duration_ms = int((datetime.now() - start).total_seconds() * 1000)
        usage = completion.usage

        logger.info(
            f"OpenAI-compatible response: tokens={usage.total_tokens if usage else '?'}, "
            f"time={duration_ms}ms"
        )

        return LLMResponse(
            content=content,
            provider=self.provider_name,
            model=completion.model,
            tokens_used=usage.total_tokens if usage else None,
            finish_reason=choice.finish_reason,
            duration_ms=duration_ms,
            metadata={
                "prompt_tokens": usage.prompt_tokens if usage else None,
                "completion_tokens": usage.completion_tokens if usage else None,
                "id": completion.id,
            },
        )

    async def health_check(self) -> bool:
        try:
            completion = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": "Respond with 'OK'"}],
                max_tokens=5,
                temperature=0.0,
            )
            result = completion.choices[0].message.content or ""
            healthy = "OK" in result.upper()
            logger.info(f"OpenAI-compatible health check: {'PASSED' if healthy else 'UNEXPECTED RESPONSE'}")
            return healthy
        except Exception as e:
            logger.warning(f"OpenAI-compatible health check FAILED: {e}")
            return False

    def get_provider_type(self) -> LLMProvider:
        return self.provider_name
