"""
app/llm/http_provider.py
Plain HTTP text-completion providers built on httpx
"""
import logging
import time
from typing import Any, Dict, Optional

import httpx

from .base import BaseLLMProvider, GenerationError, GenerationTimeoutError, LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class HttpCompletionProvider(BaseLLMProvider):
    """
    Shared request handling for JSON-over-HTTP completion endpoints.

    Subclasses build the payload and name the field holding the text.
    """

    response_field = "text"

    def __init__(self, config: Dict[str, Any], transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(config)
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.request_timeout, transport=self._transport)

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    async def _post_json(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        provider = self.get_provider_type().value
        try:
            async with self._client() as client:
                response = await client.post(url, json=payload, headers=self._headers())
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            logger.error(f"{provider} request timed out after {self.request_timeout}s: {url}")
            raise GenerationTimeoutError(
                f"{provider} API request timeout after {self.request_timeout}s", provider=provider
            ) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"{provider} API returned status {status}: {url}")
            raise GenerationError(
                f"Error from {provider} API: HTTP {status}", provider=provider, status_code=status
            ) from e
        except httpx.RequestError as e:
            logger.error(f"{provider} API unreachable: {e}")
            raise GenerationError(f"{provider} API unreachable: {e}", provider=provider) from e
        except ValueError as e:
            logger.error(f"{provider} API returned a non-JSON body")
            raise GenerationError(f"Malformed response envelope from {provider} API", provider=provider) from e

    def _build_payload(self, prompt: str, **kwargs) -> Dict[str, Any]:
        return {"prompt": prompt}

    def _endpoint(self) -> str:
        raise NotImplementedError

    async def complete(self, prompt: str, **kwargs) -> LLMResponse:
        start = time.monotonic()
        data = await self._post_json(self._endpoint(), self._build_payload(prompt, **kwargs))
        text = self._require_text(data, self.response_field)
        duration_ms = int((time.monotonic() - start) * 1000)

        logger.info(
            f"{self.get_provider_type().value} completion: chars={len(text)}, time={duration_ms}ms"
        )

        return LLMResponse(
            content=text,
            provider=self.get_provider_type(),
            model=self.model_name,
            duration_ms=duration_ms,
            metadata={"endpoint": self._endpoint()},
        )


class TextCompletionProvider(HttpCompletionProvider):
    """Generic endpoint accepting ``{"prompt": ...}`` and answering ``{"text": ...}``."""

    response_field = "text"

    def __init__(self, config: Dict[str, Any], transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(config, transport=transport)
        self.url = config.get("text_completion_url", "http://localhost:8080/v1/complete")
        self.api_key = config.get("text_completion_api_key")

        logger.info(f"Text completion provider initialized: url={self.url}, timeout={self.request_timeout}s")

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _endpoint(self) -> str:
        return self.url

    async def health_check(self) -> bool:
        try:
            await self.complete("Respond with 'OK'")
            return True
        except GenerationError as e:
            logger.warning(f"Text completion health check FAILED: {e}")
            return False

    def get_provider_type(self) -> LLMProvider:
        return LLMProvider.TEXT_COMPLETION
