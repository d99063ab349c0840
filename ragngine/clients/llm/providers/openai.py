"""OpenAI LLM provider: LLMProvider implementation + registry builder."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from ragngine.clients.llm.base import LLMMessage, LLMProvider
from ragngine.core.exceptions import ConfigurationError, ExternalServiceError

logger = logging.getLogger(__name__)


class OpenAILLMProvider(LLMProvider):
    """OpenAI chat-completions client (gpt-4o-mini, gpt-3.5-turbo, etc.)."""

    def __init__(
        self,
        model: str,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        top_p: Optional[float] = None,
        timeout: float = 60.0,
        max_retries: int = 3,
    ) -> None:
        if not api_key:
            raise ConfigurationError("OpenAI API key required", details={"provider": "openai"})
        if not model:
            raise ConfigurationError("LLM model name required")
        self._model = model
        self._sampling: Dict[str, Any] = {
            k: v
            for k, v in (("temperature", temperature), ("max_tokens", max_tokens), ("top_p", top_p))
            if v is not None
        }
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
        )

    @property
    def provider(self) -> str:
        return "openai"

    @property
    def model_name(self) -> str:
        return self._model

    async def complete(self, prompt: str) -> str:
        return await self.chat([{"role": "user", "content": prompt}])

    async def chat(self, messages: List[LLMMessage]) -> str:
        """Native multi-turn chat with system-prompt support."""
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                **self._sampling,
            )
        except OpenAIError as exc:
            logger.error("OpenAI chat completion failed model=%s: %s", self._model, exc)
            raise ExternalServiceError(
                f"Failed to get response from OpenAI LLM: {exc}",
                details={"provider": "openai", "model": self._model},
                cause=exc,
            ) from exc
        return response.choices[0].message.content or ""

    async def test_connection(self) -> bool:
        try:
            await self._client.models.list()
            return True
        except Exception:
            return False


def openai_builder(config: Dict[str, Any]) -> OpenAILLMProvider:
    return OpenAILLMProvider(
        model=config.get("model", ""),
        api_key=config.get("api_key"),
        base_url=config.get("base_url"),
        temperature=config.get("temperature"),
        max_tokens=config.get("max_tokens"),
        top_p=config.get("top_p"),
        timeout=float(config.get("timeout", 60.0)),
        max_retries=int(config.get("max_retries", 3)),
    )
