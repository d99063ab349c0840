"""OpenAI embedding provider: EmbeddingProvider implementation + registry builder."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

from ragngine.clients.embedding.base import EmbeddingProvider
from ragngine.clients.embedding.config import SUPPORTED_EMBEDDING_MODELS
from ragngine.core.exceptions import ConfigurationError, UnsupportedProviderError

_MODEL_DIMENSIONS: Dict[str, int] = {
    "text-embedding-3-small": 1536,
    "text-embedding-3-large": 3072,
}


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """OpenAI embedding client (text-embedding-3-small / -large)."""

    def __init__(
        self,
        model: str = "text-embedding-3-small",
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        max_retries: int = 3,
    ) -> None:
        if not api_key:
            raise ConfigurationError("OpenAI API key required", details={"provider": "openai"})
        if model not in SUPPORTED_EMBEDDING_MODELS:
            raise UnsupportedProviderError(
                f"Embedding model {model!r} is not supported",
                details={"provider": "openai", "supported": list(SUPPORTED_EMBEDDING_MODELS)},
            )
        self._model = model
        self._dimension = _MODEL_DIMENSIONS[model]
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

    @property
    def dimension(self) -> int:
        return self._dimension

    async def embed_documents(self, texts: List[str]) -> List[List[float]]:
        if not texts:
            return []
        response = await self._client.embeddings.create(model=self._model, input=texts)
        # The API tags each item with its input index
        ordered = sorted(response.data, key=lambda item: item.index)
        return [list(item.embedding) for item in ordered]


def openai_builder(config: Dict[str, Any]) -> OpenAIEmbeddingProvider:
    return OpenAIEmbeddingProvider(
        model=config.get("model", "text-embedding-3-small"),
        api_key=config.get("api_key"),
        base_url=config.get("base_url"),
        timeout=float(config.get("timeout", 60.0)),
        max_retries=int(config.get("max_retries", 3)),
    )
