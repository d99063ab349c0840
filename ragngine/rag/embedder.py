"""Embedder: wraps an EmbeddingProvider with concurrent batching and error context."""
from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, List

from ragngine.core.exceptions import ConfigurationError, ExternalServiceError, RagngineError

if TYPE_CHECKING:
    from ragngine.clients.embedding import EmbeddingProvider

logger = logging.getLogger(__name__)

_DEFAULT_BATCH = 64


class Embedder:
    """Embed texts via any EmbeddingProvider.

    Batches are sent all at once and awaited together; when one batch fails
    the others are cancelled. Provider failures are re-raised as
    ExternalServiceError naming the provider and model.
    """

    def __init__(self, provider: "EmbeddingProvider", *, batch_size: int = _DEFAULT_BATCH) -> None:
        if batch_size < 1:
            raise ConfigurationError(f"batch_size must be >= 1, got {batch_size!r}")
        self._provider = provider
        self._batch_size = batch_size

    @property
    def model_name(self) -> str:
        return self._provider.model_name

    @property
    def dimension(self) -> int:
        return self._provider.dimension

    @property
    def provider(self) -> "EmbeddingProvider":
        return self._provider

    async def embed_texts(self, texts: List[str]) -> List[List[float]]:
        if not texts:
            return []
        batches = [
            texts[start : start + self._batch_size]
            for start in range(0, len(texts), self._batch_size)
        ]
        results = await self._call(self._embed_batches(batches), count=len(texts))
        vectors = [v for batch in results for v in batch]
        if len(vectors) != len(texts):
            raise ExternalServiceError(
                f"Embedding provider returned {len(vectors)} vectors for {len(texts)} texts",
                details={"provider": self._provider.provider, "model": self.model_name},
            )
        logger.debug("Embedded %d texts in %d batches", len(texts), len(batches))
        return vectors

    async def embed_query(self, text: str) -> List[float]:
        return await self._call(self._provider.embed_query(text), count=1)

    async def _embed_batches(self, batches: List[List[str]]) -> List[List[List[float]]]:
        tasks = [asyncio.ensure_future(self._provider.embed_documents(b)) for b in batches]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _call(self, awaitable, *, count: int):
        try:
            return await awaitable
        except RagngineError:
            raise
        except Exception as exc:
            logger.error(
                "Embedding failed provider=%s model=%s texts=%d: %s",
                self._provider.provider, self.model_name, count, exc,
            )
            raise ExternalServiceError(
                f"Error occurred while generating embeddings: {exc}",
                details={"provider": self._provider.provider, "model": self.model_name},
                cause=exc,
            ) from exc
