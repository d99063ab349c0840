"""Embedding provider interface: text → vector(s)."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List


class EmbeddingProvider(ABC):
    """Minimal embedding interface used by the embedder, reranker and vector stores."""

    @property
    @abstractmethod
    def provider(self) -> str:
        """Provider name (e.g. openai)."""
        ...

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Concrete model id (e.g. text-embedding-3-small)."""
        ...

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Output vector dimension for this model."""
        ...

    @abstractmethod
    async def embed_documents(self, texts: List[str]) -> List[List[float]]:
        """Embed several texts. Returns one vector per input, in input order."""
        ...

    async def embed_query(self, text: str) -> List[float]:
        vectors = await self.embed_documents([text])
        return vectors[0]

    async def test_connection(self) -> bool:
        """Check that the provider is reachable. Returns True if OK."""
        try:
            await self.embed_query("test")
            return True
        except Exception:
            return False
